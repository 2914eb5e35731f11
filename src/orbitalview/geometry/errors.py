class GeometryError(Exception):
    """Base class for errors raised by the geometry package."""


class DomainError(GeometryError, ValueError):
    """An input lies outside the domain of an operation (e.g. ``a <= 0``)."""


class CapacityError(GeometryError, RuntimeError):
    """A fixed-capacity array was asked to hold more than its bound.

    This signals a broken invariant in the caller, not a recoverable condition.
    """
