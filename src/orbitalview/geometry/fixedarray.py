from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from orbitalview.geometry.errors import CapacityError

T = TypeVar("T")


class FixedArray(Generic[T]):
    """A fixed-maximum sized array with a dynamic count of live values.

    Used where the number of results is bounded up front, such as the roots of
    a quadratic or the crossings of a line with an ellipse. All slots are
    allocated once; appending past the capacity raises ``CapacityError``.

    Indexing is not bounds checked against the live length: reading a slot
    beyond ``len(self)`` returns whatever the slot holds (``None`` if it was
    never written).
    """

    __slots__ = ("_capacity", "_length", "_items")

    def __init__(self, capacity: int, items: Iterable[T] = ()):
        if capacity < 1:
            raise CapacityError("Fixed array must have at least one slot")
        self._capacity = capacity
        self._length = 0
        self._items: list[Any] = [None] * capacity
        for item in items:
            if self._length >= capacity:
                raise CapacityError("Initial items exceed fixed array capacity")
            self._items[self._length] = item
            self._length += 1

    def push_back(self, value: T) -> T:
        """Append one element.

        Raises:
            CapacityError: If the array is already full.
        """
        if self._length >= self._capacity:
            raise CapacityError(f"Exceeding maximum fixed array size ({self._capacity})")
        self._items[self._length] = value
        self._length += 1
        return value

    def emplace_back(self, factory: Callable[..., T], *args, **kwargs) -> T:
        """Construct ``factory(*args, **kwargs)`` and append it."""
        if self._length >= self._capacity:
            raise CapacityError(f"Exceeding maximum fixed array size ({self._capacity})")
        return self.push_back(factory(*args, **kwargs))

    def front(self) -> T:
        return self._items[0]

    def back(self) -> T:
        return self._items[self._length - 1]

    @property
    def size(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._length == 0

    def resize(self, size: int) -> None:
        """Set the live length directly, usually to truncate."""
        if size < 0 or size > self._capacity:
            raise CapacityError(f"Cannot resize fixed array of capacity {self._capacity} to {size}")
        self._length = size

    def sort(self, key=None) -> None:
        self._items[:self._length] = sorted(self._items[:self._length], key=key)

    def to_list(self) -> list[T]:
        return self._items[:self._length]

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items[:self._length])

    def __eq__(self, other) -> bool:
        if isinstance(other, FixedArray):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        if not self._length:
            return "[ ]"
        return "[ " + ", ".join(repr(item) for item in self) + " ]"
