from dataclasses import dataclass

from orbitalview.geometry.constants import EPSILON
from orbitalview.geometry.vec import Vec2, v_add, v_cross, v_norm, v_scale, v_sub


@dataclass(frozen=True)
class Line:
    """Parametric line ``p + t·d``.

    As a bounded line (segment) only ``0 <= t <= 1`` is meaningful, which
    spans ``p`` to ``p + d``.
    """
    p: Vec2
    d: Vec2

    @classmethod
    def from_points(cls, start: Vec2, end: Vec2) -> "Line":
        return cls(start, v_sub(end, start))

    @property
    def is_degenerate(self) -> bool:
        """True if the direction vector has (numerically) zero length."""
        return v_norm(self.d) <= EPSILON * max(1.0, v_norm(self.p))

    def point(self, t: float) -> Vec2:
        return v_add(self.p, v_scale(self.d, t))

    def parameter_at(self, point: Vec2) -> float:
        """Solve ``point = p + t·d`` for t using the dominant component of d."""
        if abs(self.d[0]) >= abs(self.d[1]):
            return (point[0] - self.p[0]) / self.d[0]
        return (point[1] - self.p[1]) / self.d[1]

    def contains_by_bounds(self, point: Vec2) -> bool:
        """True if the point lies on the line and within ``0 <= t <= 1``."""
        rel = v_sub(point, self.p)
        if self.is_degenerate:
            return v_norm(rel) <= EPSILON * max(1.0, v_norm(self.p))

        # Distance from the infinite line, scaled by |d|
        if abs(v_cross(self.d, rel)) > EPSILON * v_norm(self.d) * max(1.0, v_norm(rel)):
            return False

        t = self.parameter_at(point)
        return -EPSILON <= t <= 1.0 + EPSILON
