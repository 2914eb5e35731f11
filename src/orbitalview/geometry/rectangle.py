from dataclasses import dataclass

from orbitalview.geometry.constants import EPSILON
from orbitalview.geometry.transform import Transform
from orbitalview.geometry.vec import Vec2, v_cross, v_norm, v_sub


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by two opposite corners in object space."""
    bottom_left: Vec2
    top_right: Vec2

    @property
    def bottom_right(self) -> Vec2:
        return (self.top_right[0], self.bottom_left[1])

    @property
    def top_left(self) -> Vec2:
        return (self.bottom_left[0], self.top_right[1])

    @property
    def width(self) -> float:
        return abs(self.top_right[0] - self.bottom_left[0])

    @property
    def height(self) -> float:
        return abs(self.top_right[1] - self.bottom_left[1])

    @property
    def center(self) -> Vec2:
        return (
            (self.bottom_left[0] + self.top_right[0]) / 2.0,
            (self.bottom_left[1] + self.top_right[1]) / 2.0,
        )

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Corners in order: bottom left, bottom right, top right, top left."""
        return (self.bottom_left, self.bottom_right, self.top_right, self.top_left)

    def edges(self) -> tuple[tuple[Vec2, Vec2], ...]:
        """Edges as (start, end) pairs: bottom, left, top, right."""
        return (
            (self.bottom_left, self.bottom_right),
            (self.bottom_left, self.top_left),
            (self.top_right, self.top_left),
            (self.top_right, self.bottom_right),
        )

    def contains(self, point: Vec2) -> bool:
        x0, x1 = sorted((self.bottom_left[0], self.top_right[0]))
        y0, y1 = sorted((self.bottom_left[1], self.top_right[1]))
        return x0 <= point[0] <= x1 and y0 <= point[1] <= y1

    def contains_transformed(self, transform: Transform, point: Vec2) -> bool:
        """True if ``point`` lies in the quadrilateral the corners map to.

        ``point`` is given in the space ``transform`` maps into. Under an
        affine map the rectangle becomes a parallelogram, so the point is
        inside when it is on the same side of all four edges.
        """
        quad = [transform.apply(c) for c in self.corners()]
        size = max(v_norm(v_sub(quad[2], quad[0])), v_norm(v_sub(quad[3], quad[1])), 1.0)
        tol = EPSILON * size * size

        sides = []
        for i in range(4):
            start = quad[i]
            end = quad[(i + 1) % 4]
            sides.append(v_cross(v_sub(end, start), v_sub(point, start)))

        return all(s >= -tol for s in sides) or all(s <= tol for s in sides)
