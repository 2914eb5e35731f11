"""Origin-centered ellipse with its major axis along x.

Besides the closed-form geometry this module clips an ellipse against a
viewport rectangle: the rectangle is mapped into ellipse space, its edges are
intersected with the boundary and the arcs between neighbouring crossings
are kept where they fall inside the rectangle.
"""
import math
from dataclasses import dataclass, field

import numpy as np
from numba import njit

from orbitalview.geometry import logger
from orbitalview.geometry.constants import (
    DEFAULT_ARC_RESOLUTION,
    EPSILON,
    MAX_EDGE_CROSSINGS,
    MAX_LINE_CROSSINGS,
    TWO_PI,
)
from orbitalview.geometry.errors import DomainError
from orbitalview.geometry.fixedarray import FixedArray
from orbitalview.geometry.fmt import format_angles, format_vec
from orbitalview.geometry.line import Line
from orbitalview.geometry.quadratic import solve_quadratic
from orbitalview.geometry.rectangle import Rectangle
from orbitalview.geometry.transform import Transform
from orbitalview.geometry.vec import Vec2, v_distance

AngleRange = tuple[float, float]


@njit(cache=True)
def _arc_length_trapezoid(a2: float, b2: float, ts: float, te: float, n: int) -> float:
    """Composite trapezoid rule over n evaluation points, ts <= te."""
    h = (te - ts) / (n - 1)
    total = 0.0
    for i in range(n):
        x = ts + i * h
        f = np.sqrt(a2 * np.sin(x) ** 2 + b2 * np.cos(x) ** 2)
        if i == 0 or i == n - 1:
            total += 0.5 * f
        else:
            total += f
    return total * h


@dataclass(frozen=True)
class Ellipse:
    """Immutable ellipse given by its major semi-axis and eccentricity.

    Args:
        a (float): Major semi-axis (a > 0).
        e (float): Numeric eccentricity (0 <= e < 1).

    Raises:
        DomainError: If ``a`` or ``e`` is out of range.
    """
    a: float
    e: float
    b: float = field(init=False, repr=False, compare=False)
    focus: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not math.isfinite(self.a) or self.a <= 0:
            raise DomainError(f"Major semi-axis must be positive, got a={self.a}")
        if not math.isfinite(self.e) or not 0 <= self.e < 1:
            raise DomainError(f"Eccentricity must lie in [0, 1), got e={self.e}")
        object.__setattr__(self, "b", self.a * math.sqrt(1 - self.e ** 2))
        object.__setattr__(self, "focus", self.a * self.e)

    @classmethod
    def from_ab(cls, a: float, b: float) -> "Ellipse":
        """Build an ellipse from both semi-axes (0 < b <= a)."""
        if not math.isfinite(a) or a <= 0:
            raise DomainError(f"Major semi-axis must be positive, got a={a}")
        if not math.isfinite(b) or b <= 0 or b > a:
            raise DomainError(f"Minor semi-axis must lie in (0, a], got a={a} b={b}")
        return cls(a, math.sqrt(max(0.0, 1 - (b / a) ** 2)))

    def point(self, t: float) -> Vec2:
        """Point at eccentric angle ``t`` (parametric form)."""
        return (self.a * math.cos(t), self.b * math.sin(t))

    def point_angle(self, theta: float) -> Vec2:
        """Point at polar angle ``theta`` measured from the center."""
        r = self.a * self.b / math.hypot(self.b * math.cos(theta), self.a * math.sin(theta))
        return (r * math.cos(theta), r * math.sin(theta))

    def arc_length(self, ts: float, te: float, resolution: int = DEFAULT_ARC_RESOLUTION) -> float:
        """Length of the arc between the eccentric angles ``ts`` and ``te``.

        Integrates ``sqrt(a² sin²x + b² cos²x)`` numerically; the higher the
        resolution, the more accurate the result. Swapping the limits negates
        the result.

        Args:
            ts (float): Start parameter of the arc.
            te (float): End parameter of the arc.
            resolution (int): Number of evaluation points (>= 2).
        """
        n = int(resolution)
        if n < 2:
            raise DomainError(f"Arc length needs at least 2 evaluation points, got {resolution}")
        if ts == te:
            return 0.0
        lo, hi, sign = (ts, te, 1.0) if ts < te else (te, ts, -1.0)
        return sign * float(_arc_length_trapezoid(self.a ** 2, self.b ** 2, float(lo), float(hi), n))

    def perimeter(self, resolution: int = DEFAULT_ARC_RESOLUTION) -> float:
        return self.arc_length(0.0, TWO_PI, resolution)

    def foci(self) -> tuple[float, float]:
        """Both foci as x-values."""
        return (-self.focus, self.focus)

    def foci_points(self) -> tuple[Vec2, Vec2]:
        """Both foci as points on the x-axis."""
        return ((-self.focus, 0.0), (self.focus, 0.0))

    def contains(self, item: Vec2 | Rectangle) -> bool:
        """Containment of a point, or of all four corners of a rectangle."""
        if isinstance(item, Rectangle):
            return all(self._contains_point(c) for c in item.corners())
        return self._contains_point(item)

    def _contains_point(self, p: Vec2) -> bool:
        x, y = p
        if x == 0 and y == 0:
            return True
        if y == 0 and -self.a <= x <= self.a:
            return True
        if x == 0 and -self.b <= y <= self.b:
            return True
        f1, f2 = self.foci_points()
        return 2 * self.a >= v_distance(f1, p) + v_distance(f2, p)

    def t_at_x(self, x: float) -> float:
        """Principal eccentric angle in [0, π] for the given x."""
        return math.acos(min(1.0, max(-1.0, x / self.a)))

    def t_at_y(self, y: float) -> float:
        """Principal eccentric angle in [-π/2, π/2] for the given y."""
        return math.asin(min(1.0, max(-1.0, y / self.b)))

    def t_at_point(self, p: Vec2) -> float:
        """Eccentric angle in [0, 2π) of a point on the ellipse.

        Equivalent to ``t_at_x`` with the lower half (y < 0) flipped over to
        ``2π - t``, but stays well conditioned near the vertices where acos
        is not.
        """
        t = math.atan2(p[1] / self.b, p[0] / self.a)
        if t < 0:
            t += TWO_PI
        # atan2 gives -0.0 for y == -0.0, and -tiny + 2π rounds to 2π
        if t == 0.0 or t >= TWO_PI:
            return 0.0
        return t

    def bounding_rect(self) -> Rectangle:
        return Rectangle((-self.a, -self.b), (self.a, self.b))

    def intersect_points(self, line: Line, clip_to_line: bool = False) -> FixedArray[Vec2]:
        """Points where ``line`` crosses the ellipse.

        Substitutes ``p + t·d`` into ``b²x² + a²y² = a²b²`` and solves for t.

        Args:
            line (Line): The line to intersect with.
            clip_to_line (bool): Drop crossings outside ``0 <= t <= 1``.

        Returns:
            FixedArray[Vec2]: Up to two points, ordered along the line.
        """
        px, py = line.p
        dx, dy = line.d
        a2 = self.a ** 2
        b2 = self.b ** 2

        A = b2 * dx ** 2 + a2 * dy ** 2
        B = 2 * (b2 * px * dx + a2 * py * dy)
        C = b2 * px ** 2 + a2 * py ** 2 - a2 * b2

        points: FixedArray[Vec2] = FixedArray(MAX_LINE_CROSSINGS)
        for t in solve_quadratic(A, B, C):
            if clip_to_line and not -EPSILON <= t <= 1 + EPSILON:
                continue
            points.push_back(line.point(t))
        return points

    def clip(self, rect: Rectangle, transform: Transform) -> list[AngleRange]:
        """Angle ranges of the boundary that lie inside the transformed rectangle.

        Args:
            rect (Rectangle): Viewport in object space.
            transform (Transform): Maps object space into ellipse space.

        Returns:
            list[tuple[float, float]]: Visible ``(start, end)`` eccentric angle
            ranges ordered by start. ``end`` exceeds 2π for a range that wraps
            through 0. ``[(0, 2π)]`` means nothing is clipped, ``[]`` means
            everything is.
        """
        angles: FixedArray[float] = FixedArray(MAX_EDGE_CROSSINGS)

        for start, end in rect.edges():
            line = Line.from_points(transform.apply(start), transform.apply(end))
            if line.is_degenerate:
                logger.debug("Skipping degenerate rect edge at %s", format_vec(line.p))
                continue
            for p in self.intersect_points(line, clip_to_line=True):
                t = self.t_at_point(p)
                logger.debug("Intersection point %s maps to t=%.6f", format_vec(p), t)
                angles.push_back(t)

        angles.sort()
        crossings = _merge_crossings(angles)
        logger.debug("Crossings (%d): %s", len(crossings), format_angles(crossings))

        if len(crossings) < 2:
            # The rect boundary never crosses the ellipse: either the rect lies
            # within the ellipse or it encloses it.
            if not self.contains(transform.apply(rect.bottom_left)):
                logger.debug("Complete ellipse is visible - nothing is clipped")
                return [(0.0, TWO_PI)]
            logger.debug("Complete ellipse is invisible - everything is clipped away")
            return []

        return self._visible_arcs(crossings, rect, transform)

    def _visible_arcs(self, crossings: list[float], rect: Rectangle, transform: Transform) -> list[AngleRange]:
        # Tangent contacts and collapsed edges do not switch between inside and
        # outside, so crossings need not alternate. Each arc between neighbouring
        # crossings is tested at its midpoint and adjacent visible arcs are joined.
        arcs = [(crossings[i], crossings[i + 1]) for i in range(len(crossings) - 1)]
        arcs.append((crossings[-1], TWO_PI + crossings[0]))

        result: list[AngleRange] = []
        for ts, te in arcs:
            if not rect.contains_transformed(transform, self.point((ts + te) / 2.0)):
                continue
            if result and math.isclose(result[-1][1], ts, abs_tol=EPSILON):
                result[-1] = (result[-1][0], te)
            else:
                result.append((ts, te))

        if len(result) > 1 and math.isclose(result[-1][1], TWO_PI + result[0][0], abs_tol=EPSILON):
            result[-1] = (result[-1][0], TWO_PI + result[0][1])
            result.pop(0)

        if len(result) == 1 and result[0][1] - result[0][0] >= TWO_PI - EPSILON:
            result = [(0.0, TWO_PI)]

        logger.debug("Visible arcs: %s", result)
        return result

    def __str__(self) -> str:
        return f"a: {self.a:g} b: {self.b:g} e: {self.e:g}"


def _merge_crossings(angles: FixedArray[float]) -> list[float]:
    """Collapse sorted angles that denote the same crossing.

    A corner lying on the ellipse is reported by both of its edges, and a
    crossing at t=0 may come back as 2π.
    """
    merged: list[float] = []
    for t in angles:
        if merged and t - merged[-1] <= EPSILON:
            continue
        merged.append(t)
    if len(merged) > 1 and merged[0] + TWO_PI - merged[-1] <= EPSILON:
        merged.pop()
    return merged
