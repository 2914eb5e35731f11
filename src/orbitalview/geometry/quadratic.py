import math

import numpy as np
from numba import njit, float64, types

from orbitalview.geometry.constants import MAX_LINE_CROSSINGS
from orbitalview.geometry.fixedarray import FixedArray

## Relative size below which the leading coefficient is treated as zero.
COEFFICIENT_EPS = 1e-12

## Relative tolerance for snapping a nearly-zero discriminant to zero.
DISCRIMINANT_EPS = 1e-12


@njit(types.UniTuple(float64, 3)(float64, float64, float64), cache=True)
def _quadratic_roots(A: np.float64, B: np.float64, C: np.float64):
    """Roots of Ax² + Bx + C = 0 as (count, x0, x1) with x0 <= x1."""
    if A == 0.0 and B == 0.0:
        return 0.0, 0.0, 0.0

    # Linear only when A is small next to B and C and its root, near -B/A,
    # runs off to infinity. A short direction vector alone keeps A·C vs B²
    # balanced and stays quadratic.
    linear = A == 0.0 or (
        abs(A) <= COEFFICIENT_EPS * max(abs(B), abs(C))
        and abs(A * C) <= COEFFICIENT_EPS * B * B
    )
    if linear:
        if B == 0.0:
            return 0.0, 0.0, 0.0
        x = -C / B
        return 1.0, x, x

    D = B * B - 4.0 * A * C

    # Cancellation in B² - 4AC leaves residue of order eps * max(B², |4AC|)
    d_scale = max(B * B, abs(4.0 * A * C))
    if abs(D) <= DISCRIMINANT_EPS * d_scale:
        D = 0.0

    if D < 0.0:
        return 0.0, 0.0, 0.0

    if D == 0.0:
        x = -B / (2.0 * A)
        return 1.0, x, x

    # q carries the sign of B so neither root loses digits to cancellation
    q = -0.5 * (B + math.copysign(math.sqrt(D), B))
    x0 = q / A
    x1 = C / q
    if x0 > x1:
        x0, x1 = x1, x0
    return 2.0, x0, x1


def solve_quadratic(A: float, B: float, C: float) -> FixedArray[float]:
    """Real roots of ``Ax² + Bx + C = 0``.

    A repeated root is reported once. When ``A`` is (numerically) zero the
    equation is solved as ``Bx + C = 0``; if ``B`` is zero too there are no
    roots.

    Returns:
        FixedArray[float]: 0, 1 or 2 roots in ascending order.
    """
    count, x0, x1 = _quadratic_roots(float(A), float(B), float(C))
    roots: FixedArray[float] = FixedArray(MAX_LINE_CROSSINGS)
    if count >= 1:
        roots.push_back(float(x0))
    if count >= 2:
        roots.push_back(float(x1))
    return roots
