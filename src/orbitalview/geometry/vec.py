import math
from typing import Tuple


Vec2 = Tuple[float, float]

# ---------------------------
# basic 2D vector operations
# ---------------------------

def v_add(a: Vec2, b: Vec2) -> Vec2:
    """Elementwise a + b."""
    return (a[0] + b[0], a[1] + b[1])

def v_sub(a: Vec2, b: Vec2) -> Vec2:
    """Elementwise a - b (vector from b to a)."""
    return (a[0] - b[0], a[1] - b[1])

def v_cross(a: Vec2, b: Vec2) -> float:
    """z-component of the 3D cross product a × b.

    Positive when b lies counter-clockwise of a.
    """
    return a[0]*b[1] - a[1]*b[0]

def v_scale(a: Vec2, s: float) -> Vec2:
    """Scale vector a by scalar s."""
    return (a[0]*s, a[1]*s)

def v_norm(a: Vec2) -> float:
    """Euclidean norm |a|."""
    return math.hypot(a[0], a[1])

def v_distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between the points a and b."""
    return math.hypot(a[0] - b[0], a[1] - b[1])
