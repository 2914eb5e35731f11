import math

import numpy as np
from numpy.typing import NDArray

from orbitalview.geometry.errors import DomainError
from orbitalview.geometry.vec import Vec2


class Transform:
    """Accumulating 2D affine transform.

    The matrix is 3x3 homogeneous in row-vector form: a point maps as
    ``[x, y, 1] @ M``, so the translation lives in the last row. Each new
    operation acts in the current working frame, i.e. it is applied to a point
    before everything accumulated so far (the same order a camera matrix is
    built in: translate to the screen center, scale, then translate to the
    world offset).
    """

    def __init__(self):
        self._matrix: NDArray[np.float64] = np.identity(3, dtype=np.float64)

    def reset(self) -> "Transform":
        self._matrix = np.identity(3, dtype=np.float64)
        return self

    def _compose(self, op: NDArray[np.float64]) -> "Transform":
        self._matrix = op @ self._matrix
        return self

    def translate(self, v: Vec2) -> "Transform":
        op = np.identity(3, dtype=np.float64)
        op[2, 0] = v[0]
        op[2, 1] = v[1]
        return self._compose(op)

    def scale(self, s: float, sy: float | None = None) -> "Transform":
        """Scale by ``s`` (uniform) or by ``s`` along x and ``sy`` along y."""
        op = np.identity(3, dtype=np.float64)
        op[0, 0] = s
        op[1, 1] = s if sy is None else sy
        return self._compose(op)

    def rotate(self, theta: float) -> "Transform":
        """Rotate counter-clockwise by ``theta`` radians."""
        c = math.cos(theta)
        s = math.sin(theta)
        op = np.array([
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)
        return self._compose(op)

    def apply(self, point: Vec2) -> Vec2:
        m = self._matrix
        x, y = point
        return (
            float(x * m[0, 0] + y * m[1, 0] + m[2, 0]),
            float(x * m[0, 1] + y * m[1, 1] + m[2, 1]),
        )

    def apply_vector(self, v: Vec2) -> Vec2:
        """Map a direction vector (linear part only, no translation)."""
        m = self._matrix
        x, y = v
        return (
            float(x * m[0, 0] + y * m[1, 0]),
            float(x * m[0, 1] + y * m[1, 1]),
        )

    def transformation(self) -> NDArray[np.float64]:
        """Read-only view of the accumulated matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def determinant(self) -> float:
        return float(np.linalg.det(self._matrix))

    def copy(self) -> "Transform":
        clone = Transform()
        clone._matrix = self._matrix.copy()
        return clone

    def inverted(self) -> "Transform":
        """New transform mapping back into the source space.

        Raises:
            DomainError: If the transform is singular (e.g. scaled by 0).
        """
        if abs(self.determinant()) < 1e-300:
            raise DomainError("Cannot invert a singular transform")
        clone = Transform()
        clone._matrix = np.linalg.inv(self._matrix)
        return clone

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:.6g}" for v in row) + "]" for row in self._matrix)
        return f"Transform([{rows}])"
