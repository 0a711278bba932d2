"""
Value spaces for multi-dimensional elastic systems.

A space tells the force model how to do arithmetic and measure extent
for its value type, without the value type itself knowing about springs:

  - coerce(v): input -> float array of shape (dim,)
  - difference(a, b): displacement from b to a
  - distance(a, b): scalar distance used for snap falloff
  - norm(x): displacement norm compared against min/max stretch
  - direction(x): unit direction in which norm(x) grows (zero if undefined)
  - project(x, v): constrain the state after integration
"""

from typing import Any, Tuple

import numpy as np

_EPS = 1e-12


class VectorSpace:
    """Euclidean R^dim. Extent bounds the length of the value vector."""

    def __init__(self, dim: int) -> None:
        if dim < 1:
            raise ValueError(f"dim must be >= 1, got {dim}")
        self.dim = int(dim)

    def coerce(self, value: Any) -> np.ndarray:
        arr = np.array(value, dtype=float).reshape(-1)
        if arr.shape != (self.dim,):
            raise ValueError(f"expected a value of size {self.dim}, got shape {np.shape(value)}")
        return arr

    def zero(self) -> np.ndarray:
        return np.zeros(self.dim)

    def difference(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return a - b

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        return float(np.linalg.norm(a - b))

    def norm(self, x: np.ndarray) -> float:
        return float(np.linalg.norm(x))

    def direction(self, x: np.ndarray) -> np.ndarray:
        n = np.linalg.norm(x)
        if n < _EPS:
            return np.zeros(self.dim)
        return x / n

    def project(self, x: np.ndarray, v: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return x, v

    def __repr__(self) -> str:
        return f"VectorSpace(dim={self.dim})"


class QuaternionSpace(VectorSpace):
    """
    Unit quaternions (w, x, y, z) embedded in R^4.

    Extent bounds the rotation angle from identity, in radians. q and -q are
    the same rotation: differences are taken in the hemisphere of the
    reference, and snap falloff uses the angle between rotations.
    """

    IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])
    IDENTITY.setflags(write=False)

    def __init__(self) -> None:
        super().__init__(4)

    @staticmethod
    def normalize(q: np.ndarray) -> np.ndarray:
        n = np.linalg.norm(q)
        if n < _EPS:
            return QuaternionSpace.IDENTITY.copy()
        return q / n

    def _align(self, a: np.ndarray, reference: np.ndarray) -> np.ndarray:
        a = self.normalize(a)
        return -a if np.dot(a, reference) < 0 else a

    def difference(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        return self._align(a, b) - b

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """Angle of the relative rotation between a and b."""
        c = abs(float(np.dot(self.normalize(a), self.normalize(b))))
        return 2.0 * float(np.arccos(min(c, 1.0)))

    def norm(self, x: np.ndarray) -> float:
        return self.distance(x, self.IDENTITY)

    def direction(self, x: np.ndarray) -> np.ndarray:
        d = self._align(x, self.IDENTITY) - self.IDENTITY
        n = np.linalg.norm(d)
        if n < _EPS:
            return np.zeros(4)
        return d / n

    def project(self, x: np.ndarray, v: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Renormalize the rotation and drop the velocity component off the unit sphere."""
        q = self.normalize(x)
        return q, v - np.dot(v, q) * q

    def __repr__(self) -> str:
        return "QuaternionSpace()"
