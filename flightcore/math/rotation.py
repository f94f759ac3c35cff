"""
Quaternion helpers and quaternion-to-matrix conversion.

Components are stored in (x, y, z, w) order, scalar last.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass
class Quaternion:
    """
    Rotation quaternion q = w + x*i + y*j + z*k.

    Not required to be unit length; use normalize_quaternion before
    treating it as a pure rotation.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> 'Quaternion':
        """Quaternion of the zero rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> 'Quaternion':
        """Build from a length-4 sequence in (x, y, z, w) order."""
        if len(values) != 4:
            raise ValueError("Quaternion must have 4 elements")
        return cls(float(values[0]), float(values[1]),
                   float(values[2]), float(values[3]))

    def as_array(self) -> np.ndarray:
        """Get components as numpy vector [x, y, z, w]."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    @property
    def norm(self) -> float:
        """Euclidean norm of the four components."""
        q = self.as_array()
        return float(np.sqrt(np.dot(q, q)))

    def copy(self) -> 'Quaternion':
        return Quaternion(self.x, self.y, self.z, self.w)

    def __str__(self) -> str:
        return (f"Quaternion(x={self.x:.4f}, y={self.y:.4f}, "
                f"z={self.z:.4f}, w={self.w:.4f})")


QuaternionLike = Union[Quaternion, Sequence[float], np.ndarray]


def _as_quaternion(q: QuaternionLike) -> Quaternion:
    if isinstance(q, Quaternion):
        return q
    return Quaternion.from_array(q)


@np.errstate(divide='ignore', invalid='ignore')
def normalize_quaternion(q: QuaternionLike) -> Quaternion:
    """
    Scale a quaternion to unit length.

    A zero quaternion has no direction; its components come back as NaN.

    Args:
        q: Quaternion or (x, y, z, w) sequence

    Returns:
        Quaternion: New quaternion with norm 1
    """
    arr = _as_quaternion(q).as_array()
    n = np.sqrt(np.dot(arr, arr))
    return Quaternion.from_array(arr / n)


def rotation_matrix(q: QuaternionLike) -> np.ndarray:
    """
    Create the 4x4 homogeneous rotation matrix for a quaternion.

    The quaternion is normalized first. The upper-left 3x3 block holds the
    rotation, element [3, 3] is 1 and the rest of row/column 3 is zero.
    Indices are [row, col].

    Args:
        q: Quaternion or (x, y, z, w) sequence

    Returns:
        np.ndarray: 4x4 rotation matrix
    """
    q = normalize_quaternion(q)
    x, y, z, w = q.x, q.y, q.z, q.w

    mat = np.zeros((4, 4))
    mat[3, 3] = 1.0
    mat[0, 0] = 1.0 - 2.0 * y * y - 2.0 * z * z
    mat[1, 0] = 2.0 * x * y + 2.0 * z * w
    mat[2, 0] = 2.0 * x * z - 2.0 * y * w
    mat[0, 1] = 2.0 * x * y - 2.0 * z * w
    mat[1, 1] = 1.0 - 2.0 * x * x - 2.0 * z * z
    mat[2, 1] = 2.0 * y * z + 2.0 * x * w
    mat[0, 2] = 2.0 * x * z + 2.0 * y * w
    mat[1, 2] = 2.0 * y * z - 2.0 * x * w
    mat[2, 2] = 1.0 - 2.0 * x * x - 2.0 * y * y
    return mat
