"""
Three-component vector type and element-wise arithmetic.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass
class Vector3:
    """Plain 3D vector with independent x, y, z components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]) -> 'Vector3':
        """Build from a length-3 sequence."""
        if len(values) != 3:
            raise ValueError("Vector3 must have 3 elements")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_array(self) -> np.ndarray:
        """Get components as numpy vector [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def copy(self) -> 'Vector3':
        return Vector3(self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"Vector3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


VectorLike = Union[Vector3, Sequence[float], np.ndarray]


def _as_array(v: VectorLike) -> np.ndarray:
    if isinstance(v, Vector3):
        return v.as_array()
    return Vector3.from_array(v).as_array()


@np.errstate(divide='ignore', invalid='ignore')
def divide_vector(lhs: VectorLike, rhs: VectorLike) -> Vector3:
    """
    Divide two vectors component by component.

    Zero components in rhs give inf or NaN in the matching result component.

    Args:
        lhs: Dividend vector
        rhs: Divisor vector

    Returns:
        Vector3: (lhs.x / rhs.x, lhs.y / rhs.y, lhs.z / rhs.z)
    """
    return Vector3.from_array(_as_array(lhs) / _as_array(rhs))
