"""
Numeric primitives for a real-time flight control loop.

This package provides allocation-light, side-effect-free helpers for:
- Quaternion normalization and rotation matrices
- Finite-difference derivatives and extrapolation
- Low-pass smoothing and mean-square statistics
- Clamping of control outputs
- Reuse of scratch buffers
"""

__version__ = "1.0.0"
__author__ = "Flight Core Team"

from .math import (Quaternion, Vector3, normalize_quaternion, rotation_matrix,
                   divide_vector, clamp, clamp_abs, derivative1_short,
                   derivative1_middle, derivative1, derivative2,
                   derivative2_long, extrapolate)
from .signal import simple_filter, meansqr
from .buffers import realloc
from .config import Config

__all__ = [
    "Quaternion",
    "Vector3",
    "normalize_quaternion",
    "rotation_matrix",
    "divide_vector",
    "clamp",
    "clamp_abs",
    "derivative1_short",
    "derivative1_middle",
    "derivative1",
    "derivative2",
    "derivative2_long",
    "extrapolate",
    "simple_filter",
    "meansqr",
    "realloc",
    "Config"
]
