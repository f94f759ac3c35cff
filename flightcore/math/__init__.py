"""
Mathematical primitives for the control loop.
"""

from .rotation import Quaternion, normalize_quaternion, rotation_matrix
from .vector import Vector3, divide_vector
from .bounds import clamp, clamp_abs
from .calculus import (derivative1_short, derivative1_middle, derivative1,
                       derivative2, derivative2_long, extrapolate)
from .constants import *

__all__ = [
    "Quaternion", "normalize_quaternion", "rotation_matrix",
    "Vector3", "divide_vector",
    "clamp", "clamp_abs",
    "derivative1_short", "derivative1_middle", "derivative1",
    "derivative2", "derivative2_long", "extrapolate",
]
