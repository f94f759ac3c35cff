"""
Mathematical constants and default tuning values for the control primitives.
"""

import math

# Mathematical constants
PI = math.pi
TWO_PI = 2 * math.pi
HALF_PI = math.pi / 2

# Conversion factors
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Control loop defaults
DEFAULT_DT = 0.02             # Physics tick in seconds (50 Hz)
DEFAULT_HISTORY_LENGTH = 4    # Enough samples for the longest stencil

# Smoothing
DEFAULT_FILTER_K = 3.0        # Weight of history in simple_filter

# Control output bound (normalized stick deflection)
DEFAULT_CONTROL_LIMIT = 1.0

# Statistics
DEFAULT_MEANSQR_WINDOW = 10   # Samples used for windowed mean of squares
