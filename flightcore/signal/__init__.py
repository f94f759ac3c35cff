"""
Smoothing and statistics of sampled signals.
"""

from .smoothing import simple_filter
from .statistics import meansqr

__all__ = ["simple_filter", "meansqr"]
