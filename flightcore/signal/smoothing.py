"""
Recency-weighted low-pass filtering of scalar samples.
"""

import numpy as np


@np.errstate(divide='ignore', invalid='ignore')
def simple_filter(new_value, old_value, k):
    """
    Blend a new sample into the previous filtered value.

    Single-pole low-pass filter: (old_value * k + new_value) / (k + 1).
    k = 0 passes new_value through, larger k weights history more. It is an
    exponential moving average with smoothing factor 1 / (k + 1).

    No state is kept; feed the returned value back in as old_value on the
    next tick.

    Args:
        new_value: Latest raw sample
        old_value: Filter output from the previous tick
        k: History weight, k >= 0

    Returns:
        Filtered value
    """
    k = np.asarray(k, dtype=np.float64)[()]
    return (old_value * k + new_value) / (k + 1.0)
