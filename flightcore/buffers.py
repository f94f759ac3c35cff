"""
Reuse of caller-owned scratch buffers between ticks.
"""

import numpy as np
from typing import Optional, Sequence, Tuple


def realloc(storage: Optional[Sequence], capacity: int,
            dtype=float) -> Tuple[Sequence, bool]:
    """
    Make sure a buffer holds at least `capacity` elements.

    An existing buffer that is large enough is returned as is. Otherwise a
    new zero-filled numpy array of exactly `capacity` elements replaces it;
    old contents are not copied over.

    Args:
        storage: Buffer to reuse, or None
        capacity: Required number of elements
        dtype: Element type of a newly allocated buffer

    Returns:
        (buffer, reallocated) tuple

    Raises:
        ValueError: If capacity is negative
    """
    if storage is None or capacity > len(storage):
        if capacity < 0:
            raise ValueError("Buffer capacity must be non-negative")
        return np.zeros(capacity, dtype=dtype), True
    return storage, False
