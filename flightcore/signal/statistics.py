"""
Mean-square statistics over sample sequences.
"""

from typing import Iterable, Optional


def meansqr(values: Iterable[float], count: Optional[int] = None,
            weights: Optional[Iterable[float]] = None) -> float:
    """
    Mean of squared values.

    Without count the whole sequence is used. With count at most that many
    values are taken from the front; the divisor is the number actually
    taken, so a short sequence is averaged over what it has. When weights
    are given each value is multiplied by its weight before squaring; values
    past the end of weights are squared as they are.

    Args:
        values: Samples
        count: Maximum number of samples to consume
        weights: Optional per-sample weights, parallel to values

    Returns:
        float: Mean of squares

    Raises:
        ZeroDivisionError: If no samples were consumed
    """
    if count is None and weights is None:
        sqr_sum = 0.0
        n = 0
        for v in values:
            sqr_sum += v * v
            n += 1
        return sqr_sum / n

    if count is None:
        raise ValueError("weights require a sample count")

    sqr_sum = 0.0
    r_count = 0
    it = iter(values)
    wit = iter(weights) if weights is not None else None
    while r_count < count:
        try:
            val = next(it)
        except StopIteration:
            break
        r_count += 1
        if wit is not None:
            w = next(wit, None)
            if w is None:
                wit = None
            else:
                val *= w
        sqr_sum += val * val
    return sqr_sum / r_count
