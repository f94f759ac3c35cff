"""
Finite-difference derivative stencils and Taylor extrapolation.

Samples are equally spaced in time, ordered oldest to newest, and dt is the
spacing between them. Inputs may be floats or numpy arrays of matching shape,
in which case every element is treated as an independent channel.

Nothing here checks dt. A zero timestep produces inf/NaN instead of raising.
"""

import numpy as np


def _f64(value):
    return np.asarray(value, dtype=np.float64)[()]


@np.errstate(divide='ignore', invalid='ignore')
def derivative1_short(y0, y1, dt):
    """
    First derivative from two samples (backward difference).

    Accuracy O(dt).
    """
    return (_f64(y1) - y0) / _f64(dt)


@np.errstate(divide='ignore', invalid='ignore')
def derivative1_middle(y0, y2, dt):
    """
    First derivative at the middle of three samples (central difference).

    Only the outer samples are needed; they are 2*dt apart. Accuracy O(dt^2).
    """
    return (_f64(y2) - y0) / _f64(dt) * 0.5


@np.errstate(divide='ignore', invalid='ignore')
def derivative1(y0, y1, y2, dt):
    """
    First derivative at the newest of three samples.

    One-sided second order stencil: (y0 - 4*y1 + 3*y2) / (2*dt).

    Args:
        y0, y1, y2: Samples, oldest first
        dt: Sample spacing in seconds

    Returns:
        Rate of change at y2
    """
    return (_f64(y0) - 4 * y1 + 3 * y2) / _f64(dt) * 0.5


@np.errstate(divide='ignore', invalid='ignore')
def derivative2(y0, y1, y2, dt):
    """
    Second derivative from three samples: (y0 - 2*y1 + y2) / dt^2.
    """
    dt = _f64(dt)
    return (_f64(y0) - 2 * y1 + y2) / dt / dt


@np.errstate(divide='ignore', invalid='ignore')
def derivative2_long(y0, y1, y2, y3, dt):
    """
    Second derivative at the newest of four samples.

    One-sided stencil (-y0 + 4*y1 - 5*y2 + 2*y3) / dt^2, for when no sample
    after y3 exists yet.

    Args:
        y0, y1, y2, y3: Samples, oldest first
        dt: Sample spacing in seconds

    Returns:
        Second derivative near y3
    """
    dt = _f64(dt)
    return (-_f64(y0) + 4 * y1 - 5 * y2 + 2 * y3) / dt / dt


@np.errstate(divide='ignore', invalid='ignore')
def extrapolate(y0, dy1, dy2, dt):
    """
    Project a value forward by dt with a second order Taylor expansion.

    Args:
        y0: Current value
        dy1: First derivative at y0
        dy2: Second derivative at y0
        dt: Projection horizon in seconds

    Returns:
        y0 + dy1*dt + 0.5*dy2*dt^2
    """
    dt = _f64(dt)
    return y0 + dy1 * dt + 0.5 * dy2 * dt * dt
