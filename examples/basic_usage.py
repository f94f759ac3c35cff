#!/usr/bin/env python3
"""
Basic usage example of the flight control primitives.

This example plays the part of a control loop: each tick it samples a noisy
pitch angle, smooths it, estimates its rate and acceleration from a short
history and produces a bounded pitch command.
"""

import sys
import os
import numpy as np

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flightcore import (Config, Quaternion, rotation_matrix, simple_filter,
                        derivative1, derivative2, derivative2_long,
                        extrapolate, clamp_abs, meansqr, realloc)
from flightcore.math.constants import RAD_TO_DEG

def filter_rms(errors, recorded):
    """
    RMS of the filter error ring buffer.

    Args:
        errors: Ring buffer of per-tick errors
        recorded: Number of ticks written so far

    Returns:
        (rms, samples_used) tuple, or None if nothing was recorded
    """
    used = min(recorded, len(errors))
    if used == 0:
        return None
    return float(np.sqrt(meansqr(errors, used))), used

def simulate_pitch(duration=10, dt=0.02):
    """
    Simulate a slowly oscillating pitch angle with sensor noise.

    Args:
        duration: Simulation duration in seconds
        dt: Time step in seconds

    Yields:
        (t, true_pitch, measured_pitch, orientation) tuples
    """
    amplitude = 0.2   # rad
    period = 4.0      # s
    noise = 0.005     # rad

    t = 0.0
    while t < duration:
        pitch = amplitude * np.sin(2 * np.pi * t / period)
        measured = pitch + np.random.normal(0, noise)

        # Rotation about the body x axis
        orientation = Quaternion(x=np.sin(pitch / 2), y=0.0, z=0.0,
                                 w=np.cos(pitch / 2))

        yield t, pitch, measured, orientation

        t += dt

def main():
    """Main example function."""
    print("Flight Control Primitives - Basic Usage Example")
    print("=" * 50)

    config = Config("flightcore.json")
    problems = config.validate()
    if problems:
        for problem in problems:
            print(f"ERROR: {problem}")
        return

    dt = config.dt
    gain = 2.0
    history = []
    errors, _ = realloc(None, config.meansqr_window)
    error_index = 0
    filtered = None

    last_print_time = -1.0
    print_interval = 1.0

    for t, pitch, measured, orientation in simulate_pitch(dt=dt):
        filtered = measured if filtered is None else simple_filter(measured, filtered, config.filter_k)

        history.append(filtered)
        if len(history) > config.history_length:
            history.pop(0)
        if len(history) < 4:
            continue

        y0, y1, y2, y3 = history[-4:]
        rate = derivative1(y1, y2, y3, dt)
        accel = derivative2(y1, y2, y3, dt)
        accel_long = derivative2_long(y0, y1, y2, y3, dt)
        predicted = extrapolate(y3, rate, accel, dt)

        command = clamp_abs(-gain * predicted, config.control_limit)

        errors[error_index % len(errors)] = filtered - pitch
        error_index += 1

        if t - last_print_time >= print_interval:
            mat = rotation_matrix(orientation)
            print(f"Time: {t:.2f}s")
            print(f"  Pitch:     {pitch * RAD_TO_DEG:7.2f} deg (filtered {filtered * RAD_TO_DEG:7.2f})")
            print(f"  Rate:      {rate:7.3f} rad/s")
            print(f"  Accel:     {accel:7.3f} / {accel_long:7.3f} rad/s^2")
            print(f"  Predicted: {predicted * RAD_TO_DEG:7.2f} deg")
            print(f"  Command:   {command:7.3f}")
            print(f"  Body up:   {mat[:3, 2]}")
            print()
            last_print_time = t

    print("Simulation completed!")
    summary = filter_rms(errors, error_index)
    if summary is None:
        print("No ticks recorded, filter error unavailable")
    else:
        rms, used = summary
        print(f"Filter RMS error over last {used} ticks: {rms * RAD_TO_DEG:.3f} deg")

if __name__ == "__main__":
    main()
