"""
Animation timing helpers: easing, interval remapping and interpolation.

All functions work on plain floats in [0, 1] unless noted.
"""
from __future__ import annotations

from .errors import ConfigurationError


def ease_in_out(t: float, power: float = 3.0) -> float:
    """
    Symmetric ease-in/ease-out.

    t < 0.5:  0.5 * (2t)^power
    t >= 0.5: 1 - 0.5 * (2(1-t))^power

    t is clamped into [0, 1] first, so the result is always a real number
    in [0, 1].
    """
    if power <= 0:
        raise ConfigurationError(f"ease power must be positive, got {power!r}")
    t = min(max(float(t), 0.0), 1.0)
    if t < 0.5:
        return 0.5 * (2.0 * t) ** power
    return 1.0 - 0.5 * (2.0 * (1.0 - t)) ** power


def divide_interval(value: float, lo: float, hi: float) -> float:
    """
    Linear remap of value from [lo, hi] to [0, 1].

    Values outside the interval (usually float noise at the ends) are
    clamped rather than rejected.
    """
    if hi <= lo:
        raise ConfigurationError(f"empty interval [{lo}, {hi}]")
    amt = (value - lo) / (hi - lo)
    return min(max(amt, 0.0), 1.0)


def slurp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a (t=0) to b (t=1)."""
    return a + (b - a) * t


def ping_pong(phase: float, pivot: float) -> float:
    """
    Triangle wave over one cycle: rises 0 -> 1 on [0, pivot], falls back to 0
    on [pivot, 1].
    """
    if phase < pivot:
        return divide_interval(phase, 0.0, pivot)
    return 1.0 - divide_interval(phase, pivot, 1.0)


def wrap_phase(phase: float) -> float:
    """phase mod 1, always in [0, 1)."""
    wrapped = phase % 1.0
    # -1e-17 % 1.0 == 1.0 in floating point
    if wrapped >= 1.0:
        wrapped = 0.0
    return wrapped
