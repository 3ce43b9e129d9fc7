"""Logarithmic axis positioning.

Maps a positive physical value to a normalised position on a log10 axis
spanning [min, max] and back.  Equal steps along the axis are equal ratios
(decades), which is what a ~21-decade spectrum needs.
"""

import math


def to_position(value: float, min_value: float, max_value: float) -> float:
    """Value → normalised log-scale position.

    Values outside [min_value, max_value] map outside [0, 1]; no clamping.
    Any non-positive argument returns 0.0 instead of raising.
    """
    if value <= 0 or min_value <= 0 or max_value <= 0:
        return 0.0
    log_min = math.log10(min_value)
    log_max = math.log10(max_value)
    if log_max == log_min:
        return 0.0
    return (math.log10(value) - log_min) / (log_max - log_min)


def from_position(position: float, min_value: float, max_value: float) -> float:
    """Normalised log-scale position → value.  Inverse of :func:`to_position`.

    Non-positive bounds return 0.0.
    """
    if min_value <= 0 or max_value <= 0:
        return 0.0
    log_min = math.log10(min_value)
    log_max = math.log10(max_value)
    return 10.0 ** (log_min + position * (log_max - log_min))
