"""Human-readable distance and duration strings."""

from __future__ import annotations

import math


def _round_half_up(value: float) -> int:
    # Display rounding: 0.5 goes up, unlike Python's round()
    return math.floor(value + 0.5)


def format_distance(meters: float) -> str:
    """``"999 m"`` below one kilometer, ``"2.50 km"`` from there on."""
    if meters < 1000:
        return f"{_round_half_up(meters)} m"
    return f"{meters / 1000:.2f} km"


def format_duration(seconds: float) -> str:
    """Seconds under a minute, minutes under an hour, then ``"H hr M min"``."""
    if seconds < 60:
        return f"{_round_half_up(seconds)} sec"
    if seconds < 3600:
        return f"{math.floor(seconds / 60)} min"
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    return f"{hours} hr {minutes} min"
