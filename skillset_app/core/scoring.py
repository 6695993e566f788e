"""Percentage helpers shared by progress tracking, quiz grading and analytics."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round halves away from zero for positive values (12.5 -> 13)."""
    return math.floor(value + 0.5)


def percentage(part: int, whole: int) -> int:
    """Return `part / whole` as a whole-number percentage; 0 when `whole` is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
