"""Half-up rounding shared by every integer score."""

from __future__ import annotations

from math import floor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding toward +infinity.

    Python's built-in `round` uses banker's rounding, which would turn an
    average of 72.5 into 72.
    """
    return int(floor(value + 0.5))
