"""Moon phase helpers.

The phase is the elapsed fraction of the mean synodic month since a known
new moon. It is a deterministic approximation, not an ephemeris.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from math import cos, pi

from solunar_forecast.contracts import MoonPhase
from solunar_forecast.scoring.rounding import round_half_up
from solunar_forecast.time.civil import to_instant

REFERENCE_NEW_MOON = datetime(2024, 1, 11, 0, 0, tzinfo=UTC)
SYNODIC_MONTH_DAYS = 29.530588853
SECONDS_PER_DAY = 86_400.0

# (upper bound exclusive, name, emoji); positions above 0.97 wrap to new moon.
_PHASE_BUCKETS: tuple[tuple[float, str, str], ...] = (
    (0.22, "Semilună crescătoare", "🌒"),
    (0.28, "Primul pătrar", "🌓"),
    (0.47, "Lună crescătoare", "🌔"),
    (0.53, "Lună plină", "🌕"),
    (0.72, "Lună descrescătoare", "🌖"),
    (0.78, "Ultimul pătrar", "🌗"),
)
_NEW_MOON = ("Lună nouă", "🌑")
_WANING_CRESCENT = ("Semilună descrescătoare", "🌘")


def days_since_reference(value: date | datetime) -> float:
    """Return signed days elapsed since the reference new moon."""
    return (to_instant(value) - REFERENCE_NEW_MOON).total_seconds() / SECONDS_PER_DAY


def cycle_position(value: date | datetime) -> float:
    """Return the position in the synodic cycle, normalized to [0, 1)."""
    position = (days_since_reference(value) % SYNODIC_MONTH_DAYS) / SYNODIC_MONTH_DAYS
    if position >= 1.0:
        return 0.0
    return position


def phase_label(position: float) -> tuple[str, str]:
    """Map a cycle position to its `(name, emoji)` bucket."""
    if position < 0.03 or position > 0.97:
        return _NEW_MOON
    for upper, name, emoji in _PHASE_BUCKETS:
        if position < upper:
            return (name, emoji)
    return _WANING_CRESCENT


def illumination_percent(position: float) -> int:
    """Return illuminated fraction in percent, 100 at full moon."""
    return round_half_up(50.0 * (1.0 - cos(2.0 * pi * position)))


def calculate_moon_phase(value: date | datetime) -> MoonPhase:
    """Compute the moon phase for a date or datetime."""
    position = cycle_position(value)
    name, emoji = phase_label(position)
    return MoonPhase(
        phase=position,
        phase_name=name,
        illumination=illumination_percent(position),
        emoji=emoji,
    )
