"""Display helpers derived from a computed solunar result."""

from __future__ import annotations

from datetime import datetime

from solunar_forecast.contracts import HOURS_PER_DAY, ScoreRating, SolunarData

_RATING_FLOORS: tuple[tuple[int, ScoreRating], ...] = (
    (80, ScoreRating.EXCELLENT),
    (60, ScoreRating.GOOD),
    (40, ScoreRating.MODERATE),
)


def rate_score(score: int) -> ScoreRating:
    """Map a 0-100 score to its qualitative band."""
    for floor_value, rating in _RATING_FLOORS:
        if score >= floor_value:
            return rating
    return ScoreRating.POOR


def prime_time_hours(data: SolunarData) -> list[int]:
    """Return hours within one hour of the sunrise or sunset hour."""
    sunrise_hour = data.sun_times.sunrise.hour
    sunset_hour = data.sun_times.sunset.hour
    return [
        hour
        for hour in range(HOURS_PER_DAY)
        if abs(hour - sunrise_hour) <= 1 or abs(hour - sunset_hour) <= 1
    ]


def is_best_time(data: SolunarData, hour: int) -> bool:
    """Return True if `hour` is one of the recommended best times."""
    return any(best.hour == hour for best in data.best_times)


def format_clock(dt: datetime) -> str:
    """Format a local time as 24-hour `HH:MM`."""
    return dt.strftime("%H:%M")
