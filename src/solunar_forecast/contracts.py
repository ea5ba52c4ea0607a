"""Core data contracts for the solunar fishing forecast."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime
from enum import StrEnum
from typing import Any

HOURS_PER_DAY = 24
MAX_BEST_TIMES = 4
SCORE_MIN = 0
SCORE_MAX = 100


def _validate_score(value: int, label: str) -> None:
    """Validate that a score is an integer inside [0, 100]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer.")
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise ValueError(f"{label} must be within [0, 100].")


def _isoformat(value: date_type | datetime) -> str:
    return value.isoformat()


@dataclass(frozen=True, slots=True)
class Location:
    """Geographic point used for sun time calculations."""

    latitude: float
    longitude: float
    name: str = ""

    def __post_init__(self) -> None:
        """Validate WGS84 coordinate ranges."""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("latitude must be within [-90, 90].")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("longitude must be within [-180, 180].")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the location to a JSON-compatible dictionary."""
        return {"latitude": self.latitude, "longitude": self.longitude, "name": self.name}


TIMISOARA = Location(latitude=45.7489, longitude=21.2087, name="Timișoara")


@dataclass(frozen=True, slots=True)
class MoonPhase:
    """Position in the synodic cycle with its display label."""

    phase: float
    phase_name: str
    illumination: int
    emoji: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize the moon phase to a JSON-compatible dictionary."""
        return {
            "phase": self.phase,
            "phase_name": self.phase_name,
            "illumination": self.illumination,
            "emoji": self.emoji,
        }


@dataclass(frozen=True, slots=True)
class SunTimes:
    """Local civil sunrise/sunset and the day length in hours."""

    sunrise: datetime
    sunset: datetime
    day_length: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize sun times to a JSON-compatible dictionary."""
        return {
            "sunrise": _isoformat(self.sunrise),
            "sunset": _isoformat(self.sunset),
            "day_length": self.day_length,
        }


@dataclass(frozen=True, slots=True)
class BestTime:
    """One recommended fishing hour."""

    hour: int
    score: int

    def to_dict(self) -> dict[str, int]:
        return {"hour": self.hour, "score": self.score}


class ScoreRating(StrEnum):
    """Qualitative bands used when displaying a score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"

    @property
    def label(self) -> str:
        """Romanian display label for the band."""
        return _RATING_LABELS[self]


_RATING_LABELS = {
    ScoreRating.EXCELLENT: "Excelent",
    ScoreRating.GOOD: "Bun",
    ScoreRating.MODERATE: "Moderat",
    ScoreRating.POOR: "Slab",
}


@dataclass(frozen=True, slots=True)
class SolunarData:
    """Complete solunar result for one date."""

    date: date_type | datetime
    moon_phase: MoonPhase
    sun_times: SunTimes
    daily_score: int
    hourly_scores: tuple[int, ...]
    best_times: tuple[BestTime, ...] = ()

    def __post_init__(self) -> None:
        """Freeze score sequences, then validate bounds and best-time ordering."""
        object.__setattr__(self, "hourly_scores", tuple(self.hourly_scores))
        object.__setattr__(self, "best_times", tuple(self.best_times))
        if len(self.hourly_scores) != HOURS_PER_DAY:
            raise ValueError("hourly_scores must contain exactly 24 entries.")
        _validate_score(self.daily_score, "daily_score")
        for hour, score in enumerate(self.hourly_scores):
            _validate_score(score, f"hourly_scores[{hour}]")

        if len(self.best_times) > MAX_BEST_TIMES:
            raise ValueError("best_times must not exceed 4 entries.")
        for best in self.best_times:
            _validate_score(best.score, f"best_times score for hour {best.hour}")
        scores = [best.score for best in self.best_times]
        if scores != sorted(scores, reverse=True):
            raise ValueError("best_times must be sorted descending by score.")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the solunar result to a JSON-compatible dictionary."""
        return {
            "date": _isoformat(self.date),
            "moon_phase": self.moon_phase.to_dict(),
            "sun_times": self.sun_times.to_dict(),
            "daily_score": self.daily_score,
            "hourly_scores": list(self.hourly_scores),
            "best_times": [best.to_dict() for best in self.best_times],
        }
