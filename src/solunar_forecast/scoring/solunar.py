"""Solunar score synthesis.

Combines the moon phase and local sun times into 24 hourly fishing activity
scores, a daily score and the best hours of the day.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

import numpy as np

from solunar_forecast.astro.moon import calculate_moon_phase
from solunar_forecast.astro.sun import calculate_sun_times
from solunar_forecast.contracts import (
    HOURS_PER_DAY,
    MAX_BEST_TIMES,
    TIMISOARA,
    BestTime,
    Location,
    MoonPhase,
    SolunarData,
    SunTimes,
)
from solunar_forecast.scoring.rounding import round_half_up

logger = logging.getLogger(__name__)

BASE_WEIGHT = 0.6
DAWN_BOOST = 30.0
DUSK_BOOST = 25.0
NIGHT_BONUS = 15.0
MIDDAY_PENALTY = 20.0
BEST_TIME_THRESHOLD = 75.0
DAILY_TOP_HOURS = 6


def moon_base_score(phase: float) -> int:
    """Return the moon-driven base score; bands are checked in order."""
    if phase < 0.1 or phase > 0.9:
        return 95
    if 0.4 < phase < 0.6:
        return 90
    if phase < 0.3 or phase > 0.7:
        return 75
    return 60


def hourly_raw_scores(moon_phase: MoonPhase, sun_times: SunTimes) -> np.ndarray:
    """Return 24 clamped, unrounded hourly scores indexed by local hour."""
    hours = np.arange(HOURS_PER_DAY)
    scores = np.full(HOURS_PER_DAY, moon_base_score(moon_phase.phase) * BASE_WEIGHT)

    scores += np.where(np.abs(hours - sun_times.sunrise.hour) <= 1, DAWN_BOOST, 0.0)
    scores += np.where(np.abs(hours - sun_times.sunset.hour) <= 1, DUSK_BOOST, 0.0)

    if moon_phase.phase < 0.2 or moon_phase.phase > 0.8:
        scores += np.where((hours < 6) | (hours > 20), NIGHT_BONUS, 0.0)

    scores -= np.where((hours > 10) & (hours < 16), MIDDAY_PENALTY, 0.0)
    return np.clip(scores, 0.0, 100.0)


def select_best_times(raw_scores: np.ndarray) -> list[BestTime]:
    """Pick hours whose unrounded score exceeds the threshold, best first.

    Ties keep ascending hour order.
    """
    candidates = [
        BestTime(hour=hour, score=round_half_up(float(score)))
        for hour, score in enumerate(raw_scores)
        if score > BEST_TIME_THRESHOLD
    ]
    candidates.sort(key=lambda best: -best.score)
    return candidates[:MAX_BEST_TIMES]


def daily_score(hourly_scores: Sequence[int]) -> int:
    """Average of the six highest hourly scores, rounded half-up."""
    top = np.sort(np.asarray(hourly_scores, dtype=float))[::-1][:DAILY_TOP_HOURS]
    return round_half_up(float(top.sum()) / DAILY_TOP_HOURS)


def compute_solunar_data(
    value: date | datetime, location: Location = TIMISOARA
) -> SolunarData:
    """Compute the full solunar forecast for one date at one location."""
    moon_phase = calculate_moon_phase(value)
    sun_times = calculate_sun_times(value, location)

    raw_scores = hourly_raw_scores(moon_phase, sun_times)
    hourly_scores = [round_half_up(float(score)) for score in raw_scores]
    best_times = select_best_times(raw_scores)

    data = SolunarData(
        date=value,
        moon_phase=moon_phase,
        sun_times=sun_times,
        daily_score=daily_score(hourly_scores),
        hourly_scores=hourly_scores,
        best_times=best_times,
    )
    logger.debug(
        "solunar_computed",
        extra={
            "date": value.isoformat(),
            "location": location.name,
            "daily_score": data.daily_score,
            "phase_name": moon_phase.phase_name,
        },
    )
    return data
