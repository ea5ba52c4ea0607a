"""Multi-day solunar forecast built from consecutive local days."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from datetime import date, datetime, timedelta

from solunar_forecast.contracts import TIMISOARA, Location, SolunarData
from solunar_forecast.scoring.solunar import compute_solunar_data
from solunar_forecast.time.civil import to_civil

logger = logging.getLogger(__name__)


def iter_days(start: date | datetime, days: int) -> Iterator[date]:
    """Yield `days` consecutive local calendar dates beginning at `start`."""
    if days <= 0:
        raise ValueError("days must be positive")
    current = to_civil(start).date()
    step = timedelta(days=1)
    for _ in range(days):
        yield current
        current = current + step


def forecast(
    start: date | datetime, days: int, location: Location = TIMISOARA
) -> list[SolunarData]:
    """Compute one solunar result per local day, each at local midnight."""
    results = [compute_solunar_data(day, location) for day in iter_days(start, days)]
    logger.info(
        "forecast_built",
        extra={"start": results[0].date.isoformat(), "days": days, "location": location.name},
    )
    return results


def best_day(results: Sequence[SolunarData]) -> SolunarData:
    """Return the result with the highest daily score; the earliest wins ties."""
    if not results:
        raise ValueError("results must not be empty")
    return max(results, key=lambda data: data.daily_score)
