"""Runtime settings read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from solunar_forecast.contracts import TIMISOARA, Location


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    location: Location = TIMISOARA
    forecast_max_days: int = 14
    log_level: str = "WARNING"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc


def _resolve_log_level(raw: str | None) -> str:
    """Resolve logging level name with validation."""
    level = (raw or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError("SOLUNAR_LOG_LEVEL must be a standard logging level name")
    return level


def load_settings() -> Settings:
    """Build settings from `SOLUNAR_*` environment variables."""
    latitude = _float_env("SOLUNAR_LATITUDE", TIMISOARA.latitude)
    longitude = _float_env("SOLUNAR_LONGITUDE", TIMISOARA.longitude)
    if (latitude, longitude) == (TIMISOARA.latitude, TIMISOARA.longitude):
        default_name = TIMISOARA.name
    else:
        default_name = ""
    try:
        location = Location(
            latitude=latitude,
            longitude=longitude,
            name=os.getenv("SOLUNAR_LOCATION_NAME", default_name),
        )
    except ValueError as exc:
        raise ValueError(f"SOLUNAR_LATITUDE/SOLUNAR_LONGITUDE out of range: {exc}") from exc

    max_days = _int_env("SOLUNAR_FORECAST_MAX_DAYS", 14)
    if max_days <= 0:
        raise ValueError("SOLUNAR_FORECAST_MAX_DAYS must be positive")

    return Settings(
        location=location,
        forecast_max_days=max_days,
        log_level=_resolve_log_level(os.getenv("SOLUNAR_LOG_LEVEL")),
    )
