"""FastAPI app exposing solunar day and forecast endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from solunar_forecast.config import Settings, load_settings
from solunar_forecast.contracts import Location, SolunarData
from solunar_forecast.scoring.forecast import best_day, forecast
from solunar_forecast.scoring.ratings import format_clock, prime_time_hours, rate_score
from solunar_forecast.scoring.solunar import compute_solunar_data


class LocationFields(BaseModel):
    """Optional coordinates overriding the configured location."""

    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def validate_pair(self) -> "LocationFields":
        """Require lat and lon together."""
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be provided together")
        return self


class SolunarRequest(LocationFields):
    """Request schema for one day of solunar data."""

    date: datetime | None = None


class ForecastRequest(LocationFields):
    """Request schema for a multi-day forecast."""

    start: datetime | None = None
    days: int = Field(default=7, ge=1)


class MoonPhaseResponse(BaseModel):
    phase: float
    phase_name: str
    illumination: int
    emoji: str


class SunTimesResponse(BaseModel):
    sunrise: str
    sunset: str
    day_length: float


class BestTimeResponse(BaseModel):
    hour: int
    score: int


class SolunarResponse(BaseModel):
    """Response schema aligned with the SolunarData contract."""

    date: str
    moon_phase: MoonPhaseResponse
    sun_times: SunTimesResponse
    daily_score: int
    hourly_scores: list[int]
    best_times: list[BestTimeResponse]
    rating: str
    rating_label: str
    prime_time_hours: list[int]


class ForecastDay(BaseModel):
    """Compact per-day summary."""

    date: str
    daily_score: int
    rating: str
    phase_name: str
    emoji: str
    sunrise: str
    sunset: str
    best_hours: list[int]


class ForecastResponse(BaseModel):
    """Forecast response payload."""

    location: str
    days: list[ForecastDay]
    best_day: str


def _normalize_time(dt: datetime | None) -> datetime:
    """Default a missing request time to the current UTC instant."""
    if dt is None:
        return datetime.now(timezone.utc)
    return dt


def _resolve_location(payload: LocationFields, settings: Settings) -> Location:
    """Use request coordinates when given, otherwise the configured location."""
    if payload.lat is None or payload.lon is None:
        return settings.location
    return Location(latitude=payload.lat, longitude=payload.lon)


def _to_response(data: SolunarData) -> SolunarResponse:
    rating = rate_score(data.daily_score)
    return SolunarResponse(
        **data.to_dict(),
        rating=rating.value,
        rating_label=rating.label,
        prime_time_hours=prime_time_hours(data),
    )


def _to_forecast_day(data: SolunarData) -> ForecastDay:
    return ForecastDay(
        date=data.date.isoformat(),
        daily_score=data.daily_score,
        rating=rate_score(data.daily_score).value,
        phase_name=data.moon_phase.phase_name,
        emoji=data.moon_phase.emoji,
        sunrise=format_clock(data.sun_times.sunrise),
        sunset=format_clock(data.sun_times.sunset),
        best_hours=[best.hour for best in data.best_times],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Solunar Forecast API", version="0.1.0")
    resolved = settings or load_settings()
    app.state.settings = resolved

    @app.post("/solunar", response_model=SolunarResponse)
    def post_solunar(payload: SolunarRequest) -> SolunarResponse:
        """Compute solunar data for one date."""
        location = _resolve_location(payload, resolved)
        try:
            data = compute_solunar_data(_normalize_time(payload.date), location)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _to_response(data)

    @app.post("/forecast", response_model=ForecastResponse)
    def post_forecast(payload: ForecastRequest) -> ForecastResponse:
        """Compute a day-by-day forecast and pick the best day."""
        if payload.days > resolved.forecast_max_days:
            raise HTTPException(
                status_code=422,
                detail=f"days must be <= {resolved.forecast_max_days}",
            )
        location = _resolve_location(payload, resolved)
        try:
            results = forecast(_normalize_time(payload.start), payload.days, location)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return ForecastResponse(
            location=location.name,
            days=[_to_forecast_day(data) for data in results],
            best_day=best_day(results).date.isoformat(),
        )

    return app


app = create_app()
