"""Sunrise/sunset helpers.

This module uses the simplified declination / hour-angle approximation
(no refraction, no equation of time). Results are expected within a few
minutes of an ephemeris at mid latitudes.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from math import acos, pi, radians, sin, tan

from solunar_forecast.contracts import TIMISOARA, Location, SunTimes
from solunar_forecast.time.civil import civil_timezone, to_civil, utc_offset

AXIAL_TILT_DEG = 23.45
DAYS_PER_YEAR = 365.0


def solar_declination(day_of_year: int) -> float:
    """Return the solar declination in radians for a 1-based day of year."""
    return radians(AXIAL_TILT_DEG) * sin(2.0 * pi * (284 + day_of_year) / DAYS_PER_YEAR)


def sunrise_hour_angle(lat_deg: float, decl_rad: float) -> float:
    """Return the sunrise hour angle in radians.

    Raises:
        ValueError: If the sun does not cross the horizon (polar day or night).
    """
    cos_omega = -tan(radians(lat_deg)) * tan(decl_rad)
    if not -1.0 <= cos_omega <= 1.0:
        raise ValueError("sun does not rise or set at this latitude on this date.")
    return acos(cos_omega)


def sun_events_utc(day_of_year: int, location: Location) -> tuple[float, float]:
    """Return `(sunrise, sunset)` as decimal UTC hours."""
    hour_angle = sunrise_hour_angle(location.latitude, solar_declination(day_of_year))
    half_day_hours = hour_angle * 12.0 / pi
    solar_noon_utc = 12.0 - location.longitude / 15.0
    return (solar_noon_utc - half_day_hours, solar_noon_utc + half_day_hours)


def calculate_sun_times(value: date | datetime, location: Location = TIMISOARA) -> SunTimes:
    """Compute local civil sunrise and sunset for the calendar day of `value`.

    Raises:
        ValueError: If the sun does not cross the horizon, or if sunrise or
            sunset falls outside the local civil day. The latter happens for
            longitudes far from the region whose +2/+3 offset is applied.
    """
    civil = to_civil(value)
    sunrise_utc, sunset_utc = sun_events_utc(civil.timetuple().tm_yday, location)

    offset_hours = utc_offset(civil).total_seconds() / 3600.0
    sunrise_local = sunrise_utc + offset_hours
    sunset_local = sunset_utc + offset_hours
    if not (0.0 <= sunrise_local < 24.0 and 0.0 <= sunset_local < 24.0):
        raise ValueError("sunrise or sunset falls outside the local civil day for this longitude.")

    midnight = datetime(civil.year, civil.month, civil.day, tzinfo=civil_timezone(civil))
    sunrise = midnight + timedelta(hours=sunrise_local)
    sunset = midnight + timedelta(hours=sunset_local)

    return SunTimes(
        sunrise=sunrise,
        sunset=sunset,
        day_length=(sunset - sunrise).total_seconds() / 3600.0,
    )
