"""Tests for sunrise/sunset calculations."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from solunar_forecast.astro.sun import calculate_sun_times
from solunar_forecast.contracts import Location


@pytest.mark.parametrize(
    "value",
    [date(2024, 6, 1), date(2024, 6, 21), datetime(2025, 7, 15, 14, 0)],
)
def test_summer_sun_times_sanity(value: date | datetime) -> None:
    """Summer sunrise is before 07:00 and sunset after 19:00 local time."""
    sun = calculate_sun_times(value)

    assert sun.sunrise.hour < 7
    assert sun.sunset.hour >= 19
    assert sun.day_length > 14.0


def test_winter_solstice_sun_times_sanity() -> None:
    """Around the winter solstice days are short and sunset is before 17:00."""
    sun = calculate_sun_times(date(2024, 12, 21))

    assert sun.sunrise.hour == 8
    assert sun.sunset.hour == 16
    assert 8.0 < sun.day_length < 9.0


def test_sun_times_stay_on_input_calendar_date() -> None:
    """Sunrise and sunset carry the civil offset of the input's local date."""
    sun = calculate_sun_times(datetime(2024, 6, 21, 23, 30))

    assert sun.sunrise.date() == date(2024, 6, 21)
    assert sun.sunset.date() == date(2024, 6, 21)
    assert sun.sunrise.utcoffset() == timedelta(hours=3)
    assert calculate_sun_times(date(2024, 1, 20)).sunrise.utcoffset() == timedelta(hours=2)


def test_day_length_matches_event_difference() -> None:
    """Day length is the difference between sunset and sunrise in hours."""
    sun = calculate_sun_times(date(2024, 4, 10))

    assert sun.day_length == pytest.approx((sun.sunset - sun.sunrise).total_seconds() / 3600.0)


def test_polar_day_raises() -> None:
    """A location where the sun never sets has no sunrise hour angle."""
    with pytest.raises(ValueError, match="does not rise or set"):
        calculate_sun_times(date(2024, 6, 21), Location(latitude=80.0, longitude=0.0))


def test_sun_times_for_instant_in_repeated_hour_use_saturday() -> None:
    """An instant in the hour repeated at DST end keeps its own local day."""
    sun = calculate_sun_times(datetime(2024, 10, 26, 21, 30, tzinfo=timezone.utc))

    assert sun.sunrise.date() == date(2024, 10, 26)
    assert sun.sunset.date() == date(2024, 10, 26)


def test_distant_longitude_is_rejected() -> None:
    """Events pushed off the local civil day by the fixed offset raise."""
    with pytest.raises(ValueError, match="outside the local civil day"):
        calculate_sun_times(date(2024, 6, 21), Location(latitude=34.0, longitude=-118.0))
