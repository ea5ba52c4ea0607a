"""Tests for local civil time and daylight-saving helpers."""

from datetime import UTC, date, datetime, timedelta

import pytest

from solunar_forecast.time.civil import (
    is_daylight_saving_time,
    last_sunday,
    to_civil,
    to_instant,
    utc_offset,
)


def test_last_sunday_known_values() -> None:
    """Last Sundays of March and October match the calendar."""
    assert last_sunday(2024, 3) == date(2024, 3, 31)
    assert last_sunday(2024, 10) == date(2024, 10, 27)
    assert last_sunday(2025, 3) == date(2025, 3, 30)
    assert last_sunday(2025, 10) == date(2025, 10, 26)


@pytest.mark.parametrize("year", [2019, 2024, 2025, 2030])
def test_winter_and_summer_days(year: int) -> None:
    """January 1 is outside and July 1 is inside the DST window."""
    assert is_daylight_saving_time(date(year, 1, 1)) is False
    assert is_daylight_saving_time(date(year, 7, 1)) is True


def test_window_start_inclusive_end_exclusive() -> None:
    """DST starts at local midnight of the March Sunday and ends at the October one."""
    assert is_daylight_saving_time(datetime(2024, 3, 30, 23, 59)) is False
    assert is_daylight_saving_time(datetime(2024, 3, 31, 0, 0)) is True
    assert is_daylight_saving_time(datetime(2024, 10, 26, 23, 0)) is True
    assert is_daylight_saving_time(datetime(2024, 10, 27, 0, 0)) is False


def test_utc_offset_by_season() -> None:
    """The civil offset is +2 in winter and +3 in summer."""
    assert utc_offset(date(2024, 1, 15)) == timedelta(hours=2)
    assert utc_offset(date(2024, 7, 15)) == timedelta(hours=3)


def test_naive_values_are_local_civil_time() -> None:
    """Naive datetimes are converted to instants by removing the civil offset."""
    assert to_instant(datetime(2024, 7, 1, 12, 0)) == datetime(2024, 7, 1, 9, 0, tzinfo=UTC)
    assert to_instant(datetime(2024, 1, 15, 12, 0)) == datetime(2024, 1, 15, 10, 0, tzinfo=UTC)
    assert to_instant(date(2024, 1, 15)) == datetime(2024, 1, 14, 22, 0, tzinfo=UTC)


def test_aware_values_convert_to_local_civil_time() -> None:
    """Aware datetimes are shifted into local civil time."""
    assert to_civil(datetime(2024, 7, 1, 9, 0, tzinfo=UTC)) == datetime(2024, 7, 1, 12, 0)
    assert to_civil(datetime(2024, 1, 15, 23, 30, tzinfo=UTC)) == datetime(2024, 1, 16, 1, 30)


@pytest.mark.parametrize(
    ("instant", "civil", "fold", "dst"),
    [
        (datetime(2024, 10, 26, 20, 30, tzinfo=UTC), datetime(2024, 10, 26, 23, 30), 0, True),
        (datetime(2024, 10, 26, 21, 0, tzinfo=UTC), datetime(2024, 10, 26, 23, 0), 1, False),
        (datetime(2024, 10, 26, 21, 30, tzinfo=UTC), datetime(2024, 10, 26, 23, 30), 1, False),
        (datetime(2024, 10, 26, 22, 0, tzinfo=UTC), datetime(2024, 10, 27, 0, 0), 0, False),
    ],
)
def test_end_of_dst_hour_stays_on_saturday(
    instant: datetime, civil: datetime, fold: int, dst: bool
) -> None:
    """The repeated hour after DST ends maps to standard time and round-trips."""
    local = to_civil(instant)

    assert local == civil
    assert local.fold == fold
    assert is_daylight_saving_time(instant) is dst
    assert to_instant(local) == instant


def test_start_of_dst_switches_at_standard_midnight() -> None:
    """DST begins when the standard-time clock reaches the March Sunday."""
    assert to_civil(datetime(2024, 3, 30, 21, 59, tzinfo=UTC)) == datetime(2024, 3, 30, 23, 59)
    assert to_civil(datetime(2024, 3, 30, 22, 0, tzinfo=UTC)) == datetime(2024, 3, 31, 1, 0)
    assert is_daylight_saving_time(datetime(2024, 3, 30, 22, 0, tzinfo=UTC)) is True
