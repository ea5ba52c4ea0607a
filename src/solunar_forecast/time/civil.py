"""Local civil time helpers for the EU/Romania daylight-saving rules.

Naive datetimes are treated as local civil time at the forecast region;
timezone-aware datetimes are treated as instants. Plain dates mean local
midnight.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import UTC, date, datetime, timedelta, timezone

STANDARD_OFFSET = timedelta(hours=2)
DAYLIGHT_OFFSET = timedelta(hours=3)
_FALL_BACK = DAYLIGHT_OFFSET - STANDARD_OFFSET

_SUNDAY = 6


def as_datetime(value: date | datetime) -> datetime:
    """Promote a plain date to a naive local-midnight datetime."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def last_sunday(year: int, month: int) -> date:
    """Return the last Sunday of a month by walking back from its final day."""
    last_day = date(year, month, monthrange(year, month)[1])
    return last_day - timedelta(days=(last_day.weekday() - _SUNDAY) % 7)


def _civil_window(year: int) -> tuple[datetime, datetime]:
    """Return the DST window as naive local wall-clock bounds."""
    start = datetime.combine(last_sunday(year, 3), datetime.min.time())
    end = datetime.combine(last_sunday(year, 10), datetime.min.time())
    return start, end


def _is_dst_civil(civil: datetime) -> bool:
    start, end = _civil_window(civil.year)
    # fold=1 marks the repeated wall-clock hour after DST ends.
    if civil.fold and end - _FALL_BACK <= civil < end:
        return False
    return start <= civil < end


def to_civil(value: date | datetime) -> datetime:
    """Return the naive local civil datetime for an input value.

    Aware instants in the hour repeated at the end of DST come back with
    `fold=1`, so they convert back to the same instant.
    """
    dt = as_datetime(value)
    if dt.tzinfo is None:
        return dt

    utc = dt.astimezone(UTC).replace(tzinfo=None)
    start, end = _civil_window((utc + STANDARD_OFFSET).year)
    if start - STANDARD_OFFSET <= utc < end - DAYLIGHT_OFFSET:
        return utc + DAYLIGHT_OFFSET

    standard = utc + STANDARD_OFFSET
    if end - _FALL_BACK <= standard < end:
        return standard.replace(fold=1)
    return standard


def is_daylight_saving_time(value: date | datetime) -> bool:
    """Return True iff the local time falls in [last Sun of March, last Sun of October)."""
    return _is_dst_civil(to_civil(value))


def utc_offset(value: date | datetime) -> timedelta:
    """Return the civil UTC offset in effect for the input value."""
    return DAYLIGHT_OFFSET if is_daylight_saving_time(value) else STANDARD_OFFSET


def civil_timezone(value: date | datetime) -> timezone:
    """Return a fixed-offset tzinfo matching the civil offset of the input value."""
    return timezone(utc_offset(value))


def to_instant(value: date | datetime) -> datetime:
    """Return the aware UTC instant for an input value."""
    dt = as_datetime(value)
    if dt.tzinfo is not None:
        return dt.astimezone(UTC)
    return (dt - utc_offset(dt)).replace(tzinfo=UTC)
