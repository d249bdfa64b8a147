"""
Date helpers shared by validation and display code.

Stored timestamps are UTC. Anything that reasons in whole days (range checks,
grouping activities) first converts to the calendar of the configured timezone.
"""
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to already be UTC (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_day(value: datetime, tz: tzinfo) -> date:
    return as_utc(value).astimezone(tz).date()


def is_before(value: datetime, other: datetime) -> bool:
    return as_utc(value) < as_utc(other)


def is_before_day(value: datetime, other: datetime, tz: tzinfo) -> bool:
    return local_day(value, tz) < local_day(other, tz)


def is_after_day(value: datetime, other: datetime, tz: tzinfo) -> bool:
    return local_day(value, tz) > local_day(other, tz)


def is_same_day(value: datetime, other: datetime, tz: tzinfo) -> bool:
    return local_day(value, tz) == local_day(other, tz)


def days_between(start: datetime, end: datetime, tz: tzinfo) -> int:
    """Inclusive number of calendar days covered by [start, end]; 0 if end precedes start."""
    span = (local_day(end, tz) - local_day(start, tz)).days
    return max(span + 1, 0)


def day_range(start: datetime, end: datetime, tz: tzinfo) -> List[datetime]:
    """Local midnight of every calendar day from start's day to end's day."""
    first = local_day(start, tz)
    return [
        datetime.combine(first + timedelta(days=offset), time.min, tzinfo=tz)
        for offset in range(days_between(start, end, tz))
    ]


def format_long_date(value: datetime, tz: tzinfo) -> str:
    day = local_day(value, tz)
    return f"{day:%B} {day.day}, {day.year}"
