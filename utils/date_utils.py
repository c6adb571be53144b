"""
Calendar-day helpers shared by the store, the streak tracker and the aggregators
"""
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union
import pytz

DateLike = Union[date, datetime, str]


def _local_naive(value: datetime, timezone_name: str) -> datetime:
    # Aware values are moved into the local zone before the offset is dropped
    if value.tzinfo is not None:
        value = value.astimezone(pytz.timezone(timezone_name)).replace(tzinfo=None)
    return value


def to_calendar_day(value: DateLike, timezone_name: str = 'UTC') -> date:
    """Drop the time-of-day component; ISO strings are accepted"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return _local_naive(value, timezone_name).date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported date value: {value!r}")


def to_timestamp(value: DateLike, timezone_name: str = 'UTC') -> datetime:
    """Coerce a day or ISO string to a naive local datetime (midnight for bare days)"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return _local_naive(value, timezone_name)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(f"Unsupported date value: {value!r}")


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) timestamp interval covering one calendar day"""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def range_bounds(start: Optional[DateLike], end: Optional[DateLike],
                 timezone_name: str = 'UTC') -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Timestamp bounds for an inclusive range of calendar days.

    Both ends are widened to whole days, so an end of 2024-05-02 includes a
    log written at 2024-05-02 21:00.

    Returns:
        (lower, upper) with lower inclusive and upper exclusive; either may be None.
    """
    lower = upper = None
    if start is not None:
        lower = day_bounds(to_calendar_day(start, timezone_name))[0]
    if end is not None:
        upper = day_bounds(to_calendar_day(end, timezone_name))[1]
    return lower, upper


def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from earlier to later (negative if later is before)"""
    return (later - earlier).days


def now(timezone_name: str = 'UTC') -> datetime:
    """Current wall-clock time in the given zone, returned naive"""
    tz = pytz.timezone(timezone_name)
    return datetime.now(tz).replace(tzinfo=None)


def today(timezone_name: str = 'UTC') -> date:
    """Current calendar day in the given zone"""
    return now(timezone_name).date()
