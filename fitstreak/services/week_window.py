"""Local calendar week boundaries (Sunday through Saturday).

Activities carry a calendar date with no time component. Every value that
enters the engine is reduced to a local ``date`` by :func:`to_local_date`
and all comparisons are made on dates, so a UTC offset can never move an
activity into a neighbouring day.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union
from zoneinfo import ZoneInfo

from fitstreak.config import settings
from fitstreak.schemas.progress import WeekWindow

DateLike = Union[str, date, datetime]


def local_zone() -> Optional[ZoneInfo]:
    if settings.LOCAL_TIMEZONE:
        return ZoneInfo(settings.LOCAL_TIMEZONE)
    return None


def to_local_date(value: DateLike) -> date:
    """Reduce a date string, date or datetime to a local calendar day"""
    if isinstance(value, str):
        if len(value) <= 10:
            return date.fromisoformat(value)
        # Timestamps go through the datetime branch so an offset is honoured
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(local_zone()).date()
        return value.date()
    return value


def local_today() -> date:
    zone = local_zone()
    if zone:
        return datetime.now(zone).date()
    return date.today()


def week_start_for(day: DateLike) -> date:
    """Sunday on or before the given day"""
    day = to_local_date(day)
    return day - timedelta(days=(day.weekday() + 1) % 7)


def week_window(now: Optional[DateLike] = None, full_week: bool = False) -> WeekWindow:
    """Window of the week containing ``now``.

    Progress queries stop at ``now``; comparison queries (``full_week``)
    run through Saturday.
    """
    today = to_local_date(now) if now is not None else local_today()
    start = week_start_for(today)
    end = start + timedelta(days=6) if full_week else today
    return WeekWindow(start=start, end=end)


def weeks_between(first_start: date, current_start: date) -> Iterator[WeekWindow]:
    """Full windows of every week from ``first_start`` up to, not including, ``current_start``"""
    start = week_start_for(first_start)
    while start < current_start:
        yield week_window(start, full_week=True)
        start += timedelta(days=7)


def days_left_in_week(today: DateLike) -> int:
    """Days remaining until Saturday (0 on Saturday)"""
    return 6 - (to_local_date(today).weekday() + 1) % 7
