"""
Week and business-day calculations for the planning grid.

Callers pass "today" in explicitly; only today_in_planning_timezone() reads
the clock, and it is meant for the CLI/API boundary.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from core.config import PLANNING_TIMEZONE, WEEKDAY_NAMES, WEEKDAY_SHORT_NAMES, WORK_DAYS_PER_WEEK
from models.planning import WeekDay

SATURDAY = 5
SUNDAY = 6


def today_in_planning_timezone() -> date:
    """Current calendar date in the configured planning timezone."""
    return datetime.now(ZoneInfo(PLANNING_TIMEZONE)).date()


def as_calendar_day(value: date | datetime) -> date:
    """Drop the time of day from datetimes; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def week_monday(today: date | datetime) -> date:
    """
    Monday of the week shown for `today`.

    Weekends roll forward to the coming week: Saturday +2 days, Sunday +1 day.
    Weekday numbering is date.weekday() (Monday=0 .. Sunday=6).
    """
    today = as_calendar_day(today)
    weekday = today.weekday()
    if weekday == SUNDAY:
        offset = 1
    elif weekday == SATURDAY:
        offset = 2
    else:
        offset = -weekday
    return today + timedelta(days=offset)


def resolve_week_days(week_offset: int, today: date | datetime) -> list[date]:
    """
    Business days (Monday..Friday) of the week `week_offset` weeks away from today.

    Args:
        week_offset: 0 for the current week, negative for past weeks
        today: The reference date

    Returns:
        List of 5 consecutive dates starting on a Monday
    """
    monday = week_monday(today) + timedelta(days=week_offset * 7)
    return [monday + timedelta(days=i) for i in range(WORK_DAYS_PER_WEEK)]


def is_current_day(day: date | datetime, today: date | datetime) -> bool:
    """Compare calendar days only, ignoring any time of day."""
    return as_calendar_day(day) == as_calendar_day(today)


def to_week_day(index: int, day: date) -> WeekDay:
    return WeekDay(
        index=index,
        name=WEEKDAY_NAMES[day.weekday()],
        short_name=WEEKDAY_SHORT_NAMES[day.weekday()],
        day=day,
    )


def resolve_week(week_offset: int, today: date | datetime) -> list[WeekDay]:
    """Labelled business days of the requested week."""
    return [to_week_day(i, d) for i, d in enumerate(resolve_week_days(week_offset, today))]


def current_day_index(week_days: list[date], today: date | datetime) -> int | None:
    """Column to highlight as today, or None when today is not in the week."""
    for index, day in enumerate(week_days):
        if is_current_day(day, today):
            return index
    return None


def format_day_header(day: date) -> str:
    """German grid header, e.g. 'Montag, 26.01.'"""
    return f"{WEEKDAY_NAMES[day.weekday()]}, {day.day:02d}.{day.month:02d}."
