from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo
import re

from app.core.config import settings
from app.core.exceptions import InputError

HHMM_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})(?::\d{2})?$')


def parse_hhmm(value: Optional[Union[str, time]]) -> Optional[time]:
    """Parse an "HH:MM" (or "HH:MM:SS") string into a time; blank means no value"""
    if value is None or isinstance(value, time):
        return value
    value = value.strip()
    if not value:
        return None
    match = HHMM_PATTERN.match(value)
    if not match:
        raise InputError(f"Invalid time '{value}', expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InputError(f"Invalid time '{value}', expected HH:MM")
    return time(hours, minutes)


def format_hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value is not None else None


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def format_minutes(minutes: int) -> str:
    """Format a minute total as "8h30min" (negative totals keep their sign)"""
    sign = "-" if minutes < 0 else ""
    minutes = abs(int(minutes))
    return f"{sign}{minutes // 60}h{minutes % 60:02d}min"


def iter_dates(start: date, end: date):
    """Yield every date from start to end inclusive (nothing when end < start)"""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(reference: date):
    """First and last day of the month containing reference"""
    start = reference.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(days=1)


def to_local_datetime(value: datetime) -> datetime:
    """Naive local wall-clock datetime; aware values are converted to TIMEZONE"""
    if value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(settings.TIMEZONE)).replace(tzinfo=None)
    return value.replace(second=0, microsecond=0)
