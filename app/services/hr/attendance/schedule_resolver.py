"""Expected work minutes per date from an employee's work schedule.

Accepts either a ``WorkSchedule`` ORM row or a ``WorkScheduleBase`` schema;
both expose ``monday``..``sunday`` flags and ``monday_minutes``..``sunday_minutes``
overrides.
"""
import logging
from datetime import date
from typing import Any, List, Optional

from app.core.config import settings
from app.schemas.hr.work_schedule_schema import WEEKDAY_FIELDS, WorkScheduleBase

logger = logging.getLogger(__name__)


def weekday_name(day: date) -> str:
    return WEEKDAY_FIELDS[day.weekday()]


def default_schedule() -> WorkScheduleBase:
    """Monday to Friday, DEFAULT_DAILY_MINUTES per day, weekend off"""
    return WorkScheduleBase(
        daily_minutes=settings.DEFAULT_DAILY_MINUTES,
        weekly_minutes=settings.DEFAULT_WEEKLY_MINUTES,
        lunch_break_minutes=settings.DEFAULT_LUNCH_BREAK_MINUTES,
    )


def resolve_schedule(schedule: Optional[Any], employee_id: Optional[int] = None) -> Any:
    if schedule is None:
        logger.warning(
            f"ConfigurationGap: employee {employee_id} has no work schedule, "
            f"using default ({settings.DEFAULT_DAILY_MINUTES} min Mon-Fri)"
        )
        return default_schedule()
    return schedule


def is_work_day(schedule: Any, day: date) -> bool:
    return bool(getattr(schedule, weekday_name(day)))


def expected_minutes(schedule: Any, day: date) -> int:
    """Expected minutes for the date; 0 on disabled weekdays whatever the override says"""
    name = weekday_name(day)
    if not getattr(schedule, name):
        return 0
    override = getattr(schedule, f"{name}_minutes", None)
    if override is not None:
        return max(int(override), 0)
    return max(int(schedule.daily_minutes or 0), 0)


def work_days(schedule: Any) -> List[str]:
    return [name for name in WEEKDAY_FIELDS if getattr(schedule, name)]
