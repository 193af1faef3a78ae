"""Weekly paid rest day (DSR) forfeitures.

Weeks run Sunday to Saturday. The first qualifying absence of a week costs
that week's rest day, the Sunday right after it; later absences in the same
week add nothing.
"""
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from app.core.config import settings
from app.models.shared.enums import DayStatus, DsrAbsenceType
from app.schemas.hr.attendance_schema import DayRecord, DsrEvent

logger = logging.getLogger(__name__)

SUNDAY = 6


def week_start(day: date) -> date:
    """Sunday opening the week that contains day"""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def absence_type(record: DayRecord, threshold_minutes: int) -> Optional[DsrAbsenceType]:
    if record.status == DayStatus.ABSENT:
        return DsrAbsenceType.FULL_DAY
    if record.status == DayStatus.UNDERTIME and record.undertime_minutes >= threshold_minutes:
        if record.total_minutes < record.expected_minutes / 2:
            return DsrAbsenceType.HALF_DAY_MORNING
        return DsrAbsenceType.HALF_DAY_AFTERNOON
    return None


def evaluate_dsr(records: Sequence[DayRecord], threshold_minutes: Optional[int] = None) -> List[DsrEvent]:
    """One event per week with a qualifying absence.

    Sundays and holidays never qualify. dsr_date is always the Sunday after the
    week; a holiday standing in for that Sunday is not taken into account.
    """
    if threshold_minutes is None:
        threshold_minutes = settings.DSR_HALF_DAY_THRESHOLD_MINUTES

    events: Dict[date, DsrEvent] = {}
    for record in sorted(records, key=lambda r: r.date):
        # the rest day itself cannot forfeit a rest day
        if record.date.weekday() == SUNDAY or record.status == DayStatus.HOLIDAY:
            continue
        kind = absence_type(record, threshold_minutes)
        if kind is None:
            continue

        start = week_start(record.date)
        if start in events:
            continue

        minutes_lost = record.undertime_minutes
        events[start] = DsrEvent(
            week_start=start,
            week_end=start + timedelta(days=6),
            absence_date=record.date,
            absence_type=kind,
            minutes_lost=minutes_lost,
            hours_lost=round(minutes_lost / 60, 2),
            dsr_date=start + timedelta(days=7),
        )
        logger.debug(f"DSR forfeited on {start + timedelta(days=7)} for {kind.value} absence on {record.date}")

    return list(events.values())
