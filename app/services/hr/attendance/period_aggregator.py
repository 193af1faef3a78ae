from typing import Iterable, Sequence

from app.models.shared.enums import BalanceStatus, DayStatus
from app.schemas.hr.attendance_schema import DayRecord, DsrEvent, Totals

SUNDAY = 6
WORKED_STATUSES = (DayStatus.OVERTIME, DayStatus.UNDERTIME)


def is_worked_day(record: DayRecord) -> bool:
    """Ordinary days with work. Worked holidays and birthdays are paid as overtime but not counted here."""
    if record.status in WORKED_STATUSES:
        return True
    return record.status == DayStatus.NORMAL and record.total_minutes > 0


def aggregate(records: Sequence[DayRecord], dsr_events: Iterable[DsrEvent] = ()) -> Totals:
    """Fold day records into period totals.

    Pure: call it again after any record changes. DSR forfeitures are reported
    as events only, they do not change balance_minutes.
    """
    totals = Totals()

    for record in records:
        if is_worked_day(record):
            totals.days_worked += 1
        if record.status == DayStatus.ABSENT:
            totals.days_absent += 1
        elif record.status == DayStatus.TIME_OFF:
            totals.time_off_days += 1
        elif record.status == DayStatus.HOLIDAY:
            totals.holiday_days += 1
        elif record.status == DayStatus.BIRTHDAY:
            totals.birthday_days += 1

        if record.review_flags:
            totals.review_days += 1
        if record.rostered:
            totals.workable_days += 1
        if record.status == DayStatus.HOLIDAY or record.date.weekday() == SUNDAY:
            totals.sundays_and_holidays += 1

        totals.total_worked_minutes += record.total_minutes
        totals.total_expected_minutes += record.expected_minutes
        totals.total_overtime_minutes += record.overtime_minutes
        totals.total_overtime_normal_minutes += record.overtime_normal_minutes
        totals.total_overtime_holiday_minutes += record.overtime_holiday_minutes
        totals.total_overtime_birthday_minutes += record.overtime_birthday_minutes
        totals.total_undertime_minutes += record.undertime_minutes

    events = list(dsr_events)
    totals.dsr_discounts = len(events)
    totals.dsr_discounts_list = events

    totals.balance_minutes = (
        totals.total_overtime_normal_minutes
        + totals.total_overtime_holiday_minutes
        - totals.total_undertime_minutes
    )
    totals.balance_status = BalanceStatus.POSITIVE if totals.balance_minutes >= 0 else BalanceStatus.NEGATIVE
    return totals
