from datetime import date
from typing import Any, Iterable, Optional

from app.models.shared.enums import CalendarFactType
from app.schemas.hr.attendance_schema import CalendarFact


def holiday_matches(holiday: Any, day: date) -> bool:
    """Recurring holidays match on month/day in any year, others on the exact date"""
    if holiday.is_recurring:
        return (holiday.date.month, holiday.date.day) == (day.month, day.day)
    return holiday.date == day


class CalendarClassifier:
    """Classifies dates for one employee.

    Precedence when several facts apply: HOLIDAY > TIME_OFF > BIRTHDAY > ORDINARY.
    """

    def __init__(
        self,
        employee_id: Optional[int],
        holidays: Iterable[Any] = (),
        time_offs: Iterable[Any] = (),
        birth_date: Optional[date] = None,
    ):
        self.employee_id = employee_id
        self.birth_date = birth_date
        self.holidays = [h for h in holidays if getattr(h, "is_active", True)]
        self.time_offs = [
            t for t in time_offs
            if t.is_approved and (employee_id is None or t.employee_id == employee_id)
        ]

    def holiday_for(self, day: date) -> Optional[Any]:
        for holiday in self.holidays:
            if holiday_matches(holiday, day):
                return holiday
        return None

    def time_off_for(self, day: date) -> Optional[Any]:
        for time_off in self.time_offs:
            if time_off.start_date <= day <= time_off.end_date:
                return time_off
        return None

    def is_birthday(self, day: date) -> bool:
        if self.birth_date is None:
            return False
        return (self.birth_date.month, self.birth_date.day) == (day.month, day.day)

    def classify(self, day: date) -> CalendarFact:
        birthday = self.is_birthday(day)

        holiday = self.holiday_for(day)
        if holiday is not None:
            return CalendarFact(kind=CalendarFactType.HOLIDAY, holiday_name=holiday.name, is_birthday=birthday)

        time_off = self.time_off_for(day)
        if time_off is not None:
            return CalendarFact(
                kind=CalendarFactType.TIME_OFF,
                time_off_type=time_off.type,
                time_off_reason=time_off.reason,
                is_birthday=birthday,
            )

        if birthday:
            return CalendarFact(kind=CalendarFactType.BIRTHDAY, is_birthday=True)

        return CalendarFact()
