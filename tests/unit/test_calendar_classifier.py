from datetime import date
from app.models.shared.enums import CalendarFactType, TimeOffType
from app.schemas.hr.holiday_schema import HolidayBase
from app.schemas.hr.time_off_schema import TimeOffBase
from app.services.hr.attendance import CalendarClassifier, holiday_matches

CHRISTMAS = HolidayBase(name="Natal", date=date(2019, 12, 25), is_recurring=True)


def vacation(start, end, employee_id=1, approved=True):
    return TimeOffBase(
        employee_id=employee_id,
        type=TimeOffType.VACATION,
        start_date=start,
        end_date=end,
        reason="Ferias",
        is_approved=approved,
    )


def test_recurring_holiday_matches_any_year():
    classifier = CalendarClassifier(1, holidays=[CHRISTMAS])

    fact = classifier.classify(date(2024, 12, 25))

    assert fact.kind == CalendarFactType.HOLIDAY
    assert fact.holiday_name == "Natal"


def test_one_off_holiday_matches_exact_date_only():
    holiday = HolidayBase(name="Eleicao", date=date(2024, 10, 6))

    assert holiday_matches(holiday, date(2024, 10, 6))
    assert not holiday_matches(holiday, date(2025, 10, 6))


def test_inactive_holiday_is_ignored():
    holiday = HolidayBase(name="Antigo", date=date(2024, 4, 1), is_active=False)
    classifier = CalendarClassifier(1, holidays=[holiday])

    assert classifier.classify(date(2024, 4, 1)).kind == CalendarFactType.ORDINARY


def test_holiday_wins_over_time_off():
    classifier = CalendarClassifier(
        1,
        holidays=[CHRISTMAS],
        time_offs=[vacation(date(2024, 12, 20), date(2024, 12, 31))],
    )

    assert classifier.classify(date(2024, 12, 25)).kind == CalendarFactType.HOLIDAY
    assert classifier.classify(date(2024, 12, 26)).kind == CalendarFactType.TIME_OFF


def test_time_off_wins_over_birthday():
    classifier = CalendarClassifier(
        1,
        time_offs=[vacation(date(2024, 5, 13), date(2024, 5, 17))],
        birth_date=date(1990, 5, 15),
    )

    fact = classifier.classify(date(2024, 5, 15))

    assert fact.kind == CalendarFactType.TIME_OFF
    assert fact.time_off_type == TimeOffType.VACATION
    assert fact.is_birthday


def test_unapproved_or_foreign_time_off_is_ignored():
    classifier = CalendarClassifier(
        1,
        time_offs=[
            vacation(date(2024, 3, 4), date(2024, 3, 8), approved=False),
            vacation(date(2024, 3, 4), date(2024, 3, 8), employee_id=2),
        ],
    )

    assert classifier.classify(date(2024, 3, 6)).kind == CalendarFactType.ORDINARY


def test_birthday():
    classifier = CalendarClassifier(1, birth_date=date(1990, 5, 15))

    assert classifier.classify(date(2024, 5, 15)).kind == CalendarFactType.BIRTHDAY
    assert classifier.classify(date(2024, 5, 16)).kind == CalendarFactType.ORDINARY
