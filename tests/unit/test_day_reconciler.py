from datetime import datetime, time
from types import SimpleNamespace
import pytest
from app.core.exceptions import InputError
from app.models.shared.enums import CalendarFactType, DaySource, DayStatus, OvertimeRate, ReviewFlag
from app.schemas.hr.attendance_schema import CalendarFact
from app.services.hr.attendance import build_day_input, measure_worked_minutes, reconcile
from tests.unit.factories import MONDAY, SUNDAY, punches_on


def day_edit(**slots):
    values = {name: None for name in (
        "entry_time", "snack_break_start", "snack_break_end", "lunch_start", "lunch_end", "exit_time"
    )}
    values.update(slots)
    return SimpleNamespace(notes=None, **values)


def assert_conserved(record):
    assert record.total_minutes == record.expected_minutes + record.overtime_minutes - record.undertime_minutes


class TestOrdinaryDays:
    def test_overtime_with_lunch_break(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "07:00", "12:00", "13:00", "18:00"), expected_minutes=480)

        assert record.status == DayStatus.OVERTIME
        assert record.total_minutes == 600
        assert record.overtime_minutes == 120
        assert record.overtime_rate == OvertimeRate.NORMAL
        assert record.overtime_normal_minutes == 120
        assert record.overtime_holiday_minutes == 0
        assert record.source == DaySource.PUNCHES
        assert record.day_of_week == "Monday"
        assert_conserved(record)

    def test_no_punches_is_absent(self):
        record = reconcile(MONDAY, [], expected_minutes=480)

        assert record.status == DayStatus.ABSENT
        assert record.total_minutes == 0
        assert record.undertime_minutes == 480
        assert not record.needs_review

    def test_undertime(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00", "13:00", "16:00"), expected_minutes=480)

        assert record.status == DayStatus.UNDERTIME
        assert record.total_minutes == 420
        assert record.undertime_minutes == 60
        assert record.overtime_rate is None
        assert_conserved(record)

    def test_exact_day_has_no_overtime_rate(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00", "13:00", "17:00"), expected_minutes=480)

        assert record.status == DayStatus.OVERTIME
        assert record.overtime_minutes == 0
        assert record.overtime_rate is None
        assert_conserved(record)

    def test_sunday_overtime_is_paid_at_holiday_rate(self):
        record = reconcile(SUNDAY, punches_on(SUNDAY, "08:00", "13:00"), expected_minutes=240)

        assert record.overtime_minutes == 60
        assert record.overtime_rate == OvertimeRate.HOLIDAY
        assert record.overtime_holiday_minutes == 60
        assert record.overtime_normal_minutes == 0

    def test_six_punch_day(self):
        punches = punches_on(MONDAY, "08:00", "10:00", "10:15", "12:00", "13:00", "17:15")

        record = reconcile(MONDAY, punches, expected_minutes=480)

        assert record.entry_time == time(8, 0)
        assert record.lunch_end == time(13, 0)
        assert record.exit_time == time(17, 15)
        assert record.total_minutes == 120 + 105 + 255
        assert not record.review_flags


class TestRosteredDayOff:
    def test_worked_day_off_is_full_overtime(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00"), expected_minutes=0)

        assert record.status == DayStatus.OVERTIME
        assert record.overtime_minutes == 240
        assert record.overtime_rate == OvertimeRate.HOLIDAY
        assert record.overtime_holiday_minutes == 240

    def test_idle_day_off_is_normal(self):
        record = reconcile(SUNDAY, [], expected_minutes=0)

        assert record.status == DayStatus.NORMAL
        assert record.total_minutes == 0
        assert record.undertime_minutes == 0


class TestCalendarFacts:
    def test_holiday_credits_all_work_as_overtime(self):
        fact = CalendarFact(kind=CalendarFactType.HOLIDAY, holiday_name="Tiradentes")

        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00"), expected_minutes=480, fact=fact)

        assert record.status == DayStatus.HOLIDAY
        assert record.holiday_name == "Tiradentes"
        assert record.expected_minutes == 0
        assert record.overtime_holiday_minutes == 240
        assert record.undertime_minutes == 0

    def test_idle_holiday(self):
        fact = CalendarFact(kind=CalendarFactType.HOLIDAY, holiday_name="Tiradentes")

        record = reconcile(MONDAY, [], expected_minutes=480, fact=fact)

        assert record.status == DayStatus.HOLIDAY
        assert record.overtime_minutes == 0
        assert record.overtime_rate is None

    def test_time_off_zeroes_the_day(self):
        fact = CalendarFact(kind=CalendarFactType.TIME_OFF, time_off_reason="Atestado")

        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00"), expected_minutes=480, fact=fact)

        assert record.status == DayStatus.TIME_OFF
        assert record.time_off_reason == "Atestado"
        assert record.expected_minutes == 0
        assert record.overtime_minutes == 0
        assert record.undertime_minutes == 0

    def test_worked_birthday(self):
        fact = CalendarFact(kind=CalendarFactType.BIRTHDAY, is_birthday=True)

        record = reconcile(MONDAY, punches_on(MONDAY, "09:00", "17:00"), expected_minutes=480, fact=fact)

        assert record.status == DayStatus.BIRTHDAY
        assert record.expected_minutes == 0
        assert record.total_minutes == 480
        assert record.overtime_minutes == 480
        assert record.overtime_rate == OvertimeRate.HOLIDAY
        assert record.overtime_birthday_minutes == 480
        assert record.is_birthday


class TestReviewFlags:
    def test_odd_punch_count_is_missing_pair(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "12:00", "13:00"), expected_minutes=480)

        assert ReviewFlag.MISSING_PAIR in record.review_flags
        assert record.needs_review
        assert record.total_minutes == 240
        assert record.status == DayStatus.UNDERTIME

    def test_single_punch(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00"), expected_minutes=480)

        assert record.review_flags == [ReviewFlag.MISSING_PAIR]
        assert record.total_minutes == 0
        assert record.undertime_minutes == 480

    def test_out_of_order_edit_is_not_credited(self):
        record = reconcile(MONDAY, override=day_edit(entry_time="12:00", exit_time="08:00"), expected_minutes=480)

        assert ReviewFlag.OUT_OF_ORDER in record.review_flags
        assert record.status == DayStatus.ABSENT
        assert record.total_minutes == 0

    def test_extra_punches_keep_first_five_and_last(self):
        punches = punches_on(MONDAY, "08:00", "10:00", "10:15", "12:00", "13:00", "15:00", "17:00")

        day_input = build_day_input(MONDAY, punches)

        assert ReviewFlag.EXTRA_PUNCHES in day_input.review_flags
        assert day_input.lunch_end == time(13, 0)
        assert day_input.exit_time == time(17, 0)


class TestDayInput:
    def test_duplicate_punches_collapse(self):
        punches = punches_on(MONDAY, "08:00", "08:00", "17:00")

        day_input = build_day_input(MONDAY, punches)

        assert day_input.entry_time == time(8, 0)
        assert day_input.exit_time == time(17, 0)
        assert day_input.snack_break_start is None

    def test_seconds_are_dropped(self):
        day_input = build_day_input(MONDAY, [datetime(2024, 3, 4, 8, 0, 42), datetime(2024, 3, 4, 12, 0, 5)])

        assert measure_worked_minutes(day_input) == (240, [])

    def test_override_replaces_punches(self):
        override = day_edit(entry_time="09:00", exit_time="12:00")

        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "17:00"), override=override, expected_minutes=480)

        assert record.source == DaySource.MANUAL_EDIT
        assert record.entry_time == time(9, 0)
        assert record.total_minutes == 180

    def test_empty_override_makes_the_day_absent(self):
        record = reconcile(MONDAY, punches_on(MONDAY, "08:00", "17:00"), override=day_edit(), expected_minutes=480)

        assert record.status == DayStatus.ABSENT

    def test_override_is_idempotent(self):
        override = day_edit(entry_time="08:00", lunch_start="12:00", lunch_end="13:00", exit_time="17:30")

        first = reconcile(MONDAY, [], override=override, expected_minutes=480)
        second = reconcile(MONDAY, [], override=override, expected_minutes=480)

        assert first == second
        assert first.total_minutes == 510

    def test_malformed_override_raises(self):
        with pytest.raises(InputError):
            reconcile(MONDAY, override=day_edit(entry_time="8h00"), expected_minutes=480)
