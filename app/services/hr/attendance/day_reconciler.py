"""Turns one day of punches (or its manual edit) into a DayRecord.

Slots are walked in order entry, snack out, snack in, lunch out, lunch in,
exit. Entry and the two "back from break" marks open a segment; the other
three close it. Worked minutes are the sum of closed segments.
"""
import logging
from datetime import date, datetime, time
from typing import Any, Iterable, List, Optional, Tuple, Union

from app.models.shared.enums import CalendarFactType, DaySource, DayStatus, OvertimeRate, ReviewFlag
from app.schemas.hr.attendance_schema import SLOT_FIELDS, CalendarFact, DayInput, DayRecord
from app.services.hr.attendance.schedule_resolver import weekday_name
from app.utils.time_utils import minutes_of_day, parse_hhmm, to_local_datetime

logger = logging.getLogger(__name__)

MAX_SLOTS = len(SLOT_FIELDS)
SUNDAY = 6

# True opens a segment, False closes it
SLOT_OPENS = dict(zip(SLOT_FIELDS, (True, False, True, False, True, False)))

# Which slots sorted punches fill, by punch count
PUNCH_LAYOUT = {
    1: ("entry_time",),
    2: ("entry_time", "exit_time"),
    3: ("entry_time", "snack_break_start", "exit_time"),
    4: ("entry_time", "snack_break_start", "snack_break_end", "exit_time"),
    5: ("entry_time", "snack_break_start", "snack_break_end", "lunch_start", "exit_time"),
    6: SLOT_FIELDS,
}

PunchLike = Union[datetime, time]


def _punch_time(punch: PunchLike) -> time:
    if isinstance(punch, datetime):
        return to_local_datetime(punch).time()
    return punch.replace(second=0, microsecond=0, tzinfo=None)


def _add_flag(flags: List[ReviewFlag], flag: ReviewFlag) -> None:
    if flag not in flags:
        flags.append(flag)


def build_day_input(day: date, punches: Iterable[PunchLike] = (), override: Optional[Any] = None) -> DayInput:
    """Slot the day's punches; a manual edit, when present, replaces them entirely"""
    if override is not None:
        values = {name: parse_hhmm(getattr(override, name, None)) for name in SLOT_FIELDS}
        return DayInput(
            date=day,
            notes=getattr(override, "notes", None),
            source=DaySource.MANUAL_EDIT,
            **values,
        )

    times = sorted(dict.fromkeys(_punch_time(p) for p in punches))
    if not times:
        return DayInput(date=day)

    flags: List[ReviewFlag] = []
    if len(times) > MAX_SLOTS:
        _add_flag(flags, ReviewFlag.EXTRA_PUNCHES)
        times = times[:MAX_SLOTS - 1] + times[-1:]

    values = dict(zip(PUNCH_LAYOUT[len(times)], times))
    return DayInput(date=day, source=DaySource.PUNCHES, review_flags=flags, **values)


def measure_worked_minutes(day_input: DayInput) -> Tuple[int, List[ReviewFlag]]:
    """Sum of closed in->out segments, with the anomalies found on the way"""
    worked = 0
    flags: List[ReviewFlag] = []
    open_at: Optional[time] = None
    previous: Optional[time] = None

    for name in SLOT_FIELDS:
        value = getattr(day_input, name)
        if value is None:
            continue
        if previous is not None and value < previous:
            _add_flag(flags, ReviewFlag.OUT_OF_ORDER)
        previous = value

        if SLOT_OPENS[name]:
            if open_at is not None:
                _add_flag(flags, ReviewFlag.MISSING_PAIR)
            open_at = value
        elif open_at is None:
            _add_flag(flags, ReviewFlag.MISSING_PAIR)
        else:
            worked += max(minutes_of_day(value) - minutes_of_day(open_at), 0)
            open_at = None

    if open_at is not None:
        _add_flag(flags, ReviewFlag.MISSING_PAIR)

    if ReviewFlag.OUT_OF_ORDER in flags:
        # never credit a day whose marks are out of sequence
        worked = 0
    return worked, flags


def reconcile_input(
    day_input: DayInput,
    expected_minutes: int = 0,
    fact: Optional[CalendarFact] = None,
    employee_id: Optional[int] = None,
    rostered: Optional[bool] = None,
) -> DayRecord:
    """rostered defaults to expected_minutes > 0 when the schedule verdict is not given"""
    fact = fact or CalendarFact()
    day = day_input.date

    worked, flags = measure_worked_minutes(day_input)
    review_flags = list(day_input.review_flags)
    for flag in flags:
        _add_flag(review_flags, flag)
    if review_flags:
        logger.debug(f"Day {day} for employee {employee_id} flagged for review: {[f.value for f in review_flags]}")

    base = dict(
        date=day,
        day_of_week=weekday_name(day).capitalize(),
        employee_id=employee_id,
        rostered=expected_minutes > 0 if rostered is None else rostered,
        source=day_input.source,
        review_flags=review_flags,
        notes=day_input.notes,
        is_birthday=fact.is_birthday,
        holiday_name=fact.holiday_name,
        time_off_type=fact.time_off_type,
        time_off_reason=fact.time_off_reason,
        **{name: getattr(day_input, name) for name in SLOT_FIELDS},
    )

    if fact.kind == CalendarFactType.HOLIDAY:
        return DayRecord(status=DayStatus.HOLIDAY, **base, **_premium_overtime(worked))

    if fact.kind == CalendarFactType.TIME_OFF:
        return DayRecord(status=DayStatus.TIME_OFF, **base)

    if fact.kind == CalendarFactType.BIRTHDAY:
        fields = _premium_overtime(worked)
        fields["overtime_birthday_minutes"] = worked
        return DayRecord(status=DayStatus.BIRTHDAY, **base, **fields)

    expected = max(int(expected_minutes), 0)

    # Rostered day off
    if expected == 0:
        if worked > 0:
            return DayRecord(status=DayStatus.OVERTIME, **base, **_premium_overtime(worked))
        return DayRecord(status=DayStatus.NORMAL, **base)

    if not day_input.has_punches or ReviewFlag.OUT_OF_ORDER in review_flags:
        return DayRecord(
            status=DayStatus.ABSENT,
            expected_minutes=expected,
            undertime_minutes=expected,
            **base,
        )

    if worked >= expected:
        overtime = worked - expected
        rate = None
        if overtime > 0:
            rate = OvertimeRate.HOLIDAY if day.weekday() == SUNDAY else OvertimeRate.NORMAL
        return DayRecord(
            status=DayStatus.OVERTIME,
            total_minutes=worked,
            expected_minutes=expected,
            overtime_minutes=overtime,
            overtime_rate=rate,
            overtime_normal_minutes=overtime if rate == OvertimeRate.NORMAL else 0,
            overtime_holiday_minutes=overtime if rate == OvertimeRate.HOLIDAY else 0,
            **base,
        )

    return DayRecord(
        status=DayStatus.UNDERTIME,
        total_minutes=worked,
        expected_minutes=expected,
        undertime_minutes=expected - worked,
        **base,
    )


def reconcile(
    day: date,
    punches: Iterable[PunchLike] = (),
    override: Optional[Any] = None,
    expected_minutes: int = 0,
    fact: Optional[CalendarFact] = None,
    employee_id: Optional[int] = None,
    rostered: Optional[bool] = None,
) -> DayRecord:
    """Reconcile one date. A manual edit, when given, is the only source of marks."""
    day_input = build_day_input(day, punches, override)
    return reconcile_input(day_input, expected_minutes, fact, employee_id, rostered)


def _premium_overtime(worked: int) -> dict:
    """Every worked minute is overtime at the 100% rate"""
    return dict(
        total_minutes=worked,
        overtime_minutes=worked,
        overtime_rate=OvertimeRate.HOLIDAY if worked > 0 else None,
        overtime_holiday_minutes=worked,
    )
