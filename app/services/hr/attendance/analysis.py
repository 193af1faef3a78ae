import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from app.core.exceptions import InputError
from app.schemas.hr.attendance_schema import AnalysisResult, Period, ScheduleSummary
from app.schemas.hr.employee_schema import EmployeeInfo
from app.services.hr.attendance.calendar_classifier import CalendarClassifier
from app.services.hr.attendance.day_reconciler import reconcile
from app.services.hr.attendance.dsr_evaluator import evaluate_dsr
from app.services.hr.attendance.period_aggregator import aggregate
from app.services.hr.attendance.schedule_resolver import expected_minutes, is_work_day, resolve_schedule, work_days
from app.utils.time_utils import iter_dates, to_local_datetime

logger = logging.getLogger(__name__)

OverrideMap = Mapping[Tuple[int, date], Any]


def group_punches(punches: Iterable[Any], employee_id: Optional[int] = None) -> Dict[date, List[datetime]]:
    """Bucket punches by local calendar date; accepts datetimes or TimeRecord rows"""
    by_date: Dict[date, List[datetime]] = defaultdict(list)
    for punch in punches:
        if not isinstance(punch, datetime):
            if employee_id is not None and getattr(punch, "employee_id", employee_id) != employee_id:
                continue
            punch = punch.date_time
        local = to_local_datetime(punch)
        by_date[local.date()].append(local)
    return by_date


def analyze_period(
    employee: Any,
    schedule: Optional[Any],
    punches: Iterable[Any],
    overrides: Optional[OverrideMap],
    holidays: Iterable[Any],
    time_offs: Iterable[Any],
    start_date: Optional[date],
    end_date: Optional[date],
) -> AnalysisResult:
    """Reconcile every date of the period and fold the records into totals.

    Pure and deterministic: nothing is read from the clock or the database and
    no input is mutated. A period with end_date before start_date has no days
    and zero totals.
    """
    if start_date is None or end_date is None:
        raise InputError("start_date and end_date are required")

    employee_id = employee.id
    overrides = overrides or {}
    resolved = resolve_schedule(schedule, employee_id)
    classifier = CalendarClassifier(
        employee_id,
        holidays=holidays,
        time_offs=time_offs,
        birth_date=getattr(employee, "birth_date", None),
    )
    punches_by_date = group_punches(punches, employee_id)

    records = [
        reconcile(
            day,
            punches=punches_by_date.get(day, ()),
            override=overrides.get((employee_id, day)),
            expected_minutes=expected_minutes(resolved, day),
            fact=classifier.classify(day),
            employee_id=employee_id,
            rostered=is_work_day(resolved, day),
        )
        for day in iter_dates(start_date, end_date)
    ]

    dsr_events = evaluate_dsr(records)
    totals = aggregate(records, dsr_events)

    logger.info(
        f"Analysis for employee {employee_id} {start_date}..{end_date}: "
        f"{totals.days_worked} worked, {totals.days_absent} absent, "
        f"balance {totals.balance_minutes} min, {totals.dsr_discounts} DSR"
    )

    return AnalysisResult(
        employee=EmployeeInfo.model_validate(employee, from_attributes=True),
        schedule=ScheduleSummary(
            daily_minutes=resolved.daily_minutes,
            weekly_minutes=resolved.weekly_minutes,
            lunch_break_minutes=resolved.lunch_break_minutes,
            work_days=work_days(resolved),
            is_default=schedule is None,
        ),
        period=Period(start_date=start_date, end_date=end_date),
        days=records,
        totals=totals,
    )
