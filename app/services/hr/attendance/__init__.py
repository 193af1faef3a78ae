# app/services/hr/attendance/__init__.py

# Pure attendance engine: no I/O, no session, no clock
from .schedule_resolver import default_schedule, expected_minutes, is_work_day, resolve_schedule
from .calendar_classifier import CalendarClassifier, holiday_matches
from .day_reconciler import build_day_input, measure_worked_minutes, reconcile, reconcile_input
from .period_aggregator import aggregate
from .dsr_evaluator import evaluate_dsr
from .analysis import analyze_period, group_punches

__all__ = [
    "default_schedule",
    "expected_minutes",
    "is_work_day",
    "resolve_schedule",
    "CalendarClassifier",
    "holiday_matches",
    "build_day_input",
    "measure_worked_minutes",
    "reconcile",
    "reconcile_input",
    "aggregate",
    "evaluate_dsr",
    "analyze_period",
    "group_punches",
]
