from pydantic import BaseModel, Field, computed_field, validator
from typing import List, Optional
from datetime import date, datetime, time
from app.models.shared.enums import (
    BalanceStatus,
    CalendarFactType,
    DaySource,
    DayStatus,
    DsrAbsenceType,
    OvertimeRate,
    ReviewFlag,
    TimeOffType,
)
from app.schemas.hr.employee_schema import EmployeeInfo
from app.utils.time_utils import format_minutes, parse_hhmm

SLOT_FIELDS = ("entry_time", "snack_break_start", "snack_break_end", "lunch_start", "lunch_end", "exit_time")


# ---------- Engine inputs ----------
class DayEditBase(BaseModel):
    """Manual override for one day: up to six HH:MM marks and free-text notes"""
    entry_time: Optional[time] = None
    snack_break_start: Optional[time] = None
    snack_break_end: Optional[time] = None
    lunch_start: Optional[time] = None
    lunch_end: Optional[time] = None
    exit_time: Optional[time] = None
    notes: Optional[str] = None

    @validator(*SLOT_FIELDS, pre=True)
    def parse_slot(cls, v):
        return parse_hhmm(v)

    class Config:
        from_attributes = True

class DayEditCreate(DayEditBase):
    employee_id: int
    date: date

class DayInput(BaseModel):
    """Six punch slots of one day, after the manual override has been applied"""
    date: date
    entry_time: Optional[time] = None
    snack_break_start: Optional[time] = None
    snack_break_end: Optional[time] = None
    lunch_start: Optional[time] = None
    lunch_end: Optional[time] = None
    exit_time: Optional[time] = None
    notes: Optional[str] = None
    source: DaySource = DaySource.NONE
    review_flags: List[ReviewFlag] = Field(default_factory=list)

    def slots(self) -> List[Optional[time]]:
        return [getattr(self, name) for name in SLOT_FIELDS]

    @property
    def has_punches(self) -> bool:
        return any(slot is not None for slot in self.slots())

class CalendarFact(BaseModel):
    kind: CalendarFactType = CalendarFactType.ORDINARY
    holiday_name: Optional[str] = None
    time_off_type: Optional[TimeOffType] = None
    time_off_reason: Optional[str] = None
    is_birthday: bool = False

class PunchCreate(BaseModel):
    employee_id: int
    punches: List[datetime]
    machine_number: Optional[int] = None
    notes: Optional[str] = None

    @validator('punches')
    def validate_punches(cls, v):
        if not v:
            raise ValueError('At least one punch is required')
        return v


# ---------- Engine outputs ----------
class DayRecord(BaseModel):
    date: date
    day_of_week: str
    employee_id: Optional[int] = None
    rostered: bool = False
    entry_time: Optional[time] = None
    snack_break_start: Optional[time] = None
    snack_break_end: Optional[time] = None
    lunch_start: Optional[time] = None
    lunch_end: Optional[time] = None
    exit_time: Optional[time] = None
    status: DayStatus
    total_minutes: int = 0
    expected_minutes: int = 0
    overtime_minutes: int = 0
    overtime_rate: Optional[OvertimeRate] = None
    overtime_normal_minutes: int = 0
    overtime_holiday_minutes: int = 0
    overtime_birthday_minutes: int = 0
    undertime_minutes: int = 0
    time_off_type: Optional[TimeOffType] = None
    time_off_reason: Optional[str] = None
    holiday_name: Optional[str] = None
    is_birthday: bool = False
    source: DaySource = DaySource.NONE
    review_flags: List[ReviewFlag] = Field(default_factory=list)
    notes: Optional[str] = None

    @computed_field
    @property
    def needs_review(self) -> bool:
        return bool(self.review_flags)

class DsrEvent(BaseModel):
    week_start: date
    week_end: date
    absence_date: date
    absence_type: DsrAbsenceType
    minutes_lost: int
    hours_lost: float
    dsr_date: date

class Totals(BaseModel):
    days_worked: int = 0
    days_absent: int = 0
    time_off_days: int = 0
    holiday_days: int = 0
    birthday_days: int = 0
    review_days: int = 0
    workable_days: int = 0
    sundays_and_holidays: int = 0
    total_worked_minutes: int = 0
    total_expected_minutes: int = 0
    total_overtime_minutes: int = 0
    total_overtime_normal_minutes: int = 0
    total_overtime_holiday_minutes: int = 0
    total_overtime_birthday_minutes: int = 0
    total_undertime_minutes: int = 0
    dsr_discounts: int = 0
    dsr_discounts_list: List[DsrEvent] = Field(default_factory=list)
    balance_minutes: int = 0
    balance_status: BalanceStatus = BalanceStatus.POSITIVE

    @computed_field
    @property
    def total_worked_formatted(self) -> str:
        return format_minutes(self.total_worked_minutes)

    @computed_field
    @property
    def total_expected_formatted(self) -> str:
        return format_minutes(self.total_expected_minutes)

    @computed_field
    @property
    def total_overtime_formatted(self) -> str:
        return format_minutes(self.total_overtime_minutes)

    @computed_field
    @property
    def total_overtime_normal_formatted(self) -> str:
        return format_minutes(self.total_overtime_normal_minutes)

    @computed_field
    @property
    def total_overtime_holiday_formatted(self) -> str:
        return format_minutes(self.total_overtime_holiday_minutes)

    @computed_field
    @property
    def total_undertime_formatted(self) -> str:
        return format_minutes(self.total_undertime_minutes)

    @computed_field
    @property
    def balance_formatted(self) -> str:
        return format_minutes(self.balance_minutes)

class ScheduleSummary(BaseModel):
    daily_minutes: int
    weekly_minutes: int
    lunch_break_minutes: int
    work_days: List[str]
    is_default: bool = False

class Period(BaseModel):
    start_date: date
    end_date: date

class AnalysisResult(BaseModel):
    employee: EmployeeInfo
    schedule: ScheduleSummary
    period: Period
    days: List[DayRecord] = Field(default_factory=list)
    totals: Totals = Field(default_factory=Totals)
