from pydantic import BaseModel, root_validator
from typing import Optional
from datetime import date, datetime

class TimesheetCreate(BaseModel):
    employee_id: int
    start_date: date
    end_date: date
    pdf_url: Optional[str] = None

    @root_validator(skip_on_failure=True)
    def validate_range(cls, values):
        if values['end_date'] < values['start_date']:
            raise ValueError('end_date must not be before start_date')
        return values

class TimesheetResponse(BaseModel):
    id: int
    employee_id: int
    employee_name: str
    employee_number: Optional[int] = None
    start_date: date
    end_date: date
    total_days: int
    worked_days: int
    absent_days: int
    time_off_days: int
    holiday_days: int
    total_minutes_worked: int
    total_minutes_expected: int
    balance_minutes: int
    dsr_discounts: int
    pdf_url: Optional[str] = None
    generated_by: Optional[str] = None
    generated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
