from pydantic import BaseModel, validator
from typing import Optional
from datetime import datetime

WEEKDAY_FIELDS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

class WorkScheduleBase(BaseModel):
    monday: bool = True
    tuesday: bool = True
    wednesday: bool = True
    thursday: bool = True
    friday: bool = True
    saturday: bool = False
    sunday: bool = False
    monday_minutes: Optional[int] = None
    tuesday_minutes: Optional[int] = None
    wednesday_minutes: Optional[int] = None
    thursday_minutes: Optional[int] = None
    friday_minutes: Optional[int] = None
    saturday_minutes: Optional[int] = None
    sunday_minutes: Optional[int] = None
    daily_minutes: int = 480
    weekly_minutes: int = 2400
    lunch_break_minutes: int = 60
    notes: Optional[str] = None

class WorkScheduleCreate(WorkScheduleBase):
    employee_id: int

    @validator(
        'monday_minutes', 'tuesday_minutes', 'wednesday_minutes', 'thursday_minutes',
        'friday_minutes', 'saturday_minutes', 'sunday_minutes',
    )
    def validate_day_minutes(cls, v):
        if v is not None and not 0 <= v <= 1440:
            raise ValueError('Day minutes must be between 0 and 1440')
        return v

    @validator('daily_minutes', 'lunch_break_minutes')
    def validate_minutes(cls, v):
        if not 0 <= v <= 1440:
            raise ValueError('Minutes must be between 0 and 1440')
        return v

    @validator('weekly_minutes')
    def validate_weekly_minutes(cls, v):
        if not 0 <= v <= 10080:
            raise ValueError('Weekly minutes must be between 0 and 10080')
        return v

class WorkScheduleResponse(WorkScheduleBase):
    id: int
    employee_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
