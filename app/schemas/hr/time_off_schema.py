from pydantic import BaseModel, root_validator
from typing import Optional
from datetime import date, datetime
from app.models.shared.enums import TimeOffType

class TimeOffBase(BaseModel):
    employee_id: int
    type: TimeOffType = TimeOffType.OTHER
    start_date: date
    end_date: date
    reason: Optional[str] = None
    document_url: Optional[str] = None
    is_approved: bool = True
    notes: Optional[str] = None

class TimeOffCreate(TimeOffBase):
    @root_validator(skip_on_failure=True)
    def validate_range(cls, values):
        if values['end_date'] < values['start_date']:
            raise ValueError('end_date must not be before start_date')
        return values

class TimeOffUpdate(BaseModel):
    type: Optional[TimeOffType] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = None
    document_url: Optional[str] = None
    is_approved: Optional[bool] = None
    notes: Optional[str] = None

class TimeOffResponse(TimeOffBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
