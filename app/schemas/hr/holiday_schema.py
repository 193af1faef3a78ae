from pydantic import BaseModel, validator
from typing import Optional
from datetime import date as DateType, datetime

class HolidayBase(BaseModel):
    name: str
    date: DateType
    description: Optional[str] = None
    is_recurring: bool = False
    is_active: bool = True

class HolidayCreate(HolidayBase):
    @validator('name')
    def validate_name(cls, v):
        if not v or len(v.strip()) < 2:
            raise ValueError('Holiday name must be at least 2 characters')
        return v.strip()

class HolidayUpdate(BaseModel):
    name: Optional[str] = None
    date: Optional[DateType] = None
    description: Optional[str] = None
    is_recurring: Optional[bool] = None
    is_active: Optional[bool] = None

class HolidayResponse(HolidayBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class HolidayOccurrence(BaseModel):
    """A holiday falling on a concrete date of the requested period"""
    holiday_id: int
    name: str
    date: DateType
    is_recurring: bool
