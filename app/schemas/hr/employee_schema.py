from pydantic import BaseModel, validator
from typing import Optional
from datetime import date, datetime

class EmployeeBase(BaseModel):
    employee_number: int
    name: str
    email: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None

class EmployeeCreate(EmployeeBase):
    @validator('name')
    def validate_name(cls, v):
        if not v or len(v.strip()) < 2:
            raise ValueError('Employee name must be at least 2 characters')
        return v.strip()

    @validator('employee_number')
    def validate_employee_number(cls, v):
        if v <= 0:
            raise ValueError('Employee number must be positive')
        return v

class EmployeeResponse(EmployeeBase):
    id: int
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class EmployeeInfo(BaseModel):
    id: int
    employee_number: Optional[int] = None
    name: str
    position: Optional[str] = None
    department: Optional[str] = None

    class Config:
        from_attributes = True
