from sqlalchemy import Column, Integer, String, Boolean, Date
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class Employee(BaseModel):
    __tablename__ = 'employees'

    employee_number = Column(Integer, unique=True, nullable=False, index=True)  # Time-clock number
    name = Column(String(150), nullable=False)
    email = Column(String(100), unique=True)
    position = Column(String(100))
    department = Column(String(100))
    birth_date = Column(Date)
    hire_date = Column(Date)
    is_active = Column(Boolean, default=True)

    # Relationships
    work_schedule = relationship("WorkSchedule", back_populates="employee", uselist=False)
    time_records = relationship("TimeRecord", back_populates="employee")
    day_edits = relationship("DayEdit", back_populates="employee")
    time_offs = relationship("TimeOff", back_populates="employee")
    timesheets = relationship("Timesheet", back_populates="employee")
