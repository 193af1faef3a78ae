from sqlalchemy import Column, Integer, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class WorkSchedule(BaseModel):
    __tablename__ = 'work_schedules'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, unique=True)

    # Work-day flags
    monday = Column(Boolean, nullable=False, default=True)
    tuesday = Column(Boolean, nullable=False, default=True)
    wednesday = Column(Boolean, nullable=False, default=True)
    thursday = Column(Boolean, nullable=False, default=True)
    friday = Column(Boolean, nullable=False, default=True)
    saturday = Column(Boolean, nullable=False, default=False)
    sunday = Column(Boolean, nullable=False, default=False)

    # Per-weekday expected minutes; NULL means "use daily_minutes"
    monday_minutes = Column(Integer)
    tuesday_minutes = Column(Integer)
    wednesday_minutes = Column(Integer)
    thursday_minutes = Column(Integer)
    friday_minutes = Column(Integer)
    saturday_minutes = Column(Integer)
    sunday_minutes = Column(Integer)

    daily_minutes = Column(Integer, nullable=False, default=480)
    weekly_minutes = Column(Integer, nullable=False, default=2400)
    lunch_break_minutes = Column(Integer, nullable=False, default=60)
    notes = Column(Text)

    # Relationships
    employee = relationship("Employee", back_populates="work_schedule")
