from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class DayEdit(BaseModel):
    """Manual correction of one employee's day; replaces raw punches for that date."""
    __tablename__ = 'day_edits'
    __table_args__ = (
        UniqueConstraint('employee_id', 'edit_date', name='uq_day_edit_employee_date'),
    )

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    edit_date = Column(Date, nullable=False)
    # HH:MM strings
    entry_time = Column(String(5))
    snack_break_start = Column(String(5))
    snack_break_end = Column(String(5))
    lunch_start = Column(String(5))
    lunch_end = Column(String(5))
    exit_time = Column(String(5))
    notes = Column(Text)

    # Relationships
    employee = relationship("Employee", back_populates="day_edits")
