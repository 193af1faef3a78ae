from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

class TimeRecord(BaseModel):
    """One clock-in/out punch. date_time is the local wall-clock time."""
    __tablename__ = 'time_records'
    __table_args__ = (
        UniqueConstraint('employee_id', 'date_time', name='uq_time_record_employee_datetime'),
    )

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    date_time = Column(DateTime, nullable=False, index=True)
    machine_number = Column(Integer)
    is_manual = Column(Boolean, default=False)
    import_batch_id = Column(String(50))
    notes = Column(Text)

    # Relationships
    employee = relationship("Employee", back_populates="time_records")
