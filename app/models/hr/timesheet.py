from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Date
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import BaseModel

class Timesheet(BaseModel):
    """Saved summary of one analysed period (folha de ponto)."""
    __tablename__ = 'timesheets'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    employee_name = Column(String(150), nullable=False)
    employee_number = Column(Integer)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_days = Column(Integer, nullable=False, default=0)
    worked_days = Column(Integer, nullable=False, default=0)
    absent_days = Column(Integer, nullable=False, default=0)
    time_off_days = Column(Integer, nullable=False, default=0)
    holiday_days = Column(Integer, nullable=False, default=0)
    total_minutes_worked = Column(Integer, nullable=False, default=0)
    total_minutes_expected = Column(Integer, nullable=False, default=0)
    balance_minutes = Column(Integer, nullable=False, default=0)
    dsr_discounts = Column(Integer, nullable=False, default=0)
    pdf_url = Column(String(255))
    generated_by = Column(String(100))
    generated_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    employee = relationship("Employee", back_populates="timesheets")
