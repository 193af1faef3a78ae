from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey, Enum as SQLEnum, Date
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.models.shared.enums import TimeOffType

class TimeOff(BaseModel):
    __tablename__ = 'time_offs'

    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False, index=True)
    type = Column(SQLEnum(TimeOffType), nullable=False, default=TimeOffType.OTHER)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text)
    document_url = Column(String(255))
    is_approved = Column(Boolean, default=True)
    notes = Column(Text)

    # Relationships
    employee = relationship("Employee", back_populates="time_offs")
