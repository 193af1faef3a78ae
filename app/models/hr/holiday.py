from sqlalchemy import Column, String, Boolean, Text, Date
from app.db.base import BaseModel

class Holiday(BaseModel):
    __tablename__ = 'holidays'

    name = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(Text)
    is_recurring = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
