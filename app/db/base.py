from sqlalchemy import Column, Integer, DateTime, Boolean
from sqlalchemy.sql import func
from app.models.base import Base

class BaseModel(Base):
    """Audit columns and soft delete shared by every table"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    is_deleted = Column(Boolean, default=False)
    created_by = Column(Integer, nullable=True)
    updated_by = Column(Integer, nullable=True)

    def soft_delete(self) -> None:
        self.is_deleted = True
        if hasattr(self, "is_active"):
            self.is_active = False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
