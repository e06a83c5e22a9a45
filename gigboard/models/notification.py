from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, func
from gigboard.database import Base

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    type = Column(String, nullable=False, default="info")  # info | task | request
    # Id of the task or direct request this points at; which table depends on `type`
    target_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
