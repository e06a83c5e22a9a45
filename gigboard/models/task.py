from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from gigboard.database import Base

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)   # Who posted it
    assigned_to = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)   # Who does it
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    location = Column(String, nullable=True)
    urgency = Column(String, nullable=True)
    category = Column(String, nullable=False, default="General", index=True)
    status = Column(String, nullable=False, default="open", index=True)  # open, in_progress, completed
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    creator = relationship("User", foreign_keys=[created_by], lazy="raise")
