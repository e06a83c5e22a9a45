from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey, func
from gigboard.database import Base

class DirectRequest(Base):
    __tablename__ = "direct_requests"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    price_offer = Column(Float, nullable=True)
    location_offer = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending, converted
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=True)  # set once converted
    created_at = Column(DateTime(timezone=True), server_default=func.now())
