from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class NotificationResponse(BaseModel):
    id: int
    user_id: int
    title: str
    message: Optional[str]
    is_read: bool
    type: str
    target_id: Optional[int]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}

class UnreadCountResponse(BaseModel):
    unread: int

class SuccessResponse(BaseModel):
    success: bool = True
