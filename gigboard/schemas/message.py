from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class MessageCreate(BaseModel):
    task_id: int
    sender_id: int
    message_text: str = Field(..., min_length=1)

class MessageResponse(BaseModel):
    id: int
    task_id: int
    sender_id: int
    message_text: str
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}

class SenderName(BaseModel):
    name: Optional[str]

    model_config = {"from_attributes": True}

class MessageWithSenderResponse(MessageResponse):
    sender: SenderName
