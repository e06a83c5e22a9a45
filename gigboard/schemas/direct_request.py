from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class DirectRequestCreate(BaseModel):
    sender_id: int
    receiver_id: int
    message: str = Field(..., min_length=1)
    price: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None

class DirectRequestResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    message: str
    price_offer: Optional[float]
    location_offer: Optional[str]
    status: str
    task_id: Optional[int] = None
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
