from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class TaskCreate(BaseModel):
    created_by: int
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None
    urgency: Optional[str] = None
    category: Optional[str] = None

class CreatorSnapshot(BaseModel):
    name: Optional[str]
    department: Optional[str]
    rating_avg: float
    is_verified: bool
    college_domain: Optional[str]

    model_config = {"from_attributes": True}

class TaskResponse(BaseModel):
    id: int
    created_by: int
    assigned_to: Optional[int]
    title: str
    description: Optional[str]
    price: Optional[float]
    location: Optional[str]
    urgency: Optional[str]
    category: str
    status: str
    created_at: Optional[datetime]
    completed_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class TaskWithCreatorResponse(TaskResponse):
    creator: CreatorSnapshot

class TaskCompleteResponse(BaseModel):
    message: str
    task: TaskResponse
