from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Literal, Optional

UserStatus = Literal["available", "busy", "not_taking_tasks", "offline"]

class LoginRequest(BaseModel):
    phone: str = Field(..., min_length=1, max_length=20)
    name: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None
    # Format is only checked on first registration; repeat logins ignore it
    email: Optional[str] = None

class UserResponse(BaseModel):
    id: int
    phone: str
    name: Optional[str]
    department: Optional[str]
    year: Optional[str]
    email: Optional[str]
    college_domain: Optional[str]
    status: str
    is_verified: bool
    rating_avg: float
    tasks_completed: int
    skills: List[str] = []
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class StatusUpdate(BaseModel):
    user_id: int
    status: UserStatus

class StatusUpdateResponse(BaseModel):
    message: str
    user: UserResponse

class SkillsUpdate(BaseModel):
    skills: List[str]

class HelperResponse(BaseModel):
    id: int
    name: Optional[str]
    department: Optional[str]
    rating_avg: float
    skills: List[str] = []
    status: str
    tasks_completed: int
    college_domain: Optional[str]

    model_config = {"from_attributes": True}

class HelperSummary(BaseModel):
    id: int
    name: Optional[str]
    rating_avg: float
    status: str

    model_config = {"from_attributes": True}
