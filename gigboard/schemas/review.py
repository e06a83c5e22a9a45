from pydantic import BaseModel, Field
from typing import Optional

class ReviewCreate(BaseModel):
    task_id: Optional[int] = None
    reviewer_id: Optional[int] = None
    reviewed_user_id: int
    rating: float = Field(..., ge=1, le=5)
    comment: Optional[str] = None

class ReviewSavedResponse(BaseModel):
    message: str
    rating_avg: float
