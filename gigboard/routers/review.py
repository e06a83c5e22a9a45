from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from gigboard.database import get_db
from gigboard.models.review import Review
from gigboard.models.user import User
from gigboard.schemas.review import ReviewCreate, ReviewSavedResponse
from gigboard.services.rating import recompute_rating

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewSavedResponse)
async def submit_review(
    review_in: ReviewCreate,
    db: AsyncSession = Depends(get_db)
):
    if not await db.get(User, review_in.reviewed_user_id):
        raise HTTPException(404, "Reviewed user not found")

    review = Review(
        task_id=review_in.task_id,
        reviewer_id=review_in.reviewer_id,
        reviewed_user_id=review_in.reviewed_user_id,
        rating=review_in.rating,
        comment=review_in.comment
    )
    db.add(review)
    await db.flush()
    # Insert and new average commit together
    rating_avg = await recompute_rating(db, review_in.reviewed_user_id)
    await db.commit()
    return ReviewSavedResponse(message="Review saved", rating_avg=rating_avg)
