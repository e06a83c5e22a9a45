from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from gigboard.models.review import Review
from gigboard.models.user import User

DEFAULT_RATING = 5.0

async def recompute_rating(db: AsyncSession, user_id: int) -> float:
    """Set users.rating_avg to AVG(rating) over every review the user received.

    Runs as a single UPDATE with a scalar subquery so the average is computed by
    the database inside the caller's transaction. Does not commit.
    """
    average = (
        select(func.coalesce(func.avg(Review.rating), DEFAULT_RATING))
        .where(Review.reviewed_user_id == user_id)
        .scalar_subquery()
    )
    await db.execute(
        update(User)
        .where(User.id == user_id)
        .values(rating_avg=average)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(select(User.rating_avg).where(User.id == user_id))
    return float(result.scalar_one())
