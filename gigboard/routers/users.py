import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import exc as sa_exc
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gigboard.database import get_db
from gigboard.models.user import User, UserSkill
from gigboard.schemas.user import (
    HelperResponse, HelperSummary, SkillsUpdate, StatusUpdate, StatusUpdateResponse, UserResponse
)
from gigboard.services.users import get_user, set_skills

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

TOP_HELPERS = 10


@router.put("/users/status", response_model=StatusUpdateResponse)
async def update_status(
    status_in: StatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    user = await get_user(db, status_in.user_id)
    if not user:
        raise HTTPException(404, "User not found")

    user.status = status_in.status
    await db.commit()
    return StatusUpdateResponse(message="Status Updated", user=UserResponse.model_validate(user))


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_profile(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await get_user(db, user_id)
    if not user:
        raise HTTPException(404, "User not found")
    return user


@router.put("/users/{user_id}/skills", response_model=UserResponse)
async def update_skills(
    user_id: int,
    skills_in: SkillsUpdate,
    db: AsyncSession = Depends(get_db),
):
    user = await get_user(db, user_id)
    if not user:
        raise HTTPException(404, "User not found")

    set_skills(user, skills_in.skills)
    await db.commit()
    return await get_user(db, user_id)


@router.get("/search/helpers", response_model=List[HelperResponse])
async def search_helpers(
    skill: Optional[str] = None,
    query: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Available users, best rated first.
    `skill` must be in the user's skill set, `query` is a case-insensitive
    substring of the name. A failed lookup returns an empty list.
    """
    stmt = (
        select(User)
        .where(User.status == "available")
        .order_by(User.rating_avg.desc(), User.id)
    )
    if skill and skill != "All":
        stmt = stmt.where(User.skill_rows.any(UserSkill.skill == skill))
    if query:
        stmt = stmt.where(User.name.ilike(f"%{query}%"))

    try:
        result = await db.execute(stmt)
        return [HelperResponse.model_validate(u) for u in result.scalars().all()]
    except sa_exc.SQLAlchemyError:
        logger.exception("Helper search failed (skill=%r, query=%r)", skill, query)
        return []


@router.get("/helpers", response_model=List[HelperSummary])
async def list_helpers(db: AsyncSession = Depends(get_db)):
    stmt = (
        select(User.id, User.name, User.rating_avg, User.status)
        .where(User.status == "available")
        .order_by(User.rating_avg.desc(), User.id)
        .limit(TOP_HELPERS)
    )
    try:
        result = await db.execute(stmt)
    except sa_exc.SQLAlchemyError:
        logger.exception("Listing top helpers failed")
        return []
    return [HelperSummary.model_validate(dict(row._mapping)) for row in result.all()]
