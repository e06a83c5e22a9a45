from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func
from typing import List
from gigboard.database import get_db
from gigboard.models.notification import Notification
from gigboard.schemas.notification import NotificationResponse, UnreadCountResponse, SuccessResponse

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/{user_id}", response_model=List[NotificationResponse])
async def list_notifications(user_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    )
    return result.scalars().all()


@router.get("/{user_id}/unread-count", response_model=UnreadCountResponse)
async def unread_count(user_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(func.count(Notification.id))
        .where(Notification.user_id == user_id)
        .where(Notification.is_read.is_(False))
    )
    return UnreadCountResponse(unread=result.scalar_one() or 0)


@router.put("/{notification_id}/read", response_model=SuccessResponse)
async def mark_read(notification_id: int, db: AsyncSession = Depends(get_db)):
    # Idempotent: reading twice, or reading an unknown id, is not an error
    await db.execute(
        update(Notification)
        .where(Notification.id == notification_id)
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return SuccessResponse()


@router.put("/{user_id}/read-all", response_model=SuccessResponse)
async def mark_all_read(user_id: int, db: AsyncSession = Depends(get_db)):
    await db.execute(
        update(Notification)
        .where(Notification.user_id == user_id)
        .where(Notification.is_read.is_(False))
        .values(is_read=True)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return SuccessResponse()
