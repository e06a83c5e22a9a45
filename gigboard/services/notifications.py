"""
Best-effort notification dispatch.

A notification is written after the operation that triggered it has already
committed. Delivery is at-most-once with no guarantee: if the insert fails the
session is rolled back, the failure is logged and the caller carries on.
"""
import logging
from typing import Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from gigboard.models.notification import Notification

logger = logging.getLogger(__name__)


async def notify(
    db: AsyncSession,
    user_id: int,
    title: str,
    message: str,
    type: str = "info",
    target_id: Optional[int] = None,
) -> Optional[Notification]:
    notification = Notification(
        user_id=user_id,
        title=title,
        message=message,
        is_read=False,
        type=type,
        target_id=target_id,
    )
    db.add(notification)
    try:
        await db.commit()
    except sa_exc.SQLAlchemyError:
        await db.rollback()
        logger.exception("Notification %r for user %s was not delivered", title, user_id)
        return None
    return notification
