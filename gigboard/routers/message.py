from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List
from gigboard.database import get_db
from gigboard.models.message import Message
from gigboard.models.task import Task
from gigboard.models.user import User
from gigboard.schemas.message import MessageCreate, MessageResponse, MessageWithSenderResponse

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageResponse)
async def post_message(
    message_in: MessageCreate,
    db: AsyncSession = Depends(get_db)
):
    if not await db.get(Task, message_in.task_id):
        raise HTTPException(400, "Task not found")
    if not await db.get(User, message_in.sender_id):
        raise HTTPException(400, "Sender not found")

    message = Message(
        task_id=message_in.task_id,
        sender_id=message_in.sender_id,
        message_text=message_in.message_text
    )
    db.add(message)
    await db.commit()
    await db.refresh(message)
    return message


@router.get("/{task_id}", response_model=List[MessageWithSenderResponse])
async def list_messages(task_id: int, db: AsyncSession = Depends(get_db)):
    """Chat history for a task in reading order (oldest first)."""
    result = await db.execute(
        select(Message)
        .options(selectinload(Message.sender))
        .where(Message.task_id == task_id)
        .order_by(Message.created_at, Message.id)
    )
    return result.scalars().all()
