from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.orm import selectinload
from datetime import datetime, timezone
from typing import List, Optional
from gigboard.database import get_db
from gigboard.models.task import Task
from gigboard.models.user import User
from gigboard.schemas.task import TaskCreate, TaskResponse, TaskWithCreatorResponse, TaskCompleteResponse
from gigboard.services.notifications import notify

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.get("", response_model=List[TaskWithCreatorResponse])
async def list_open_tasks(
    category: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    query = (
        select(Task)
        .options(selectinload(Task.creator))
        .where(Task.status == "open")
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    # "All" is the board's no-filter tab
    if category and category != "All":
        query = query.where(Task.category == category)

    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=TaskResponse)
async def create_task(
    task_in: TaskCreate,
    db: AsyncSession = Depends(get_db)
):
    # Ensure the poster exists
    creator = await db.get(User, task_in.created_by)
    if not creator:
        raise HTTPException(400, "Creator not found")

    task = Task(
        created_by=task_in.created_by,
        title=task_in.title,
        description=task_in.description,
        price=task_in.price,
        location=task_in.location,
        urgency=task_in.urgency,
        category=(task_in.category or "").strip() or "General",
        status="open"
    )
    db.add(task)
    await db.commit()
    await db.refresh(task)
    return task


@router.get("/{task_id}", response_model=TaskWithCreatorResponse)
async def get_task(task_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Task)
        .options(selectinload(Task.creator))
        .where(Task.id == task_id)
    )
    task = result.scalar_one_or_none()
    if not task:
        raise HTTPException(404, "Task not found")
    return task


@router.put("/{task_id}/complete", response_model=TaskCompleteResponse)
async def complete_task(
    task_id: int,
    db: AsyncSession = Depends(get_db)
):
    result = await db.execute(select(Task).where(Task.id == task_id))
    task = result.scalar_one_or_none()
    if not task:
        raise HTTPException(400, "Task not found")
    if task.status == "completed":
        raise HTTPException(400, "Task already completed")

    task.status = "completed"
    task.completed_at = datetime.now(timezone.utc)
    if task.assigned_to is not None:
        await db.execute(
            update(User)
            .where(User.id == task.assigned_to)
            .values(tasks_completed=User.tasks_completed + 1)
            .execution_options(synchronize_session=False)
        )
    await db.commit()
    await db.refresh(task)
    response = TaskCompleteResponse(message="Task Completed", task=TaskResponse.model_validate(task))

    # Notify the creator
    await notify(
        db,
        task.created_by,
        "Task Completed",
        f'Task "{task.title}" is marked as done.',
        type="task",
        target_id=task.id,
    )
    return response
