import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from typing import List, Literal, Optional
from gigboard.database import get_db
from gigboard.models.direct_request import DirectRequest
from gigboard.models.user import User
from gigboard.schemas.direct_request import DirectRequestCreate, DirectRequestResponse
from gigboard.schemas.task import TaskResponse
from gigboard.services.direct_requests import offer_text, task_from_request
from gigboard.services.notifications import notify

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/direct-requests", tags=["direct-requests"])


@router.post("", response_model=DirectRequestResponse)
async def create_request(
    request_in: DirectRequestCreate,
    db: AsyncSession = Depends(get_db)
):
    for label, user_id in (("Sender", request_in.sender_id), ("Receiver", request_in.receiver_id)):
        if not await db.get(User, user_id):
            raise HTTPException(400, f"{label} not found")

    direct_request = DirectRequest(
        sender_id=request_in.sender_id,
        receiver_id=request_in.receiver_id,
        message=request_in.message,
        price_offer=request_in.price,
        location_offer=request_in.location,
        status="pending"
    )
    db.add(direct_request)
    await db.commit()
    await db.refresh(direct_request)
    response = DirectRequestResponse.model_validate(direct_request)

    # Notify the receiver, linking straight to the offer
    await notify(
        db,
        response.receiver_id,
        "New Job Request",
        offer_text(response.price_offer, response.message),
        type="request",
        target_id=response.id,
    )
    return response


@router.get("/received/{user_id}", response_model=List[DirectRequestResponse])
async def list_received_requests(
    user_id: int,
    status: Optional[Literal["pending", "converted"]] = None,
    db: AsyncSession = Depends(get_db)
):
    query = select(DirectRequest).where(DirectRequest.receiver_id == user_id)
    if status:
        query = query.where(DirectRequest.status == status)
    query = query.order_by(DirectRequest.created_at.desc(), DirectRequest.id.desc())
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{request_id}", response_model=DirectRequestResponse)
async def get_request(request_id: int, db: AsyncSession = Depends(get_db)):
    direct_request = await db.get(DirectRequest, request_id)
    if not direct_request:
        raise HTTPException(404, "Direct request not found")
    return direct_request


@router.post("/{request_id}/convert", response_model=TaskResponse)
async def convert_request(
    request_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Turn a pending offer into an in-progress task assigned to the receiver.
    The task insert and the request update commit together.
    """
    direct_request = await db.get(DirectRequest, request_id)
    if not direct_request:
        raise HTTPException(404, "Direct request not found")
    if direct_request.status == "converted":
        raise HTTPException(400, "Direct request already converted")

    # Claim the request; a concurrent convert that got here first leaves 0 rows
    claimed = await db.execute(
        update(DirectRequest)
        .where(DirectRequest.id == request_id)
        .where(DirectRequest.status == "pending")
        .values(status="converted")
        .execution_options(synchronize_session=False)
    )
    if claimed.rowcount != 1:
        await db.rollback()
        raise HTTPException(400, "Direct request already converted")

    task = task_from_request(direct_request)
    db.add(task)
    await db.flush()
    direct_request.status = "converted"
    direct_request.task_id = task.id
    await db.commit()
    await db.refresh(task)
    response = TaskResponse.model_validate(task)
    logger.info("Direct request %s converted into task %s", request_id, task.id)

    await notify(
        db,
        direct_request.sender_id,
        "Request Accepted",
        f'Your request is now the task "{response.title}".',
        type="task",
        target_id=response.id,
    )
    return response
