from typing import Optional
from gigboard.models.direct_request import DirectRequest
from gigboard.models.task import Task

TITLE_PREFIX = "Direct: "
TITLE_MESSAGE_CHARS = 15


def direct_task_title(message: str) -> str:
    return TITLE_PREFIX + message[:TITLE_MESSAGE_CHARS]


def offer_text(price: Optional[float], message: str) -> str:
    if price is None:
        return f"Offer: {message}"
    amount = int(price) if float(price).is_integer() else price
    return f"Offer: ₹{amount} - {message}"


def task_from_request(request: DirectRequest) -> Task:
    """Build the in-progress task a direct request turns into once accepted."""
    return Task(
        created_by=request.sender_id,
        assigned_to=request.receiver_id,
        title=direct_task_title(request.message),
        description=request.message,
        price=request.price_offer,
        location=request.location_offer,
        status="in_progress",
        urgency="Immediate",
        category="Direct",
    )
