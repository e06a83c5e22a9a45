# gigboard/routers/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from gigboard.config import Settings, get_settings
from gigboard.database import get_db
from gigboard.models.user import User
from gigboard.schemas.user import LoginRequest, UserResponse
from gigboard.services.users import email_domain, get_user, get_user_by_phone, is_allowed_email

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=UserResponse)
async def login(
    user_in: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register-or-login by phone number.
    A known phone gets its stored record back untouched; the rest of the body
    (including email) is only looked at on first registration.
    """
    user = await get_user_by_phone(db, user_in.phone)
    if user:
        return user

    if not user_in.email:
        raise HTTPException(400, "College Email is required.")
    try:
        email = _email_adapter.validate_python(user_in.email)
    except ValidationError:
        raise HTTPException(400, "A valid college email is required.")
    if not is_allowed_email(email, settings.ALLOWED_EMAIL_DOMAIN):
        raise HTTPException(400, f"Only @{settings.ALLOWED_EMAIL_DOMAIN} email addresses can register.")

    user = User(
        phone=user_in.phone,
        name=user_in.name,
        department=user_in.department,
        year=user_in.year,
        email=email,
        college_domain=email_domain(email),
        status="available",
        is_verified=True,
        rating_avg=5.0,
        tasks_completed=0,
        skill_rows=[],
    )
    db.add(user)
    try:
        await db.commit()
    except sa_exc.IntegrityError:
        # Another request registered this phone between our lookup and insert
        await db.rollback()
        existing = await get_user_by_phone(db, user_in.phone)
        if existing is None:
            raise
        logger.info("Concurrent registration for phone %s resolved to user %s", user_in.phone, existing.id)
        return existing

    logger.info("Registered user %s (%s)", user.id, user.college_domain)
    return await get_user(db, user.id)
