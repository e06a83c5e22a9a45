from typing import Iterable, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from gigboard.models.user import User, UserSkill


def email_domain(email: str) -> str:
    """Everything after the "@", e.g. "kpriet.ac.in"."""
    return email.split("@", 1)[1].lower() if "@" in email else ""


def is_allowed_email(email: str, allowed_domain: Optional[str]) -> bool:
    """
    Returns:
      - True when no domain is configured (accept any campus)
      - True when the email's domain is the allowed one or a subdomain of it
    """
    if not allowed_domain:
        return True
    domain = email_domain(email)
    return domain == allowed_domain or domain.endswith("." + allowed_domain)


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(
        select(User).where(User.id == user_id).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_user_by_phone(db: AsyncSession, phone: str) -> Optional[User]:
    result = await db.execute(
        select(User).where(User.phone == phone).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


def set_skills(user: User, skills: Iterable[str]) -> None:
    """Replace the user's skill set in place.

    Rows for skills that stay are kept so the (user_id, skill) unique
    constraint never sees a delete and re-insert of the same pair in one flush.
    """
    wanted = {s.strip() for s in skills if s and s.strip()}
    kept = [row for row in user.skill_rows if row.skill in wanted]
    existing = {row.skill for row in kept}
    user.skill_rows = kept + [UserSkill(skill=s) for s in sorted(wanted - existing)]
