from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from gigboard.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    phone = Column(String, unique=True, index=True, nullable=False)  # identity key
    name = Column(String, nullable=True)
    department = Column(String, nullable=True)
    year = Column(String, nullable=True)
    email = Column(String, nullable=True)
    college_domain = Column(String, nullable=True)  # part of the email after "@"
    status = Column(String, nullable=False, default="available")
    is_verified = Column(Boolean, nullable=False, default=False)
    rating_avg = Column(Float, nullable=False, default=5.0)
    tasks_completed = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    skill_rows = relationship(
        "UserSkill",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="UserSkill.skill",
    )

    @property
    def skills(self) -> list[str]:
        return sorted(row.skill for row in self.skill_rows)


class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    skill = Column(String, nullable=False, index=True)

    __table_args__ = (UniqueConstraint("user_id", "skill", name="uq_user_skill"),)
