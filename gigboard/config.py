from pydantic_settings import BaseSettings
from typing import Optional
from pydantic import Field, field_validator

class Settings(BaseSettings):
    DATABASE_URL: Optional[str] = None
    SQLALCHEMY_DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = Field(False)

    # Campus email suffix, e.g. "kpriet.ac.in". Empty or missing → accept any domain.
    ALLOWED_EMAIL_DOMAIN: Optional[str] = None

    PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @field_validator("ALLOWED_EMAIL_DOMAIN")
    @classmethod
    def normalize_domain(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().lower().lstrip("@")
        return value or None

    @property
    def effective_database_url(self) -> str:
        db_url = self.SQLALCHEMY_DATABASE_URL or self.DATABASE_URL or "sqlite+aiosqlite:///./gigboard.db"
        # Ensure asyncpg is used
        if db_url.startswith("postgresql://"):
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return db_url

settings = Settings()


def get_settings() -> Settings:
    return settings
