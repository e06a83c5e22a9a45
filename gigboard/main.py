import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import exc as sa_exc

from gigboard.config import settings
from gigboard.core.errors import register_exception_handlers
from gigboard.core.log_config import configure_logging
from gigboard.database import Base, engine
from gigboard.models.user import User  # noqa: F401
from gigboard.models.task import Task  # noqa: F401
from gigboard.models.direct_request import DirectRequest  # noqa: F401
from gigboard.models.notification import Notification  # noqa: F401
from gigboard.models.message import Message  # noqa: F401
from gigboard.models.review import Review  # noqa: F401
from gigboard.routers import auth, users, task, direct_request, notification, message, review

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Gigboard - Campus Task Marketplace", version="1.0")

# Every endpoint is open to any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include Routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(task.router)
app.include_router(direct_request.router)
app.include_router(notification.router)
app.include_router(message.router)
app.include_router(review.router)

# Create DB Tables (Alembic migrations describe the same schema for prod)
@app.on_event("startup")
async def startup_event():
    # ignore duplicate-object errors when several workers start together
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

@app.get("/")
def read_root():
    return {"message": "Welcome to the Gigboard backend"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("gigboard.main:app", host="0.0.0.0", port=settings.PORT)
