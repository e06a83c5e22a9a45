import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gigboard.config import Settings, get_settings
from gigboard.database import Base, get_db
from gigboard.main import app


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
def app_settings():
    return Settings(ALLOWED_EMAIL_DOMAIN=None)


@pytest.fixture
async def client(session_factory, app_settings):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: app_settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    async def _make_user(name="Student", phone=None, email=None, **extra):
        counter["n"] += 1
        payload = {
            "phone": phone or f"90000000{counter['n']:02d}",
            "name": name,
            "department": extra.pop("department", "CSE"),
            "year": extra.pop("year", "3"),
            "email": email or f"student{counter['n']}@college.edu",
        }
        res = await client.post("/login", json=payload)
        assert res.status_code == 200, res.text
        return res.json()

    return _make_user


@pytest.fixture
def make_task(client):
    async def _make_task(creator_id, title="Fix bike", **extra):
        payload = {
            "created_by": creator_id,
            "title": title,
            "description": extra.pop("description", "Rear tyre is flat"),
            "price": extra.pop("price", 100),
            "location": extra.pop("location", "Hostel B"),
            "urgency": extra.pop("urgency", "Today"),
            **extra,
        }
        res = await client.post("/tasks", json=payload)
        assert res.status_code == 200, res.text
        return res.json()

    return _make_task
