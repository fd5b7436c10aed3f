import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("CACHE_ENABLED", "false")

import uuid
from datetime import datetime, time, timedelta, timezone
from typing import AsyncGenerator, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ticketing_api.api.dependencies.cache import get_cache_adapter
from ticketing_api.api.dependencies.database import get_db
from ticketing_api.api.dependencies.services import get_email_sender_dependency
from ticketing_api.api.main import create_application
from ticketing_api.config.settings import settings
from ticketing_api.shared.adapters.email_adapter import LoggingEmailSender
from ticketing_api.shared.adapters.redis_adapter import CacheLookup, CacheStatus
from ticketing_api.shared.db.session import commit_session, discard_after_commit
from ticketing_api.shared.models import Base, Event, User, UserRole, Venue
from ticketing_api.shared.utils.constants import ACCESS_TOKEN_TYPE
from ticketing_api.shared.utils.security import SecurityUtils


class FakeCache:
    """In-memory stand-in for RedisCache that records every call."""

    def __init__(self, fail: bool = False) -> None:
        self.store: dict[str, str] = {}
        self.fail = fail
        self.gets: list[str] = []
        self.sets: list[str] = []
        self.deletes: list[str] = []
        self.enabled = True

    async def get(self, key: str) -> CacheLookup:
        self.gets.append(key)
        if self.fail:
            return CacheLookup(CacheStatus.ERROR)
        if key not in self.store:
            return CacheLookup(CacheStatus.MISS)
        return CacheLookup(CacheStatus.HIT, self.store[key])

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        self.sets.append(key)
        if self.fail:
            return False
        self.store[key] = value
        return True

    async def delete(self, key: str) -> bool:
        self.deletes.append(key)
        return self.store.pop(key, None) is not None

    async def ping(self) -> bool:
        return not self.fail

    async def close(self) -> None:
        pass


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def engine():
    """Fresh in-memory SQLite database per test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ═══════════════════════════════════════════════════════════════════════════════
# DOUBLES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def email_sender() -> LoggingEmailSender:
    return LoggingEmailSender()


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP CLIENT
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def client(session_factory, fake_cache, email_sender) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, wired to SQLite and the fake cache. Lifespan is not run."""
    app = create_application()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await commit_session(session)
            except Exception:
                await session.rollback()
                discard_after_commit(session)
                raise

    async def override_get_cache():
        return fake_cache

    async def override_get_email_sender():
        return email_sender

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache_adapter] = override_get_cache
    app.dependency_overrides[get_email_sender_dependency] = override_get_email_sender

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════════════════════════
# SAMPLE DATA
# ═══════════════════════════════════════════════════════════════════════════════


def make_token(user: User) -> str:
    return SecurityUtils.create_token(
        data={"user_id": str(user.id), "email": user.email, "role": user.role.value},
        secret_key=settings.SECRET_KEY,
        token_type=ACCESS_TOKEN_TYPE,
        expires_delta=timedelta(minutes=5),
        algorithm=settings.JWT_ALGORITHM,
    )


def auth_header(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user)}"}


async def _create_user(session: AsyncSession, role: UserRole) -> User:
    user = User(
        name=f"{role.value} user",
        email=f"{role.value}-{uuid.uuid4().hex[:8]}@example.com",
        password_hash=SecurityUtils.hash_password("password123"),
        role=role,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await _create_user(db_session, UserRole.ADMIN)


@pytest.fixture
async def buyer_user(db_session: AsyncSession) -> User:
    return await _create_user(db_session, UserRole.BUYER)


@pytest.fixture
async def other_buyer(db_session: AsyncSession) -> User:
    return await _create_user(db_session, UserRole.BUYER)


@pytest.fixture
async def sample_venue(db_session: AsyncSession) -> Venue:
    venue = Venue(
        name="Moody Center",
        address="2001 Robert Dedman Dr",
        capacity=15000,
        city="Austin",
        state="TX",
        zip="78712",
    )
    db_session.add(venue)
    await db_session.commit()
    await db_session.refresh(venue)
    return venue


@pytest.fixture
async def sample_event(db_session: AsyncSession, sample_venue: Venue) -> Event:
    event = Event(
        name="Annual Event",
        description="Yearly gathering",
        date=datetime(2026, 5, 1, 19, 0, tzinfo=timezone.utc),
        time=time(19, 0),
        venue_id=sample_venue.id,
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event
