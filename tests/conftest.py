"""
Test infrastructure for the Instafeed API.

Strategy
--------
- SQLite in-memory via aiosqlite, so no Postgres instance is needed.
- StaticPool makes every session share the single in-memory connection;
  a second connection would see an empty database.
- Both session dependencies (``get_db`` and ``get_readonly_db``) are
  overridden to use the test session factory, keeping their commit /
  rollback semantics.
- Tables are created before and dropped after every test.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from instafeed.database import Base, get_db, get_readonly_db
from instafeed.main import app
from instafeed.middleware import install_query_counter
from instafeed.models import Profile, User

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency overrides
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def override_get_readonly_db():
    async with async_session_test() as session:
        try:
            yield session
        finally:
            await session.rollback()


app.dependency_overrides[get_db] = override_get_db
app.dependency_overrides[get_readonly_db] = override_get_readonly_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live session for tests that call services or seed rows directly."""
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def profile(db_session: AsyncSession) -> Profile:
    """An active profile owned by a fresh user, flushed into ``db_session``."""
    user = User(name="owner", email="owner@example.com", password="not-a-real-hash")
    db_session.add(user)
    await db_session.flush()
    profile = Profile(user_id=user.id, nickname="owner_nick", is_deleted=False)
    db_session.add(profile)
    await db_session.flush()
    return profile
