import os
import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.append(str(Path(__file__).parents[1] / "src"))

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("JWT_SECRET", "test-secret-key-not-for-production")

from remarkbook.api.deps import get_image_storage  # noqa: E402
from remarkbook.db.session import get_db  # noqa: E402
from remarkbook.main import app  # noqa: E402
from remarkbook.services.uploads import ProfileImageStorage  # noqa: E402


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection keeps the in-memory database alive for the test.
        return {"poolclass": StaticPool}
    return {}


@pytest.fixture
async def test_engine():
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests run without any database.
    """
    from remarkbook.models.base import Base

    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Provide test database session."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()


async def _create_user(db_session: AsyncSession, email: str, first_name: str):
    from remarkbook.core.security import hash_password
    from remarkbook.models.user import User
    from remarkbook.repositories.user import UserRepository

    repo = UserRepository(db_session)
    return await repo.create(
        User(
            first_name=first_name,
            last_name="Tester",
            email=email,
            password_hash=hash_password("password123"),
        )
    )


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """User owning the remarks under test. Password: password123."""
    return await _create_user(db_session, "testuser@example.com", "Test")


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """Second user, for ownership checks."""
    return await _create_user(db_session, "other@example.com", "Other")


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with valid JWT token."""
    from remarkbook.core.security import create_access_token

    token = create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_auth_headers(other_user):
    from remarkbook.core.security import create_access_token

    token = create_access_token(user_id=other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def image_storage(tmp_path) -> ProfileImageStorage:
    """Profile image storage rooted in a temporary directory, 1MB limit."""
    return ProfileImageStorage(root=tmp_path / "uploads", max_size_mb=1)


@pytest.fixture
async def client(db_session: AsyncSession, image_storage: ProfileImageStorage):
    """Provide test client with database and storage overrides."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_storage] = lambda: image_storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
