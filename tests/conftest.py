"""Pytest configuration and fixtures for tasknest.

Every DB-backed test gets its own sqlite+aiosqlite file under tmp_path with
the schema created from the ORM metadata. HTTP tests run tasknest.main:app
with get_db / get_db_transactional overridden to that file.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./tasknest-test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["TELEMETRY_ENABLED"] = "false"

from collections.abc import AsyncIterator, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tasknest.core.limiter import limiter  # noqa: E402
from tasknest.infrastructure.persistence.database import (  # noqa: E402
    Base,
    get_db,
    get_db_transactional,
)
from tasknest.infrastructure.persistence.models import Profile  # noqa: E402
from tasknest.infrastructure.security.jwt import create_access_token  # noqa: E402
from tasknest.main import app  # noqa: E402


@pytest.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    """Engine bound to a fresh sqlite file with all tables created."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasknest.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Nothing is committed unless the test commits."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_profile(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable:
    """Return an async helper that commits a profile for owner_id."""

    async def _seed(
        owner_id: str,
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        occupation: str = "Engineer",
    ) -> None:
        async with session_factory() as session:
            async with session.begin():
                session.add(
                    Profile(
                        owner_id=owner_id,
                        first_name=first_name,
                        last_name=last_name,
                        occupation=occupation,
                        phone_number="+10000000000",
                    )
                )

    return _seed


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), backed by the test DB."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a helper building Authorization headers for a caller id."""

    def _headers(owner_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(owner_id)}"}

    return _headers
