"""Pytest configuration and fixtures for the CMS.

Environment is set before app.* is imported so Settings validation sees a
SQLite in-memory database and a log-only mail backend. Each test gets a
fresh engine and schema.
"""

import os
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["MAIL_BACKEND"] = "log"
os.environ["TELEMETRY_ENABLED"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.domain.enums import AppStatus, BlogStatus, SignupStatus, UserRole  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence.models import (  # noqa: E402
    BlogPost,
    EarlyAccessSignup,
    ResearchApp,
    User,
    Webinar,
)
from app.infrastructure.security.password import get_password_hash  # noqa: E402
from app.main import app  # noqa: E402
from app.shared.utils.datetime import utc_now  # noqa: E402

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture(autouse=True)
async def _database() -> None:
    """Fresh in-memory schema per test; rate limits and overrides reset."""
    get_settings.cache_clear()
    database.reset_engine()
    await database.init_models()
    limiter.reset()
    yield
    app.dependency_overrides.clear()
    if database.engine is not None:
        await database.engine.dispose()
    database.reset_engine()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on the test database; commits are visible to the app under test."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session


class Seeder:
    """Inserts content, signups and users with explicit timestamps."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _add(self, obj):
        self.session.add(obj)
        await self.session.commit()
        return obj

    async def blog(
        self,
        title: str,
        *,
        excerpt: str | None = None,
        content: str = "",
        status: str = BlogStatus.PUBLISHED.value,
        age: timedelta = timedelta(days=90),
    ) -> BlogPost:
        created = utc_now() - age
        return await self._add(
            BlogPost(
                title=title,
                slug=title.lower().replace(" ", "-") + f"-{int(created.timestamp())}",
                content=content or title,
                excerpt=excerpt,
                status=status,
                created_at=created,
                updated_at=created,
            )
        )

    async def webinar(
        self,
        title: str,
        *,
        description: str = "",
        is_active: bool = True,
        age: timedelta = timedelta(days=90),
    ) -> Webinar:
        created = utc_now() - age
        return await self._add(
            Webinar(
                title=title,
                description=description,
                is_active=is_active,
                created_at=created,
                updated_at=created,
            )
        )

    async def app(
        self,
        name: str,
        *,
        description: str = "",
        status: str = AppStatus.DEVELOPMENT.value,
        is_active: bool = True,
        age: timedelta = timedelta(days=90),
    ) -> ResearchApp:
        created = utc_now() - age
        return await self._add(
            ResearchApp(
                name=name,
                description=description,
                status=status,
                is_active=is_active,
                created_at=created,
                updated_at=created,
            )
        )

    async def signup(
        self,
        app_id: str,
        email: str,
        name: str,
        *,
        status: str = SignupStatus.APPROVED.value,
        created_at: datetime | None = None,
    ) -> EarlyAccessSignup:
        created = created_at or utc_now()
        return await self._add(
            EarlyAccessSignup(
                app_id=app_id,
                email=email,
                name=name,
                status=status,
                created_at=created,
                updated_at=created,
            )
        )

    async def user(
        self,
        username: str,
        *,
        role: str = UserRole.ADMIN.value,
        password: str = TEST_PASSWORD,
        is_active: bool = True,
    ) -> User:
        return await self._add(
            User(
                username=username,
                email=f"{username}@tqrs.test",
                hashed_password=get_password_hash(password),
                role=role,
                is_active=is_active,
            )
        )


@pytest.fixture
async def seed(db_session: AsyncSession) -> Seeder:
    return Seeder(db_session)


@pytest.fixture
def login(client: AsyncClient) -> Callable[[str], Awaitable[dict[str, str]]]:
    """Return a coroutine that logs a seeded user in and yields bearer headers."""

    async def _login(username: str, password: str = TEST_PASSWORD) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login", json={"username": username, "password": password}
        )
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _login


@pytest.fixture
async def admin_headers(seed: Seeder, login) -> dict[str, str]:
    await seed.user("admin", role=UserRole.ADMIN.value)
    return await login("admin")
