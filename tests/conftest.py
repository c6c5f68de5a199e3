"""
Pytest configuration for Zelene tests.

Every test gets a fresh in-memory SQLite database and an HTTP client
bound to the application, with the captcha verifier and object storage
replaced by in-process fakes.
"""

import os

# Must be set before any zelene import reads settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_ENV"] = "test"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from zelene.api.dependencies.database import get_db
from zelene.api.dependencies.services import get_captcha_verifier, get_storage_service
from zelene.api.main import app
from zelene.shared.models import Base, User, UserRole
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.services.auth_service import issue_token
from zelene.shared.services.storage_service import StorageService
from zelene.shared.utils.security import SecurityUtils

VALID_CAPTCHA = "valid-captcha"


# ═══════════════════════════════════════════════════════════════════════════════
# FAKES
# ═══════════════════════════════════════════════════════════════════════════════


class FakeCaptcha:
    """Accepts exactly one token."""

    async def verify(self, token: Optional[str]) -> bool:
        return token == VALID_CAPTCHA


class InMemoryS3:
    """Stands in for S3Adapter, keeping objects in a dict."""

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def put_object_async(self, key: str, data: bytes, content_type: str) -> None:
        self.objects[key] = (data, content_type)

    async def presigned_url_async(self, key: str) -> str:
        return f"https://storage.test/{key}?signature=test"


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data directly. Commit to make it visible to requests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage() -> InMemoryS3:
    return InMemoryS3()


@pytest.fixture
async def client(session_factory, storage) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_captcha_verifier] = lambda: FakeCaptcha()
    app.dependency_overrides[get_storage_service] = lambda: StorageService(storage)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════════════════════════
# USERS AND TOKENS
# ═══════════════════════════════════════════════════════════════════════════════


async def create_user(
    session: AsyncSession,
    username: str,
    role: UserRole = UserRole.MEMBER,
    password: str = "secret1",
    **fields,
) -> User:
    """Insert and commit a user with a hashed password."""
    user = await UserRepository(session).create(
        username=username,
        email=fields.pop("email", f"{username}@example.com"),
        password_hash=SecurityUtils.hash_password(password),
        role=role,
        **fields,
    )
    await session.commit()
    return user


def auth_header(user: User) -> dict[str, str]:
    token, _ = issue_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def member(db) -> User:
    return await create_user(db, "member", UserRole.MEMBER)


@pytest.fixture
async def admin(db) -> User:
    return await create_user(db, "admin", UserRole.ADMIN)


@pytest.fixture
async def tenant_admin(db) -> User:
    return await create_user(db, "tenant", UserRole.TENANT_ADMIN)
