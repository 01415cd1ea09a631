"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from itertools import count
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the package
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DEBUG", "false")

from sample_app.database import configure_sqlite, init_db
from sample_app.models.user import User
from sample_app.services.users import create_user


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with the schema created."""
    test_engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    configure_sqlite(test_engine)
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Database session bound to the test engine."""
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def user_data() -> dict[str, Any]:
    """Valid registration input."""
    return {
        "name": "Example User",
        "email": "example@mail.com",
        "password": "foobar",
        "password_confirmation": "foobar",
    }


@pytest.fixture
def user_factory(db: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Create saved users with unique names and emails."""
    sequence = count(1)

    async def factory(**overrides: Any) -> User:
        n = next(sequence)
        data = {
            "name": f"Person {n}",
            "email": f"person-{n}@example.com",
            "password": "foobar",
            "password_confirmation": "foobar",
        } | overrides
        result = await create_user(db, data)
        assert result.ok, result.errors
        return result.record

    return factory
