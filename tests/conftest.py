"""
Pytest Configuration and Fixtures

Provides reusable async fixtures for testing the Product API.
"""

import os

# Settings are read at import time of product_api.main
os.environ.setdefault("JWT_KEY", "test-signing-key-that-is-at-least-32-bytes")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from decimal import Decimal
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from product_api.core.config import Settings, get_settings
from product_api.core.database import Base, get_db
from product_api.core.security import create_access_token
from product_api.main import app
from product_api.models.product import Product


TEST_JWT_KEY = "unit-test-signing-key-0123456789abcdef"


# ==================== Settings Fixtures ====================

@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        JWT_KEY=TEST_JWT_KEY,
        JWT_ISSUER="TestIssuer",
        JWT_AUDIENCE="TestAudience",
        ADMIN_USERNAME="Paras",
        ADMIN_PASSWORD="123",
        EXPOSE_ERROR_DETAILS=True,
    )


# ==================== Database Fixtures ====================

@pytest.fixture
def mock_async_session() -> AsyncMock:
    """
    Create a mock async database session.

    Returns:
        AsyncMock configured to behave like AsyncSession.
    """
    session = AsyncMock(spec=AsyncSession)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.delete = AsyncMock()
    return session


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


# ==================== HTTP Client Fixtures ====================

@pytest_asyncio.fixture
async def client(session_maker, test_settings) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client bound to the app with database and settings overridden.

    Tests may replace ``app.dependency_overrides[get_db]`` to simulate
    database failures; overrides are cleared afterwards.
    """
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def access_token(test_settings) -> str:
    return create_access_token("Paras", test_settings)


@pytest.fixture
def auth_headers(access_token) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


# ==================== Product Fixtures ====================

@pytest.fixture
def sample_product_data() -> dict:
    """Sample product payload for testing."""
    return {
        "name": "Standing Desk",
        "description": "Oak top, electric lift",
        "price": 249.99,
    }


@pytest.fixture
def sample_product() -> Product:
    """Detached product instance for service tests."""
    return Product(
        id=7,
        name="Desk Lamp",
        description="LED, dimmable",
        price=Decimal("39.50"),
    )
