"""
Database Configuration

Async SQLAlchemy 2.0 setup. PostgreSQL runs on asyncpg, SQLite on aiosqlite.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from product_api.core.config import Settings, get_settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models should inherit from this class.
    """
    pass


# Module-level engine instance (lazily initialized)
_engine: Optional[AsyncEngine] = None
_async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def build_engine(settings: Settings, poolclass: Optional[type] = None) -> AsyncEngine:
    """
    Create an async engine for the configured database URL.

    Hosted PostgreSQL needs an SSL context passed to asyncpg directly, and
    asyncpg rejects libpq query parameters such as ``sslmode``, so the
    query string is dropped in that case.
    """
    db_url = settings.DATABASE_URL
    kwargs = {"echo": settings.DATABASE_ECHO}

    if poolclass is not None:
        kwargs["poolclass"] = poolclass

    if settings.is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        if poolclass is None:
            kwargs.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
        if settings.DATABASE_SSL:
            import ssl

            if "?" in db_url:
                db_url = db_url.split("?")[0]

            ssl_context = ssl.create_default_context()
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
            kwargs["connect_args"] = {"ssl": ssl_context}

    return create_async_engine(db_url, **kwargs)


def get_engine() -> AsyncEngine:
    """Get or create the async engine."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get or create the session maker."""
    global _async_session_maker
    if _async_session_maker is None:
        _async_session_maker = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
    return _async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Usage in FastAPI:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...

    Yields:
        AsyncSession: An async database session.
    """
    session_maker = get_session_maker()
    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """
    Initialize database tables.

    Note: In production, use Alembic migrations instead.
    """
    # Register models on Base.metadata
    import product_api.models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections."""
    global _engine, _async_session_maker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_maker = None
