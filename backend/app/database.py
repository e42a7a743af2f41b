"""
Database engines and sessions for Noor SEO.

The API process shares one pooled engine. Celery tasks build their own
engine per task, since each task runs in a fresh event loop.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from app.config import settings
from app.models.base import Base


def async_database_url(url: str) -> str:
    """Point a plain postgresql:// URL at the asyncpg driver."""
    return url.replace("postgresql://", "postgresql+asyncpg://", 1)


def build_engine(pool_size: int, max_overflow: int, echo: bool = False) -> AsyncEngine:
    return create_async_engine(
        async_database_url(settings.DATABASE_URL),
        echo=echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
    )


def build_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(
    pool_size=10,
    max_overflow=20,
    echo=settings.ENVIRONMENT == "development",
)

AsyncSessionLocal = build_session_maker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session: committed when the handler returns, rolled back if it raises."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_task_session_maker() -> async_sessionmaker[AsyncSession]:
    """Session maker on a small dedicated engine for one Celery task."""
    return build_session_maker(build_engine(pool_size=2, max_overflow=3))


async def init_db() -> None:
    """Create any missing tables. Alembic owns schema changes after that."""
    # Register every model on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
