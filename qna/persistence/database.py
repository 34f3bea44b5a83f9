"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qna.config import DatabaseSettings


def create_engine(database: DatabaseSettings) -> AsyncEngine:
    """Build the application's engine from its database settings."""
    return create_async_engine(
        database.url,
        echo=database.echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for the per-request unit of work.

    The DI container opens one session per request and commits it when
    the request succeeds. Counter updates made inside that transaction
    are visible to later statements of the same request.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
