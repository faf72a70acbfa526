"""Engine and session construction for PostgreSQL over asyncpg."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the shared engine. SQL is echoed when ``debug`` is on."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit; flushing is explicit in repositories
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a short-lived read session for work outside a request.

    Background tasks must not share the request's session, which is closed
    when the request ends. Nothing is committed here.
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


def violated_constraint(error: IntegrityError) -> str | None:
    """Name of the constraint behind an ``IntegrityError``, when known.

    asyncpg reports it as ``constraint_name`` on the driver exception, which
    SQLAlchemy keeps as the cause of ``error.orig``.
    """
    for candidate in (error.orig, getattr(error.orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None
