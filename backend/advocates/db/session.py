"""Database session management."""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocates.db.engine import engine

# Create session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,  # Prevent lazy loading issues
)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Dependency to get the session factory.

    Listing queries open more than one session so their reads can run
    concurrently; a single AsyncSession cannot be shared between tasks.
    """
    return SessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with SessionLocal() as db:
        yield db
