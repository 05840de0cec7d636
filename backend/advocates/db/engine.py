"""Database engine configuration."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from advocates.core.config import settings


def create_db_engine(database_url: str | None = None) -> AsyncEngine:
    """Create SQLAlchemy async engine."""
    url = make_url(database_url or settings.DATABASE_URL)
    kwargs: dict = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,  # Verify connections before using
    }
    if url.get_backend_name() != "sqlite":
        kwargs.update(pool_size=5, max_overflow=10)
    return create_async_engine(url, **kwargs)


# Global engine instance
engine = create_db_engine()
