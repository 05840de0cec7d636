"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; point them at a throwaway store first
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from advocates import models  # noqa: E402,F401
from advocates.db.base import Base  # noqa: E402
from advocates.db.engine import create_db_engine  # noqa: E402
from advocates.db.session import get_db, get_session_factory  # noqa: E402
from advocates.main import create_app  # noqa: E402
from advocates.models.advocate import Advocate  # noqa: E402
from tests.helpers.seed import insert_advocates, make_advocate  # noqa: E402


@pytest.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """File-backed SQLite engine so concurrent sessions see the same data."""
    eng = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'advocates.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def sample_advocates(session_factory) -> list[Advocate]:
    """Eight advocates with overlapping names, degrees and specialties."""
    return await insert_advocates(
        session_factory,
        [
            make_advocate("Jane", "Smith", "Los Angeles", "PhD", ["Bipolar", "LGBTQ"], 8),
            make_advocate("John", "Doe", "New York", "MD", ["Trauma & PTSD"], 10),
            make_advocate("Alice", "Johnson", "Chicago", "MSW", ["LGBTQ", "Eating disorders"], 5),
            make_advocate("Bob", "Smith", "Chicago", "MD", ["Chronic pain"], 10),
            make_advocate("Carol", "Brown", "Houston", "PhD", ["Bipolar"], 12, phone_number=None),
            make_advocate("Adam", "Smith", "Phoenix", "MSW", [], 3),
            make_advocate("Dana", "Evans", "Austin", "MD", ["Sleep issues", "Bipolar"], 10),
            make_advocate("Eve", "Adams", "Dallas", "PhD", ["Pediatrics"], 1),
        ],
    )


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async API client with the store dependencies pointed at the test engine."""
    app = create_app()

    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        try:
            yield ac
        finally:
            app.dependency_overrides.clear()
