"""Tests for the filter options service."""

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from advocates.core.app_exceptions import QueryExecutionError
from advocates.db.engine import create_db_engine
from advocates.search.filter_options_service import collect_specialties, get_filter_options
from tests.helpers.seed import insert_advocates, make_advocate


class TestCollectSpecialties:
    """Flattening specialty arrays."""

    def test_flattens_and_deduplicates(self):
        assert collect_specialties([["b", "a"], ["a", "c"], []]) == ["a", "b", "c"]

    def test_skips_non_string_entries(self):
        assert collect_specialties([["Bipolar", 42, None, {"x": 1}], "LGBTQ", None]) == ["Bipolar"]


class TestGetFilterOptions:
    """Filter universe from the live store."""

    async def test_distinct_sorted_values(self, session_factory, sample_advocates):
        options = await get_filter_options(session_factory)

        assert options.degrees == ["MD", "MSW", "PhD"]
        assert options.specialties == [
            "Bipolar",
            "Chronic pain",
            "Eating disorders",
            "LGBTQ",
            "Pediatrics",
            "Sleep issues",
            "Trauma & PTSD",
        ]

    async def test_empty_store(self, session_factory):
        options = await get_filter_options(session_factory)

        assert options.degrees == []
        assert options.specialties == []

    async def test_ignores_malformed_specialty_entries(self, session_factory):
        await insert_advocates(
            session_factory,
            [make_advocate(degree="DO", specialties=["Sleep issues", 7, None, ["nested"]])],
        )

        options = await get_filter_options(session_factory)

        assert options.degrees == ["DO"]
        assert options.specialties == ["Sleep issues"]

    async def test_store_failure(self, tmp_path):
        engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        try:
            with pytest.raises(QueryExecutionError) as exc_info:
                await get_filter_options(async_sessionmaker(engine))
        finally:
            await engine.dispose()

        assert exc_info.value.message == "Failed to fetch filter options"
        assert exc_info.value.operation == "get_filter_options"
