"""Distinct degree and specialty values offered as listing filters."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocates.core.app_exceptions import QueryExecutionError
from advocates.models.advocate import Advocate
from advocates.schemas.advocate import FilterOptionsResponse
from advocates.search.advocate_search_service import STORE_ERRORS

logger = logging.getLogger(__name__)


async def fetch_distinct_degrees(session_factory: async_sessionmaker[AsyncSession]) -> list[str]:
    # Sorted in Python: database collations need not be codepoint order
    stmt = select(Advocate.degree).distinct()
    async with session_factory() as session:
        result = await session.execute(stmt)
        return sorted(degree for degree in result.scalars().all() if degree is not None)


async def fetch_specialty_arrays(session_factory: async_sessionmaker[AsyncSession]) -> list[Any]:
    stmt = select(Advocate.specialties)
    async with session_factory() as session:
        result = await session.execute(stmt)
        return list(result.scalars().all())


def collect_specialties(arrays: Iterable[Any]) -> list[str]:
    """Flatten specialty arrays into a sorted set, skipping non-string entries."""
    seen: set[str] = set()
    for specialties in arrays:
        if not isinstance(specialties, list):
            continue
        seen.update(value for value in specialties if isinstance(value, str))
    return sorted(seen)


async def get_filter_options(
    session_factory: async_sessionmaker[AsyncSession],
) -> FilterOptionsResponse:
    """
    Compute the filter universe from the live store.

    Raises:
        QueryExecutionError: if either read fails.
    """
    degrees, arrays = await asyncio.gather(
        fetch_distinct_degrees(session_factory),
        fetch_specialty_arrays(session_factory),
        return_exceptions=True,
    )
    for outcome in (degrees, arrays):
        if isinstance(outcome, STORE_ERRORS):
            logger.error("Filter options query failed", exc_info=outcome)
            raise QueryExecutionError(
                "Failed to fetch filter options", operation="get_filter_options"
            ) from outcome
        if isinstance(outcome, BaseException):
            raise outcome

    return FilterOptionsResponse(degrees=degrees, specialties=collect_specialties(arrays))
