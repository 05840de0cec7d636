"""Advocate listing service: predicate, order, count and page."""

import asyncio
import logging
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.elements import ColumnElement, UnaryExpression

from advocates.common.pagination import PaginationMeta
from advocates.core.app_exceptions import QueryExecutionError
from advocates.models.advocate import Advocate
from advocates.schemas.advocate import AdvocateListResponse, AdvocateOut, AdvocateQuery
from advocates.search.ordering import build_order_by
from advocates.search.predicates import build_advocate_predicate

logger = logging.getLogger(__name__)

STORE_ERRORS = (SQLAlchemyError, OSError)

# LIMIT and OFFSET are bound as signed 64-bit integers by both supported backends
MAX_SQL_INTEGER = 2**63 - 1


async def count_advocates(
    session_factory: async_sessionmaker[AsyncSession],
    predicate: ColumnElement[bool],
) -> int:
    """Exact number of advocates matching the predicate."""
    stmt = select(func.count()).select_from(Advocate).where(predicate)
    async with session_factory() as session:
        result = await session.execute(stmt)
        return int(result.scalar_one())


async def fetch_advocate_page(
    session_factory: async_sessionmaker[AsyncSession],
    predicate: ColumnElement[bool],
    order_by: Sequence[UnaryExpression],
    offset: int,
    limit: int,
) -> list[Advocate]:
    """One ordered page of advocates matching the predicate.

    An offset past the 64-bit range cannot reach any row, so the read is skipped.
    """
    if offset > MAX_SQL_INTEGER:
        return []
    stmt = (
        select(Advocate)
        .where(predicate)
        .order_by(*order_by)
        .offset(offset)
        .limit(min(limit, MAX_SQL_INTEGER))
    )
    async with session_factory() as session:
        result = await session.execute(stmt)
        return list(result.scalars().all())


async def search_advocates(
    session_factory: async_sessionmaker[AsyncSession],
    query: AdvocateQuery,
) -> AdvocateListResponse:
    """
    Run an advocate listing query.

    The count and the page are read concurrently on separate sessions. They are
    not snapshot-isolated from each other, so under concurrent writes the total
    may disagree with the page by a few rows.

    Raises:
        QueryExecutionError: if either read fails. No partial result is returned.
    """
    predicate = build_advocate_predicate(query)
    order_by = build_order_by(query.sort_field, query.sort_direction)
    params = query.pagination

    total, rows = await asyncio.gather(
        count_advocates(session_factory, predicate),
        fetch_advocate_page(session_factory, predicate, order_by, params.offset, params.limit),
        return_exceptions=True,
    )
    for outcome in (total, rows):
        if isinstance(outcome, STORE_ERRORS):
            logger.error(
                "Advocate search failed",
                extra={
                    "search": query.search,
                    "degrees": list(query.degrees),
                    "specialties": list(query.specialties),
                    "page": query.page,
                    "limit": query.limit,
                },
                exc_info=outcome,
            )
            raise QueryExecutionError(
                "Failed to fetch advocates", operation="search_advocates"
            ) from outcome
        if isinstance(outcome, BaseException):
            raise outcome

    return AdvocateListResponse(
        data=[AdvocateOut.model_validate(row) for row in rows],
        pagination=PaginationMeta.build(params, total=total, returned=len(rows)),
    )
