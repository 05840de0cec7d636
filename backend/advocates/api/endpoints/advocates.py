"""Advocate listing and filter-option endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from advocates.common.pagination import PaginationParams
from advocates.core.config import settings
from advocates.db.session import get_session_factory
from advocates.schemas.advocate import AdvocateListResponse, AdvocateQuery, FilterOptionsResponse
from advocates.search.advocate_search_service import search_advocates
from advocates.search.filter_options_service import get_filter_options

logger = logging.getLogger(__name__)

router = APIRouter()

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]


def listing_pagination(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: int = Query(settings.ADVOCATES_DEFAULT_LIMIT, ge=1, description="Page size"),
) -> PaginationParams:
    """Page and limit for the listing. ADVOCATES_MAX_LIMIT caps the limit only when set."""
    cap = settings.ADVOCATES_MAX_LIMIT
    if cap is not None and limit > cap:
        raise RequestValidationError(
            [
                {
                    "loc": ("query", "limit"),
                    "msg": f"Input should be less than or equal to {cap}",
                    "type": "less_than_equal",
                }
            ]
        )
    return PaginationParams(page=page, limit=limit)


@router.get("/advocates", response_model=AdvocateListResponse)
async def list_advocates(
    session_factory: SessionFactory,
    pagination: Annotated[PaginationParams, Depends(listing_pagination)],
    search: str = Query("", description="Free-text search (case-insensitive substring)"),
    degrees: list[str] = Query([], description="Filter by degree (repeatable)"),
    specialties: list[str] = Query([], description="Filter by specialty, any match (repeatable)"),
    sort_field: str | None = Query(
        None, alias="sortField", description="Sort option: name, degree, city, experience"
    ),
    sort_direction: str = Query(
        "asc", alias="sortDirection", description="asc or desc; ignored without sortField"
    ),
) -> AdvocateListResponse:
    """
    List advocates with free-text search, multi-value filters, sort and pagination.

    Store failures surface as 500 {"error": ...} through the QueryExecutionError handler.
    """
    query = AdvocateQuery(
        search=search,
        degrees=degrees,
        specialties=specialties,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=pagination.page,
        limit=pagination.limit,
    )
    return await search_advocates(session_factory, query)


@router.get("/advocates/filters", response_model=FilterOptionsResponse)
async def list_filter_options(session_factory: SessionFactory) -> FilterOptionsResponse:
    """Distinct degrees and specialties present in the directory."""
    return await get_filter_options(session_factory)
