"""Pydantic schemas for advocate listing endpoints."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from advocates.common.pagination import DEFAULT_PAGE_SIZE, PaginationMeta, PaginationParams


class SortField(str, Enum):
    """Sortable columns exposed to clients."""

    NAME = "name"
    DEGREE = "degree"
    CITY = "city"
    EXPERIENCE = "experience"


class SortDirection(str, Enum):
    """Sort direction for the primary sort key."""

    ASC = "asc"
    DESC = "desc"


def _unique(values: Any) -> tuple[str, ...]:
    """Collapse repeated values, keeping first-seen order."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(dict.fromkeys(values))


class AdvocateQuery(BaseModel):
    """One search over the directory: text, filters, sort and page."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    degrees: tuple[str, ...] = ()
    specialties: tuple[str, ...] = ()
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @field_validator("search", mode="before")
    @classmethod
    def none_search_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("degrees", "specialties", mode="before")
    @classmethod
    def dedupe_filters(cls, value: Any) -> tuple[str, ...]:
        return _unique(value)

    @field_validator("sort_field", mode="before")
    @classmethod
    def unknown_sort_field_is_default(cls, value: Any) -> SortField | None:
        # Unrecognized fields fall back to the default order instead of failing
        if isinstance(value, SortField):
            return value
        try:
            return SortField(value)
        except ValueError:
            return None

    @field_validator("sort_direction", mode="before")
    @classmethod
    def lenient_sort_direction(cls, value: Any) -> SortDirection:
        if isinstance(value, SortDirection):
            return value
        if isinstance(value, str) and value.lower() == SortDirection.DESC.value:
            return SortDirection.DESC
        return SortDirection.ASC

    @property
    def pagination(self) -> PaginationParams:
        return PaginationParams(page=self.page, limit=self.limit)


class AdvocateOut(BaseModel):
    """Advocate record as serialized over the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[Any] = Field(default_factory=list)
    years_of_experience: int
    phone_number: int | None = None
    created_at: datetime | None = None


class AdvocateListResponse(BaseModel):
    """Listing response (stable contract): {data, pagination}."""

    data: list[AdvocateOut]
    pagination: PaginationMeta


class FilterOptionsResponse(BaseModel):
    """Distinct filter values available in the directory."""

    degrees: list[str]
    specialties: list[str]
