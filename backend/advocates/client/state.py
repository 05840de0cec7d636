"""Client search state, its pure transitions and an injectable store.

Transition table for one attempt (every function returns a new state):

======================  ============================================  =========================================
transition              trigger                                       effect
======================  ============================================  =========================================
``begin_attempt``       idle/fulfilled/failed -> pending              ``is_loading=True``, ``error=None``
``apply_result``        pending -> fulfilled                          rows, total, total pages set; error None
``apply_failure``       pending -> failed                             error set; rows empty; totals zero
``finish_attempt``      fulfilled/failed settles                      ``is_loading=False``
(none)                  pending -> cancelled                          nothing; a superseded attempt is inert
======================  ============================================  =========================================

Query-shaping transitions (``with_search_term``, ``with_degrees``, ...) only
touch the request half of the state.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from advocates.schemas.advocate import (
    AdvocateListResponse,
    AdvocateOut,
    FilterOptionsResponse,
    SortDirection,
    SortField,
)

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class SearchParams:
    """The request half of the state, as sent for one attempt."""

    search: str = ""
    degrees: tuple[str, ...] = ()
    specialties: tuple[str, ...] = ()
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1
    limit: int = ITEMS_PER_PAGE

    @property
    def key(self) -> str:
        """Composite key used to de-duplicate identical pending attempts."""
        return json.dumps(
            [
                self.search,
                list(self.degrees),
                list(self.specialties),
                self.sort_field.value if self.sort_field else None,
                self.sort_direction.value,
                self.page,
            ]
        )

    def to_query_params(self) -> list[tuple[str, str]]:
        """Serialize to query parameters; filters repeat their key."""
        params: list[tuple[str, str]] = [("page", str(self.page)), ("limit", str(self.limit))]
        if self.search:
            params.append(("search", self.search))
        if self.sort_field is not None:
            params.append(("sortField", self.sort_field.value))
            params.append(("sortDirection", self.sort_direction.value))
        params.extend(("degrees", degree) for degree in self.degrees)
        params.extend(("specialties", specialty) for specialty in self.specialties)
        return params


@dataclass(frozen=True)
class SearchState:
    """Browser-side mirror of the last submitted query and its outcome."""

    search_term: str = ""
    selected_degrees: tuple[str, ...] = ()
    selected_specialties: tuple[str, ...] = ()
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1

    advocates: tuple[AdvocateOut, ...] = ()
    total_count: int = 0
    total_pages: int = 0
    is_loading: bool = False
    error: str | None = None

    filter_options: FilterOptionsResponse | None = None
    filter_options_error: str | None = None

    @property
    def params(self) -> SearchParams:
        return SearchParams(
            search=self.search_term,
            degrees=self.selected_degrees,
            specialties=self.selected_specialties,
            sort_field=self.sort_field,
            sort_direction=self.sort_direction,
            page=self.current_page,
        )


# -- query-shaping transitions ----------------------------------------------


def with_search_term(state: SearchState, term: str) -> SearchState:
    return replace(state, search_term=term)


def with_page(state: SearchState, page: int) -> SearchState:
    return replace(state, current_page=max(1, page))


def with_degrees(state: SearchState, degrees: tuple[str, ...] | list[str]) -> SearchState:
    return replace(state, selected_degrees=tuple(dict.fromkeys(degrees)), current_page=1)


def with_specialties(state: SearchState, specialties: tuple[str, ...] | list[str]) -> SearchState:
    return replace(state, selected_specialties=tuple(dict.fromkeys(specialties)), current_page=1)


def with_sorting(
    state: SearchState, field: SortField | None, direction: SortDirection = SortDirection.ASC
) -> SearchState:
    return replace(state, sort_field=field, sort_direction=direction, current_page=1)


def reset_search(state: SearchState) -> SearchState:
    """Clear the search box only."""
    return replace(state, search_term="", current_page=1)


def clear_filters(state: SearchState) -> SearchState:
    """Reset search, filters and page; sort and results stay as they are."""
    defaults = SearchState()
    return replace(
        state,
        search_term=defaults.search_term,
        selected_degrees=defaults.selected_degrees,
        selected_specialties=defaults.selected_specialties,
        current_page=defaults.current_page,
    )


# -- attempt transitions ------------------------------------------------------


def begin_attempt(state: SearchState) -> SearchState:
    return replace(state, is_loading=True, error=None)


def apply_result(state: SearchState, response: AdvocateListResponse) -> SearchState:
    return replace(
        state,
        advocates=tuple(response.data),
        total_count=response.pagination.total,
        total_pages=response.pagination.total_pages,
        error=None,
    )


def apply_failure(state: SearchState, message: str) -> SearchState:
    return replace(state, advocates=(), total_count=0, total_pages=0, error=message)


def finish_attempt(state: SearchState) -> SearchState:
    return replace(state, is_loading=False)


def apply_filter_options(state: SearchState, options: FilterOptionsResponse) -> SearchState:
    return replace(state, filter_options=options, filter_options_error=None)


def apply_filter_options_failure(state: SearchState, message: str) -> SearchState:
    return replace(state, filter_options_error=message)


# -- store --------------------------------------------------------------------

Listener = Callable[[SearchState], None]


@dataclass
class StateStore:
    """Holds the current SearchState and notifies subscribers on change."""

    state: SearchState = field(default_factory=SearchState)
    _listeners: list[Listener] = field(default_factory=list, repr=False)

    def dispatch(self, transition: Callable[..., SearchState], *args: Any) -> SearchState:
        """Replace the state with ``transition(state, *args)``."""
        new_state = transition(self.state, *args)
        if new_state == self.state:
            return self.state
        self.state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception("State listener failed")
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
