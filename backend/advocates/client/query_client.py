"""Query client: one authoritative in-flight listing request at a time."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx

from advocates.client import state as transitions
from advocates.client.debounce import SEARCH_DEBOUNCE_SECONDS, Debouncer
from advocates.client.exceptions import TransportError
from advocates.client.state import SearchParams, SearchState, StateStore
from advocates.client.transport import AdvocatesTransport
from advocates.schemas.advocate import SortDirection, SortField

logger = logging.getLogger(__name__)

UNEXPECTED_FAILURE_MESSAGE = "Failed to fetch advocates"


@dataclass
class Attempt:
    """One fetch cycle against the listing endpoint."""

    params: SearchParams
    task: asyncio.Task[None] | None = None

    @property
    def key(self) -> str:
        return self.params.key

    @property
    def pending(self) -> bool:
        return self.task is not None and not self.task.done()


class QueryClient:
    """
    Owns the search state and drives listing requests.

    Every user action mutates the state through a pure transition and then
    starts an attempt. Free-text changes go through a debouncer; all other
    actions start an attempt immediately. An attempt whose composite key
    matches the pending one is dropped; any other attempt cancels the pending
    one, whose outcome is then discarded.
    """

    def __init__(
        self,
        transport: AdvocatesTransport,
        store: StateStore | None = None,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
    ):
        self._transport = transport
        self.store = store if store is not None else StateStore()
        self._debouncer = Debouncer(self._on_search_settled, delay=debounce_seconds)
        self._pending: Attempt | None = None
        self._owned_http: httpx.AsyncClient | None = None
        self.attempts_started = 0

    @classmethod
    def from_base_url(cls, base_url: str, api_prefix: str = "/api", **kwargs) -> QueryClient:
        """Build a client with its own httpx.AsyncClient (closed by ``aclose``)."""
        http = httpx.AsyncClient(base_url=base_url)
        client = cls(AdvocatesTransport(http, api_prefix=api_prefix), **kwargs)
        client._owned_http = http
        return client

    @property
    def state(self) -> SearchState:
        return self.store.state

    @property
    def pending_attempt(self) -> Attempt | None:
        if self._pending is not None and self._pending.pending:
            return self._pending
        return None

    # -- user actions ---------------------------------------------------------

    def mount(self) -> asyncio.Task[None] | None:
        """Initial fetch with the current (default) state."""
        return self._submit()

    def set_search_term(self, term: str) -> None:
        """Echo the term into the state and schedule a debounced attempt."""
        self.store.dispatch(transitions.with_search_term, term)
        self._debouncer.trigger(term)

    def set_degrees(self, degrees: list[str]) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.with_degrees, degrees)
        return self._submit()

    def set_specialties(self, specialties: list[str]) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.with_specialties, specialties)
        return self._submit()

    def set_sorting(
        self, field: SortField | None, direction: SortDirection = SortDirection.ASC
    ) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.with_sorting, field, direction)
        return self._submit()

    def toggle_sort(self, field: SortField) -> asyncio.Task[None] | None:
        """Sort by ``field`` ascending, or flip the direction if already sorted by it."""
        direction = SortDirection.ASC
        if self.state.sort_field == field and self.state.sort_direction == SortDirection.ASC:
            direction = SortDirection.DESC
        return self.set_sorting(field, direction)

    def go_to_page(self, page: int) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.with_page, page)
        return self._submit()

    def next_page(self) -> asyncio.Task[None] | None:
        if self.state.current_page >= self.state.total_pages:
            return None
        return self.go_to_page(self.state.current_page + 1)

    def previous_page(self) -> asyncio.Task[None] | None:
        if self.state.current_page <= 1:
            return None
        return self.go_to_page(self.state.current_page - 1)

    def reset_search(self) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.reset_search)
        return self._submit()

    def clear_filters(self) -> asyncio.Task[None] | None:
        self.store.dispatch(transitions.clear_filters)
        return self._submit()

    async def load_filter_options(self) -> None:
        """Fetch the degree/specialty universe; failures are recorded, not raised."""
        try:
            options = await self._transport.fetch_filter_options()
        except TransportError as e:
            logger.warning("Filter options unavailable: %s", e.message)
            self.store.dispatch(transitions.apply_filter_options_failure, e.message)
            return
        self.store.dispatch(transitions.apply_filter_options, options)

    async def wait_idle(self) -> None:
        """Wait until no debounce timer and no attempt is pending."""
        while True:
            await self._debouncer.wait()
            attempt = self.pending_attempt
            if attempt is None:
                return
            await asyncio.wait([attempt.task])

    async def aclose(self) -> None:
        """Cancel timers and in-flight work, then close an owned HTTP client."""
        self._debouncer.cancel()
        attempt = self.pending_attempt
        if attempt is not None:
            attempt.task.cancel()
            await asyncio.wait([attempt.task])
        self._pending = None
        if self._owned_http is not None:
            await self._owned_http.aclose()

    # -- attempts -------------------------------------------------------------

    def _on_search_settled(self, term: str) -> None:
        self.store.dispatch(transitions.with_search_term, term)
        self.store.dispatch(transitions.with_page, 1)
        self._submit()

    def _submit(self) -> asyncio.Task[None] | None:
        """Start an attempt for the current state, de-duplicating and cancelling."""
        # An immediate trigger submits the echoed search term as well
        self._debouncer.cancel()

        params = self.state.params
        pending = self.pending_attempt
        if pending is not None:
            if pending.key == params.key:
                logger.debug("Dropping duplicate attempt", extra={"key": params.key})
                return None
            pending.task.cancel()

        attempt = Attempt(params=params)
        self._pending = attempt
        self.attempts_started += 1
        self.store.dispatch(transitions.begin_attempt)
        attempt.task = asyncio.create_task(self._run(attempt))
        return attempt.task

    def _is_current(self, attempt: Attempt) -> bool:
        return self._pending is attempt

    async def _run(self, attempt: Attempt) -> None:
        try:
            response = await self._transport.fetch_advocates(attempt.params)
        except asyncio.CancelledError:
            logger.debug("Attempt cancelled", extra={"key": attempt.key})
            return
        except TransportError as e:
            if self._is_current(attempt):
                self.store.dispatch(transitions.apply_failure, e.message)
                self.store.dispatch(transitions.finish_attempt)
            return
        except Exception:
            logger.exception("Attempt failed unexpectedly", extra={"key": attempt.key})
            if self._is_current(attempt):
                self.store.dispatch(transitions.apply_failure, UNEXPECTED_FAILURE_MESSAGE)
                self.store.dispatch(transitions.finish_attempt)
            return

        if self._is_current(attempt):
            self.store.dispatch(transitions.apply_result, response)
            self.store.dispatch(transitions.finish_attempt)
