"""Async client for the advocate directory API."""

from advocates.client.debounce import SEARCH_DEBOUNCE_SECONDS, Debouncer
from advocates.client.exceptions import TransportError
from advocates.client.query_client import Attempt, QueryClient
from advocates.client.state import ITEMS_PER_PAGE, SearchParams, SearchState, StateStore
from advocates.client.transport import AdvocatesTransport

__all__ = [
    "AdvocatesTransport",
    "Attempt",
    "Debouncer",
    "ITEMS_PER_PAGE",
    "QueryClient",
    "SEARCH_DEBOUNCE_SECONDS",
    "SearchParams",
    "SearchState",
    "StateStore",
    "TransportError",
]
