"""HTTP transport for the advocate listing API."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from advocates.client.exceptions import TransportError
from advocates.client.state import SearchParams
from advocates.schemas.advocate import AdvocateListResponse, FilterOptionsResponse

logger = logging.getLogger(__name__)


class AdvocatesTransport:
    """
    Thin wrapper over an ``httpx.AsyncClient``.

    Cancellation is cooperative: cancelling the task awaiting a call closes
    the in-flight request. Non-2xx responses, network failures and malformed
    bodies all raise TransportError.
    """

    def __init__(self, http: httpx.AsyncClient, api_prefix: str = "/api"):
        self._http = http
        self._prefix = api_prefix.rstrip("/")

    async def fetch_advocates(self, params: SearchParams) -> AdvocateListResponse:
        """GET /advocates for one attempt."""
        payload = await self._get_json(
            f"{self._prefix}/advocates",
            params=params.to_query_params(),
            what="advocates",
        )
        try:
            return AdvocateListResponse.model_validate(payload)
        except ValidationError as e:
            raise TransportError("Failed to fetch advocates: malformed response") from e

    async def fetch_filter_options(self) -> FilterOptionsResponse:
        """GET /advocates/filters."""
        payload = await self._get_json(f"{self._prefix}/advocates/filters", what="filter options")
        try:
            return FilterOptionsResponse.model_validate(payload)
        except ValidationError as e:
            raise TransportError("Failed to fetch filter options: malformed response") from e

    async def _get_json(
        self,
        url: str,
        *,
        what: str,
        params: list[tuple[str, str]] | None = None,
    ) -> object:
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise TransportError(f"Failed to fetch {what}: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Failed to fetch {what}: {response.reason_phrase or response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Failed to fetch {what}: invalid JSON body") from e
