"""GitHub HTTP transport — one GET, decoded into a caller-chosen shape."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from gh_explorer.domain.exceptions import (
    DecodingError,
    NetworkError,
    ServerError,
    UserNotFoundError,
)
from gh_explorer.infrastructure.endpoints import Endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubNetworkClient:
    """Executes endpoints against the GitHub REST API with error translation.

    No retries happen here.  Timeouts are configured on the injected
    ``httpx.AsyncClient`` and surface as :class:`NetworkError`.
    """

    def __init__(
        self, client: httpx.AsyncClient, user_agent: str = "gh-explorer/1.0"
    ) -> None:
        self._client = client
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }

    async def fetch(self, endpoint: Endpoint, shape: type[T]) -> T:
        """Perform *endpoint* and validate the JSON body against *shape*."""
        resp = await self._send(endpoint)
        try:
            return TypeAdapter(shape).validate_json(resp.content)
        except ValidationError as exc:
            logger.warning(
                "Could not decode %s from %s: %s",
                getattr(shape, "__name__", shape),
                endpoint.url,
                exc,
            )
            raise DecodingError() from exc

    async def _send(self, endpoint: Endpoint) -> httpx.Response:
        logger.debug("%s %s %s", endpoint.method.value, endpoint.url, endpoint.query_params)
        try:
            resp = await self._client.request(
                endpoint.method.value,
                endpoint.url,
                params=endpoint.query_params or None,
                headers=self._headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("Network error fetching %s: %s", endpoint.url, exc)
            raise NetworkError() from exc

        if resp.is_success:
            return resp

        logger.warning("GitHub API returned HTTP %d for %s", resp.status_code, endpoint.url)

        if resp.status_code == 404:
            raise UserNotFoundError()

        raise ServerError(resp.status_code)
