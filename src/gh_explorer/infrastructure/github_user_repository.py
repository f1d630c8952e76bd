"""GitHub REST API adapter — implements the UserRepository port."""

from __future__ import annotations

import logging

from gh_explorer.domain.entities import Repository, User
from gh_explorer.infrastructure import endpoints, mappers
from gh_explorer.infrastructure.dtos import (
    RepositoryDTO,
    UserDTO,
    UserSearchResponseDTO,
)
from gh_explorer.infrastructure.network_client import GitHubNetworkClient

logger = logging.getLogger(__name__)


class GitHubUserRepository:
    """Concrete UserRepository backed by the GitHub v3 REST API.

    Every call is independent; nothing is cached between calls.
    """

    def __init__(
        self,
        network_client: GitHubNetworkClient,
        base_url: str = endpoints.DEFAULT_BASE_URL,
        per_page: int = endpoints.MAX_PER_PAGE,
    ) -> None:
        if not 1 <= per_page <= endpoints.MAX_PER_PAGE:
            raise ValueError(
                f"per_page must be between 1 and {endpoints.MAX_PER_PAGE}, got {per_page}"
            )
        self._network = network_client
        self._base_url = base_url
        self._per_page = per_page

    async def fetch_user(self, username: str) -> User:
        """GET /users/{username} → User."""
        endpoint = endpoints.user(username, base_url=self._base_url)
        dto = await self._network.fetch(endpoint, UserDTO)
        return mappers.map_user(dto)

    async def fetch_user_repositories(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos for every page → [Repository].

        Pages are requested one after another.  A page shorter than
        ``per_page`` is the last one, so an account whose repository count is
        an exact multiple of ``per_page`` costs one extra, empty request.
        Any failure aborts the whole fetch; already fetched pages are
        discarded.
        """
        accumulated: list[RepositoryDTO] = []
        page = 1
        while True:
            endpoint = endpoints.user_repositories(
                username, page, self._per_page, base_url=self._base_url
            )
            batch = await self._network.fetch(endpoint, list[RepositoryDTO])
            accumulated.extend(batch)
            logger.debug(
                "Fetched page %d for %s (%d repositories)", page, username, len(batch)
            )
            if len(batch) < self._per_page:
                break
            page += 1

        logger.info(
            "Fetched %d repositories for %s in %d page(s)",
            len(accumulated),
            username,
            page,
        )
        return mappers.map_repositories(accumulated)

    async def search_users(self, query: str) -> list[User]:
        """GET /search/users?q={query} → [User]."""
        endpoint = endpoints.search_users(query, base_url=self._base_url)
        dto = await self._network.fetch(endpoint, UserSearchResponseDTO)
        return mappers.map_search_response(dto)
