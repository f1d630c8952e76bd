"""Search-users use case."""

from __future__ import annotations

import logging

from gh_explorer.domain.entities import User
from gh_explorer.domain.ports.user_repository import UserRepository
from gh_explorer.services.validation import validate_search_query

logger = logging.getLogger(__name__)


class SearchUsersUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def execute(self, query: str) -> list[User]:
        validate_search_query(query)
        logger.info("Searching users for %r", query)
        return await self._repository.search_users(query)
