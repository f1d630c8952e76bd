"""Fetch-user-repositories use case."""

from __future__ import annotations

import logging

from gh_explorer.domain.entities import Repository
from gh_explorer.domain.ports.user_repository import UserRepository
from gh_explorer.services.validation import validate_username

logger = logging.getLogger(__name__)


class FetchUserRepositoriesUseCase:
    """Validate a username, then load every repository the user owns."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def execute(self, username: str) -> list[Repository]:
        validate_username(username)
        logger.info("Fetching repositories of %s", username)
        return await self._repository.fetch_user_repositories(username)
