"""Fetch-user use case."""

from __future__ import annotations

import logging

from gh_explorer.domain.entities import User
from gh_explorer.domain.ports.user_repository import UserRepository
from gh_explorer.services.validation import validate_username

logger = logging.getLogger(__name__)


class FetchUserUseCase:
    """Validate a username, then load that user's profile."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def execute(self, username: str) -> User:
        validate_username(username)
        logger.info("Fetching user %s", username)
        return await self._repository.fetch_user(username)
