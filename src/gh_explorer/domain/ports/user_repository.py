"""Port: user repository — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gh_explorer.domain.entities import Repository, User


class UserRepository(Protocol):
    """Abstract contract for fetching GitHub users and their repositories."""

    async def fetch_user(self, username: str) -> User:
        """Return the full profile of *username*."""
        ...

    async def fetch_user_repositories(self, username: str) -> list[Repository]:
        """Return every public repository owned by *username*, across all pages."""
        ...

    async def search_users(self, query: str) -> list[User]:
        """Return the users matching *query*."""
        ...
