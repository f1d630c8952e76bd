"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Depends

from gh_explorer.domain.ports.key_value_store import KeyValueStore
from gh_explorer.domain.ports.url_opener import UrlOpener
from gh_explorer.domain.ports.user_repository import UserRepository
from gh_explorer.infrastructure.browser import WebBrowserOpener
from gh_explorer.infrastructure.config import Settings, get_settings
from gh_explorer.infrastructure.github_user_repository import GitHubUserRepository
from gh_explorer.infrastructure.memory_store import InMemoryKeyValueStore
from gh_explorer.infrastructure.network_client import GitHubNetworkClient
from gh_explorer.services.favorites import ManageFavoritesUseCase
from gh_explorer.services.fetch_user import FetchUserUseCase
from gh_explorer.services.fetch_user_repositories import FetchUserRepositoriesUseCase
from gh_explorer.services.filter_repositories import FilterRepositoriesUseCase
from gh_explorer.services.language_stats import CalculateLanguageStatsUseCase
from gh_explorer.services.open_url import OpenUrlUseCase
from gh_explorer.services.search_history import ManageSearchHistoryUseCase
from gh_explorer.services.search_users import SearchUsersUseCase

_http_client: httpx.AsyncClient | None = None
_store: KeyValueStore | None = None


def build_http_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Client shared by all GitHub calls.

    Redirects are followed: GitHub answers 301 for renamed users and
    transferred repositories.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _store  # noqa: PLW0603

    _http_client = build_http_client(get_settings())
    _store = InMemoryKeyValueStore()


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _store  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _store = None


def get_user_repository() -> UserRepository:
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    network = GitHubNetworkClient(client=_http_client, user_agent=settings.user_agent)
    return GitHubUserRepository(
        network_client=network,
        base_url=settings.github_api_base_url,
        per_page=settings.repositories_per_page,
    )


def get_key_value_store() -> KeyValueStore:
    assert _store is not None, "startup() was not called"
    return _store


def get_fetch_user(
    repository: UserRepository = Depends(get_user_repository),
) -> FetchUserUseCase:
    return FetchUserUseCase(repository)


def get_fetch_user_repositories(
    repository: UserRepository = Depends(get_user_repository),
) -> FetchUserRepositoriesUseCase:
    return FetchUserRepositoriesUseCase(repository)


def get_search_users(
    repository: UserRepository = Depends(get_user_repository),
) -> SearchUsersUseCase:
    return SearchUsersUseCase(repository)


def get_filter_repositories() -> FilterRepositoriesUseCase:
    return FilterRepositoriesUseCase()


def get_language_stats() -> CalculateLanguageStatsUseCase:
    return CalculateLanguageStatsUseCase()


def get_favorites(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ManageFavoritesUseCase:
    return ManageFavoritesUseCase(store)


def get_search_history(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ManageSearchHistoryUseCase:
    return ManageSearchHistoryUseCase(store)


def get_url_opener() -> UrlOpener:
    return WebBrowserOpener()


def get_open_url(opener: UrlOpener = Depends(get_url_opener)) -> OpenUrlUseCase:
    return OpenUrlUseCase(opener)
