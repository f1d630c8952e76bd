"""API routes — thin controllers that delegate to the use cases."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from gh_explorer.domain.entities import Platform
from gh_explorer.interface.dependencies import (
    get_favorites,
    get_fetch_user,
    get_fetch_user_repositories,
    get_filter_repositories,
    get_language_stats,
    get_open_url,
    get_search_history,
    get_search_users,
)
from gh_explorer.interface.schemas import (
    ErrorResponse,
    HistoryEntryRequest,
    LanguagesResponse,
    LanguageStatResponse,
    OpenedUrlResponse,
    RepositoryResponse,
    UsernameListResponse,
    UserResponse,
)
from gh_explorer.services.favorites import ManageFavoritesUseCase
from gh_explorer.services.fetch_user import FetchUserUseCase
from gh_explorer.services.fetch_user_repositories import FetchUserRepositoriesUseCase
from gh_explorer.services.filter_repositories import FilterRepositoriesUseCase
from gh_explorer.services.language_stats import CalculateLanguageStatsUseCase
from gh_explorer.services.open_url import OpenUrlUseCase
from gh_explorer.services.search_history import ManageSearchHistoryUseCase
from gh_explorer.services.search_users import SearchUsersUseCase
from gh_explorer.services.validation import validate_username

users_router = APIRouter(tags=["users"])
favorites_router = APIRouter(prefix="/favorites", tags=["favorites"])
history_router = APIRouter(prefix="/history", tags=["history"])

_GITHUB_ERRORS = {
    404: {"model": ErrorResponse, "description": "User not found"},
    422: {"model": ErrorResponse, "description": "Invalid username or query"},
    502: {"model": ErrorResponse, "description": "GitHub returned an error or malformed data"},
    503: {"model": ErrorResponse, "description": "GitHub could not be reached"},
}
_INVALID_INPUT = {422: {"model": ErrorResponse, "description": "Invalid username or platform"}}


# ── Users & repositories ────────────────────────────────────────────────────


@users_router.get("/users/{username}", response_model=UserResponse, responses=_GITHUB_ERRORS)
async def get_user(
    username: str,
    use_case: FetchUserUseCase = Depends(get_fetch_user),
) -> UserResponse:
    """Return a user's profile."""
    user = await use_case.execute(username)
    return UserResponse.from_entity(user)


@users_router.get(
    "/users/{username}/repos",
    response_model=list[RepositoryResponse],
    responses=_GITHUB_ERRORS,
)
async def get_user_repositories(
    username: str,
    q: str = Query("", description="Case-insensitive text on name, description, language"),
    language: str | None = Query(None, description="Exact, case-sensitive language"),
    use_case: FetchUserRepositoriesUseCase = Depends(get_fetch_user_repositories),
    filters: FilterRepositoriesUseCase = Depends(get_filter_repositories),
) -> list[RepositoryResponse]:
    """Return every repository of a user, optionally filtered."""
    repositories = await use_case.execute(username)
    filtered = filters.filter_by_search_text_and_language(repositories, q, language)
    return [RepositoryResponse.from_entity(repo) for repo in filtered]


@users_router.get(
    "/users/{username}/languages",
    response_model=LanguagesResponse,
    responses=_GITHUB_ERRORS,
)
async def get_user_languages(
    username: str,
    use_case: FetchUserRepositoriesUseCase = Depends(get_fetch_user_repositories),
    filters: FilterRepositoriesUseCase = Depends(get_filter_repositories),
    stats: CalculateLanguageStatsUseCase = Depends(get_language_stats),
) -> LanguagesResponse:
    """Return the distinct languages of a user's repositories and their frequency."""
    repositories = await use_case.execute(username)
    return LanguagesResponse(
        languages=filters.extract_unique_languages(repositories),
        stats=[LanguageStatResponse.from_entity(s) for s in stats.execute(repositories)],
    )


@users_router.get(
    "/search/users", response_model=list[UserResponse], responses=_GITHUB_ERRORS
)
async def search_users(
    q: str = Query(""),
    use_case: SearchUsersUseCase = Depends(get_search_users),
) -> list[UserResponse]:
    """Search GitHub users."""
    users = await use_case.execute(q)
    return [UserResponse.from_entity(user) for user in users]


@users_router.post(
    "/users/{username}/open", response_model=OpenedUrlResponse, responses=_INVALID_INPUT
)
async def open_profile(
    username: str,
    use_case: OpenUrlUseCase = Depends(get_open_url),
) -> OpenedUrlResponse:
    """Open a user's GitHub profile in the local browser."""
    validate_username(username)
    use_case.open_profile(username)
    return OpenedUrlResponse(url=use_case.profile_url(username))


# ── Favorites ───────────────────────────────────────────────────────────────


@favorites_router.get("", response_model=UsernameListResponse)
async def list_favorites(
    favorites: ManageFavoritesUseCase = Depends(get_favorites),
) -> UsernameListResponse:
    return UsernameListResponse(usernames=favorites.load_favorites())


@favorites_router.put(
    "/{username}", response_model=UsernameListResponse, responses=_INVALID_INPUT
)
async def add_favorite(
    username: str,
    favorites: ManageFavoritesUseCase = Depends(get_favorites),
) -> UsernameListResponse:
    validate_username(username)
    favorites.add_to_favorites(username)
    return UsernameListResponse(usernames=favorites.load_favorites())


@favorites_router.delete("/{username}", response_model=UsernameListResponse)
async def remove_favorite(
    username: str,
    favorites: ManageFavoritesUseCase = Depends(get_favorites),
) -> UsernameListResponse:
    favorites.remove_from_favorites(username)
    return UsernameListResponse(usernames=favorites.load_favorites())


# ── Search history ──────────────────────────────────────────────────────────


@history_router.get(
    "/{platform}", response_model=UsernameListResponse, responses=_INVALID_INPUT
)
async def list_history(
    platform: Platform,
    history: ManageSearchHistoryUseCase = Depends(get_search_history),
) -> UsernameListResponse:
    return UsernameListResponse(usernames=history.load_search_history(platform))


@history_router.post(
    "/{platform}", response_model=UsernameListResponse, responses=_INVALID_INPUT
)
async def add_history_entry(
    platform: Platform,
    body: HistoryEntryRequest,
    history: ManageSearchHistoryUseCase = Depends(get_search_history),
) -> UsernameListResponse:
    history.add_to_search_history(body.username, platform)
    return UsernameListResponse(usernames=history.load_search_history(platform))


@history_router.delete("/{platform}/{username}", response_model=UsernameListResponse)
async def remove_history_entry(
    platform: Platform,
    username: str,
    history: ManageSearchHistoryUseCase = Depends(get_search_history),
) -> UsernameListResponse:
    history.remove_from_history(username, platform)
    return UsernameListResponse(usernames=history.load_search_history(platform))


@history_router.delete("/{platform}", response_model=UsernameListResponse)
async def clear_history(
    platform: Platform,
    history: ManageSearchHistoryUseCase = Depends(get_search_history),
) -> UsernameListResponse:
    history.clear_search_history(platform)
    return UsernameListResponse(usernames=[])
