"""Mappers — turn decoded wire DTOs into validated domain entities.

Collection mappers are all-or-nothing: the first element that fails aborts
the whole mapping with :class:`DecodingError`.
"""

from __future__ import annotations

from collections.abc import Iterable

from gh_explorer.domain.entities import Repository, User
from gh_explorer.domain.value_objects import parse_absolute_url
from gh_explorer.infrastructure.dtos import (
    OwnerDTO,
    RepositoryDTO,
    UserDTO,
    UserSearchResponseDTO,
)


def map_user(dto: UserDTO) -> User:
    return User(
        id=dto.id,
        login=dto.login,
        name=dto.name,
        avatar_url=parse_absolute_url(dto.avatar_url),
        bio=dto.bio,
        followers=dto.followers,
        following=dto.following,
        location=dto.location,
        public_repos=dto.public_repos,
        public_gists=dto.public_gists,
    )


def map_owner(dto: OwnerDTO) -> User:
    """Owners only carry id, login and avatar; everything else is defaulted."""
    return User(
        id=dto.id,
        login=dto.login,
        avatar_url=parse_absolute_url(dto.avatar_url),
    )


def map_repository(dto: RepositoryDTO) -> Repository:
    html_url = parse_absolute_url(dto.html_url)
    return Repository(
        id=dto.id,
        name=dto.name,
        full_name=dto.full_name,
        owner=map_owner(dto.owner),
        is_private=dto.is_private,
        html_url=html_url,
        description=dto.description,
        fork=dto.fork,
        language=dto.language,
        forks_count=dto.forks_count,
        stargazers_count=dto.stargazers_count,
        watchers_count=dto.watchers_count,
        default_branch=dto.default_branch,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
        topics=tuple(dto.topics or ()),
    )


def map_users(dtos: Iterable[UserDTO]) -> list[User]:
    return [map_user(dto) for dto in dtos]


def map_repositories(dtos: Iterable[RepositoryDTO]) -> list[Repository]:
    return [map_repository(dto) for dto in dtos]


def map_search_response(dto: UserSearchResponseDTO) -> list[User]:
    """Map the search hits; ``total_count`` is not surfaced."""
    return map_users(dto.items)
