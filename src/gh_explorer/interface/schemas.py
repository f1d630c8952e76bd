"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from gh_explorer.domain.entities import LanguageStat, Repository, User
from gh_explorer.services.open_url import OpenUrlUseCase


class UserResponse(BaseModel):
    id: int
    login: str
    name: str | None
    avatar_url: str
    html_url: str
    bio: str | None
    followers: int
    following: int
    location: str | None
    public_repos: int
    public_gists: int

    @classmethod
    def from_entity(cls, user: User) -> UserResponse:
        return cls(
            id=user.id,
            login=user.login,
            name=user.name,
            avatar_url=user.avatar_url,
            html_url=OpenUrlUseCase.profile_url(user.login),
            bio=user.bio,
            followers=user.followers,
            following=user.following,
            location=user.location,
            public_repos=user.public_repos,
            public_gists=user.public_gists,
        )


class OwnerResponse(BaseModel):
    id: int
    login: str
    avatar_url: str


class RepositoryResponse(BaseModel):
    id: int
    name: str
    full_name: str
    owner: OwnerResponse
    private: bool
    html_url: str
    description: str | None
    fork: bool
    language: str | None
    forks_count: int
    stargazers_count: int
    watchers_count: int
    default_branch: str
    created_at: datetime
    updated_at: datetime
    topics: list[str]

    @classmethod
    def from_entity(cls, repo: Repository) -> RepositoryResponse:
        return cls(
            id=repo.id,
            name=repo.name,
            full_name=repo.full_name,
            owner=OwnerResponse(
                id=repo.owner.id,
                login=repo.owner.login,
                avatar_url=repo.owner.avatar_url,
            ),
            private=repo.is_private,
            html_url=OpenUrlUseCase.repository_url(repo),
            description=repo.description,
            fork=repo.fork,
            language=repo.language,
            forks_count=repo.forks_count,
            stargazers_count=repo.stargazers_count,
            watchers_count=repo.watchers_count,
            default_branch=repo.default_branch,
            created_at=repo.created_at,
            updated_at=repo.updated_at,
            topics=list(repo.topics),
        )


class LanguageStatResponse(BaseModel):
    language: str
    count: int

    @classmethod
    def from_entity(cls, stat: LanguageStat) -> LanguageStatResponse:
        return cls(language=stat.language, count=stat.count)


class LanguagesResponse(BaseModel):
    """Response of ``GET /users/{username}/languages``."""

    languages: list[str]
    stats: list[LanguageStatResponse]


class UsernameListResponse(BaseModel):
    usernames: list[str]


class OpenedUrlResponse(BaseModel):
    url: str


class HistoryEntryRequest(BaseModel):
    """Request body for ``POST /history/{platform}``."""

    username: str

    @field_validator("username")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
    retryable: bool
