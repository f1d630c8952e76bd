"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Platform(str, Enum):
    """Device family a search history belongs to."""

    IOS = "ios"
    IPADOS = "ipados"
    MACOS = "macos"
    TVOS = "tvos"
    VISIONOS = "visionos"


@dataclass(frozen=True, slots=True, eq=False)
class User:
    """A GitHub account.

    Owners embedded in repository payloads are only partially populated:
    ``name``, ``bio`` and ``location`` are ``None`` and every counter is 0.
    Two users are equal when their ``login`` matches.
    """

    id: int
    login: str
    avatar_url: str
    name: str | None = None
    bio: str | None = None
    followers: int = 0
    following: int = 0
    location: str | None = None
    public_repos: int = 0
    public_gists: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.login == other.login

    def __hash__(self) -> int:
        return hash(self.login)


@dataclass(frozen=True, slots=True, eq=False)
class Repository:
    """A GitHub repository. Two repositories are equal when their ``id`` matches."""

    id: int
    name: str
    full_name: str
    owner: User
    is_private: bool
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
    topics: tuple[str, ...] = field(default_factory=tuple)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, slots=True)
class LanguageStat:
    """How many repositories use a given language."""

    language: str
    count: int
