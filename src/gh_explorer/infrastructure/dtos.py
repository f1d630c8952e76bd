"""Pydantic schemas for GitHub wire payloads.

One schema per response shape.  Field names follow the snake_case wire
format; keys the application does not use are ignored.  Scalars are
validated strictly, so a string id or a ``"yes"`` boolean is a decoding
error rather than a coercion.  Semantic checks (URL parseability) happen
later, in the mappers.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

Count = Annotated[StrictInt, Field(ge=0)]

# yyyy-MM-dd'T'HH:mm:ssZ, always UTC
_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


def _check_timestamp(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _TIMESTAMP_RE.match(value):
        raise ValueError(f"expected a yyyy-MM-ddTHH:mm:ssZ timestamp, got {value!r}")
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class UserDTO(_WireModel):
    """Body of ``GET /users/{username}`` and each search hit."""

    id: StrictInt
    login: str
    name: str | None = None
    avatar_url: str
    bio: str | None = None
    followers: Count = 0
    following: Count = 0
    location: str | None = None
    public_repos: Count = 0
    public_gists: Count = 0


class OwnerDTO(_WireModel):
    """The partial user embedded in repository payloads."""

    id: StrictInt
    login: str
    avatar_url: str


class RepositoryDTO(_WireModel):
    """One element of ``GET /users/{username}/repos``."""

    id: StrictInt
    name: str
    full_name: str
    owner: OwnerDTO
    is_private: StrictBool = Field(alias="private")
    html_url: str
    description: str | None = None
    fork: StrictBool
    language: str | None = None
    forks_count: Count
    stargazers_count: Count
    watchers_count: Count
    default_branch: str
    created_at: datetime
    updated_at: datetime
    topics: list[str] | None = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _utc_timestamp(cls, v: Any) -> Any:
        return _check_timestamp(v)


class UserSearchResponseDTO(_WireModel):
    """Envelope of ``GET /search/users``."""

    total_count: Count
    items: list[UserDTO]
