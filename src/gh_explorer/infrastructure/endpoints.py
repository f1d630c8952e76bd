"""Endpoint builder — request descriptors for the GitHub REST API.

Building an endpoint is a pure function: no I/O and no validation.  Path
segments are percent-encoded so a malformed username can never change the
path; query values are encoded by httpx when the request is sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote

DEFAULT_BASE_URL = "https://api.github.com"
MAX_PER_PAGE = 100


class HttpMethod(str, Enum):
    GET = "GET"


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A fully-qualified request descriptor."""

    base_url: str
    path: str
    method: HttpMethod = HttpMethod.GET
    query_params: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"{self.base_url.rstrip('/')}{path}"


def _segment(value: str) -> str:
    return quote(value, safe="")


def user(username: str, *, base_url: str = DEFAULT_BASE_URL) -> Endpoint:
    """GET /users/{username}."""
    return Endpoint(base_url=base_url, path=f"/users/{_segment(username)}")


def user_repositories(
    username: str,
    page: int = 1,
    per_page: int = MAX_PER_PAGE,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> Endpoint:
    """GET /users/{username}/repos?page=&per_page=&sort=updated."""
    return Endpoint(
        base_url=base_url,
        path=f"/users/{_segment(username)}/repos",
        query_params={
            "page": str(page),
            "per_page": str(per_page),
            "sort": "updated",
        },
    )


def search_users(
    query: str,
    page: int = 1,
    per_page: int = 30,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> Endpoint:
    """GET /search/users?q=&page=&per_page=."""
    return Endpoint(
        base_url=base_url,
        path="/search/users",
        query_params={
            "q": query,
            "page": str(page),
            "per_page": str(per_page),
        },
    )
