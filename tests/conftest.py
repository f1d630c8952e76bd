"""Shared fixtures: wire payload builders, domain factories and fake HTTP."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import httpx
import pytest

from gh_explorer.domain.entities import Repository, User
from gh_explorer.infrastructure.github_user_repository import GitHubUserRepository
from gh_explorer.infrastructure.network_client import GitHubNetworkClient

BASE_URL = "https://api.test"


def _user_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 583231,
        "login": "octocat",
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "html_url": "https://github.com/octocat",
        "bio": None,
        "followers": 20,
        "following": 9,
        "location": "San Francisco",
        "public_repos": 8,
        "public_gists": 8,
    }
    payload.update(overrides)
    return payload


def _repo_payload(repo_id: int = 1296269, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": repo_id,
        "name": f"repo-{repo_id}",
        "full_name": f"octocat/repo-{repo_id}",
        "owner": {
            "id": 583231,
            "login": "octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
            "url": "https://api.github.com/users/octocat",
            "html_url": "https://github.com/octocat",
        },
        "private": False,
        "html_url": f"https://github.com/octocat/repo-{repo_id}",
        "description": "My first repository on GitHub!",
        "fork": False,
        "language": "Python",
        "forks_count": 9,
        "stargazers_count": 80,
        "watchers_count": 80,
        "default_branch": "main",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2024-03-05T10:15:00Z",
        "topics": ["octocat", "atom"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    return _user_payload


@pytest.fixture
def repo_payload() -> Callable[..., dict[str, Any]]:
    return _repo_payload


@pytest.fixture
def make_repository() -> Callable[..., Repository]:
    """Build a domain Repository; ids auto-increment unless given."""
    counter = iter(range(1, 10_000))
    owner = User(id=1, login="octocat", avatar_url="https://example.com/a.png")
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(
        name: str = "repo",
        language: str | None = None,
        description: str | None = None,
        **overrides: Any,
    ) -> Repository:
        repo_id = overrides.pop("id", next(counter))
        fields: dict[str, Any] = {
            "id": repo_id,
            "name": name,
            "full_name": f"octocat/{name}",
            "owner": owner,
            "is_private": False,
            "html_url": f"https://github.com/octocat/{name}",
            "description": description,
            "fork": False,
            "language": language,
            "forks_count": 0,
            "stargazers_count": 0,
            "watchers_count": 0,
            "default_branch": "main",
            "created_at": stamp,
            "updated_at": stamp,
            "topics": (),
        }
        fields.update(overrides)
        return Repository(**fields)

    return _make


@pytest.fixture
def github_repository() -> Callable[..., GitHubUserRepository]:
    """Build a GitHubUserRepository whose HTTP traffic goes to *handler*."""

    def _build(handler: Callable[..., Any], per_page: int = 100) -> GitHubUserRepository:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GitHubUserRepository(
            GitHubNetworkClient(client), base_url=BASE_URL, per_page=per_page
        )

    return _build
