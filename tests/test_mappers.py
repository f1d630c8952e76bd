"""Tests for DTO decoding and the DTO → domain mappers."""

from datetime import datetime, timezone

import pytest

from gh_explorer.domain.exceptions import DecodingError
from gh_explorer.infrastructure import mappers
from gh_explorer.infrastructure.dtos import (
    RepositoryDTO,
    UserDTO,
    UserSearchResponseDTO,
)


def test_map_user_copies_every_field(user_payload):
    user = mappers.map_user(UserDTO.model_validate(user_payload(bio="Hi")))

    assert user.id == 583231
    assert user.login == "octocat"
    assert user.name == "The Octocat"
    assert user.avatar_url == "https://avatars.githubusercontent.com/u/583231?v=4"
    assert user.bio == "Hi"
    assert user.followers == 20
    assert user.following == 9
    assert user.location == "San Francisco"
    assert user.public_repos == 8
    assert user.public_gists == 8


def test_map_user_rejects_relative_avatar(user_payload):
    dto = UserDTO.model_validate(user_payload(avatar_url="/avatars/u/1"))

    with pytest.raises(DecodingError):
        mappers.map_user(dto)


def test_map_repository_copies_every_field(repo_payload):
    repo = mappers.map_repository(RepositoryDTO.model_validate(repo_payload(42)))

    assert repo.id == 42
    assert repo.name == "repo-42"
    assert repo.full_name == "octocat/repo-42"
    assert repo.is_private is False
    assert repo.html_url == "https://github.com/octocat/repo-42"
    assert repo.description == "My first repository on GitHub!"
    assert repo.fork is False
    assert repo.language == "Python"
    assert repo.forks_count == 9
    assert repo.stargazers_count == 80
    assert repo.watchers_count == 80
    assert repo.default_branch == "main"
    assert repo.created_at == datetime(2011, 1, 26, 19, 1, 12, tzinfo=timezone.utc)
    assert repo.updated_at == datetime(2024, 3, 5, 10, 15, tzinfo=timezone.utc)
    assert repo.topics == ("octocat", "atom")


def test_owner_is_partially_populated(repo_payload):
    owner = mappers.map_repository(RepositoryDTO.model_validate(repo_payload())).owner

    assert owner.id == 583231
    assert owner.login == "octocat"
    assert owner.name is None
    assert owner.bio is None
    assert owner.location is None
    assert (owner.followers, owner.following) == (0, 0)
    assert (owner.public_repos, owner.public_gists) == (0, 0)


@pytest.mark.parametrize("topics", [None, "absent"])
def test_missing_topics_map_to_empty(repo_payload, topics):
    payload = repo_payload(topics=topics)
    if topics == "absent":
        del payload["topics"]

    repo = mappers.map_repository(RepositoryDTO.model_validate(payload))

    assert repo.topics == ()


def test_topics_keep_server_order(repo_payload):
    payload = repo_payload(topics=["zeta", "alpha", "mid"])

    repo = mappers.map_repository(RepositoryDTO.model_validate(payload))

    assert repo.topics == ("zeta", "alpha", "mid")


@pytest.mark.parametrize("bad_url", ["not a url", "github.com/octocat", "https://", ""])
def test_malformed_html_url_is_rejected(repo_payload, bad_url):
    dto = RepositoryDTO.model_validate(repo_payload(html_url=bad_url))

    with pytest.raises(DecodingError):
        mappers.map_repository(dto)


def test_malformed_owner_avatar_is_rejected(repo_payload):
    payload = repo_payload()
    payload["owner"]["avatar_url"] = "not a url"

    with pytest.raises(DecodingError):
        mappers.map_repository(RepositoryDTO.model_validate(payload))


def test_collection_mapping_is_all_or_nothing(repo_payload):
    dtos = [
        RepositoryDTO.model_validate(repo_payload(1)),
        RepositoryDTO.model_validate(repo_payload(2, html_url="not a url")),
        RepositoryDTO.model_validate(repo_payload(3)),
    ]

    with pytest.raises(DecodingError):
        mappers.map_repositories(dtos)


def test_search_response_maps_items(user_payload):
    envelope = UserSearchResponseDTO.model_validate(
        {
            "total_count": 1234,
            "incomplete_results": False,
            "items": [user_payload(id=1, login="a"), user_payload(id=2, login="b")],
        }
    )

    users = mappers.map_search_response(envelope)

    assert [u.login for u in users] == ["a", "b"]


def test_search_hits_without_counters_default_to_zero():
    envelope = UserSearchResponseDTO.model_validate(
        {
            "total_count": 1,
            "items": [
                {"id": 7, "login": "tom", "avatar_url": "https://example.com/tom.png"}
            ],
        }
    )

    (user,) = mappers.map_search_response(envelope)

    assert user.login == "tom"
    assert user.name is None
    assert user.followers == 0
    assert user.public_repos == 0
