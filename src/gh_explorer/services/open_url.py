"""Build GitHub web URLs and hand them to a UrlOpener."""

from __future__ import annotations

from gh_explorer.domain.entities import Repository
from gh_explorer.domain.ports.url_opener import UrlOpener

GITHUB_WEB_URL = "https://github.com/"


class OpenUrlUseCase:
    def __init__(self, opener: UrlOpener) -> None:
        self._opener = opener

    @staticmethod
    def profile_url(username: str) -> str:
        return f"{GITHUB_WEB_URL}{username}"

    @staticmethod
    def repository_url(repository: Repository) -> str:
        return repository.html_url

    def open_profile(self, username: str) -> None:
        self._opener.open(self.profile_url(username))

    def open_repository(self, repository: Repository) -> None:
        self._opener.open(self.repository_url(repository))
