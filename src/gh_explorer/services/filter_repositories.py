"""Repository filtering — pure, in-memory narrowing of a fetched collection.

Every function returns a new list and leaves its input untouched.  Text
search is case-insensitive; language filtering is an exact, case-sensitive
match.
"""

from __future__ import annotations

from collections.abc import Sequence

from gh_explorer.domain.entities import Repository


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle in haystack.casefold()


def filter_by_search_text(repositories: Sequence[Repository], text: str) -> list[Repository]:
    """Keep repositories whose name, description or language contains *text*."""
    if not text:
        return list(repositories)

    needle = text.casefold()
    return [
        repo
        for repo in repositories
        if _contains(repo.name, needle)
        or _contains(repo.description, needle)
        or _contains(repo.language, needle)
    ]


def filter_by_language(
    repositories: Sequence[Repository], language: str | None
) -> list[Repository]:
    """Keep repositories written in exactly *language*; ``None`` keeps all."""
    if language is None:
        return list(repositories)
    return [repo for repo in repositories if repo.language == language]


def filter_by_search_text_and_language(
    repositories: Sequence[Repository], text: str, language: str | None
) -> list[Repository]:
    """Apply the text filter, then the language filter."""
    return filter_by_language(filter_by_search_text(repositories, text), language)


def extract_unique_languages(repositories: Sequence[Repository]) -> list[str]:
    """Distinct non-null languages, sorted by code point."""
    return sorted({repo.language for repo in repositories if repo.language is not None})


class FilterRepositoriesUseCase:
    """Groups the filtering operations behind a single injectable object."""

    def filter_by_search_text(
        self, repositories: Sequence[Repository], text: str
    ) -> list[Repository]:
        return filter_by_search_text(repositories, text)

    def filter_by_language(
        self, repositories: Sequence[Repository], language: str | None
    ) -> list[Repository]:
        return filter_by_language(repositories, language)

    def filter_by_search_text_and_language(
        self, repositories: Sequence[Repository], text: str, language: str | None
    ) -> list[Repository]:
        return filter_by_search_text_and_language(repositories, text, language)

    def extract_unique_languages(self, repositories: Sequence[Repository]) -> list[str]:
        return extract_unique_languages(repositories)
