"""Language statistics — how often each language appears across repositories."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from gh_explorer.domain.entities import LanguageStat, Repository


def calculate_language_stats(repositories: Sequence[Repository]) -> list[LanguageStat]:
    """Count repositories per language, most used first.

    Repositories without a language are left out entirely.  Equal counts
    keep the order in which their language was first encountered.
    """
    counts = Counter(repo.language for repo in repositories if repo.language is not None)
    return [LanguageStat(language=lang, count=n) for lang, n in counts.most_common()]


class CalculateLanguageStatsUseCase:
    def execute(self, repositories: Sequence[Repository]) -> list[LanguageStat]:
        return calculate_language_stats(repositories)
