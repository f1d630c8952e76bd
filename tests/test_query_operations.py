"""Tests for language statistics and repository filtering."""

from gh_explorer.domain.entities import LanguageStat
from gh_explorer.services.filter_repositories import (
    FilterRepositoriesUseCase,
    extract_unique_languages,
    filter_by_language,
    filter_by_search_text,
    filter_by_search_text_and_language,
)
from gh_explorer.services.language_stats import (
    CalculateLanguageStatsUseCase,
    calculate_language_stats,
)


def test_language_stats_sorted_by_count(make_repository):
    languages = ["Swift", "Swift", "JavaScript", "Python", "Swift", "JavaScript", None]
    repos = [make_repository(language=lang) for lang in languages]

    stats = calculate_language_stats(repos)

    assert stats == [
        LanguageStat("Swift", 3),
        LanguageStat("JavaScript", 2),
        LanguageStat("Python", 1),
    ]
    assert sum(s.count for s in stats) == 6


def test_language_stats_ties_keep_first_encounter_order(make_repository):
    repos = [make_repository(language=lang) for lang in ["Rust", "Go", "Go", "Rust", "C"]]

    stats = calculate_language_stats(repos)

    assert [(s.language, s.count) for s in stats] == [("Rust", 2), ("Go", 2), ("C", 1)]


def test_language_stats_empty_and_all_none(make_repository):
    assert calculate_language_stats([]) == []
    assert calculate_language_stats([make_repository(), make_repository()]) == []


def test_language_stats_use_case_delegates(make_repository):
    repos = [make_repository(language="Kotlin")]

    assert CalculateLanguageStatsUseCase().execute(repos) == [LanguageStat("Kotlin", 1)]


def test_text_filter_matches_name_description_and_language(make_repository):
    by_name = make_repository(name="swift-algorithms")
    by_description = make_repository(name="algo", description="Written in SWIFT")
    by_language = make_repository(name="app", language="Swift")
    unrelated = make_repository(name="web", description="React app", language="TypeScript")

    result = filter_by_search_text([by_name, by_description, by_language, unrelated], "swift")

    assert result == [by_name, by_description, by_language]


def test_text_filter_ignores_none_fields(make_repository):
    repo = make_repository(name="tools", description=None, language=None)

    assert filter_by_search_text([repo], "python") == []


def test_text_filter_is_unicode_aware(make_repository):
    repo = make_repository(name="Straße-Karte")

    assert filter_by_search_text([repo], "STRASSE") == [repo]


def test_empty_text_filter_is_identity(make_repository):
    repos = [make_repository(name=n) for n in ("b", "a", "c")]

    result = filter_by_search_text(repos, "")

    assert result == repos
    assert result is not repos


def test_language_filter_is_case_sensitive(make_repository):
    swift = make_repository(language="Swift")

    assert filter_by_search_text([swift], "swift") == [swift]
    assert filter_by_language([swift], "swift") == []
    assert filter_by_language([swift], "Swift") == [swift]


def test_none_language_filter_is_identity(make_repository):
    repos = [make_repository(language="Go"), make_repository(language=None)]

    assert filter_by_language(repos, None) == repos


def test_combined_filter(make_repository):
    a = make_repository(name="cli-tool", language="Go")
    b = make_repository(name="cli-app", language="Rust")
    c = make_repository(name="server", language="Go")

    assert filter_by_search_text_and_language([a, b, c], "cli", "Go") == [a]
    assert filter_by_search_text_and_language([a, b, c], "", "Go") == [a, c]
    assert filter_by_search_text_and_language([a, b, c], "cli", None) == [a, b]


def test_filters_do_not_mutate_input(make_repository):
    repos = [make_repository(name="x", language="Go"), make_repository(name="y")]
    snapshot = list(repos)

    filter_by_search_text(repos, "x")
    filter_by_language(repos, "Go")
    calculate_language_stats(repos)
    extract_unique_languages(repos)

    assert repos == snapshot


def test_unique_languages_sorted_and_deduplicated(make_repository):
    repos = [make_repository(language=lang) for lang in ["Swift", None, "Python", "Swift"]]

    assert extract_unique_languages(repos) == ["Python", "Swift"]


def test_unique_languages_use_code_point_order(make_repository):
    repos = [make_repository(language=lang) for lang in ["rust", "C#", "Zig", "C"]]

    assert extract_unique_languages(repos) == ["C", "C#", "Zig", "rust"]


def test_use_case_methods_match_functions(make_repository):
    use_case = FilterRepositoriesUseCase()
    repos = [make_repository(name="a", language="Go"), make_repository(name="b", language="C")]

    assert use_case.filter_by_search_text(repos, "a") == [repos[0]]
    assert use_case.filter_by_language(repos, "C") == [repos[1]]
    assert use_case.filter_by_search_text_and_language(repos, "b", "C") == [repos[1]]
    assert use_case.extract_unique_languages(repos) == ["C", "Go"]
