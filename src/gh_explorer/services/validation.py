"""Input validation shared by the use cases.

Every caller gets identical error messages; validation always runs before
any network call.
"""

from __future__ import annotations

from gh_explorer.domain.exceptions import InvalidInputError


def validate_username(username: str) -> str:
    if not username:
        raise InvalidInputError("Username cannot be empty")
    if any(ch.isspace() for ch in username):
        raise InvalidInputError("Username cannot contain spaces")
    return username


def validate_search_query(query: str) -> str:
    if not query:
        raise InvalidInputError("Search query cannot be empty")
    return query
