"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
Every error carries a ``retryable`` flag telling callers whether offering a
retry makes sense.
"""

from __future__ import annotations


class GhExplorerError(Exception):
    """Base exception for the entire application."""

    default_message = "An unexpected error occurred."
    retryable = True

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# ── Input validation ────────────────────────────────────────────────────────


class InvalidInputError(GhExplorerError):
    """A use-case precondition failed before any network call was made."""

    retryable = False

    def __init__(self, message: str) -> None:
        super().__init__(message)


# ── GitHub API errors ───────────────────────────────────────────────────────


class NetworkError(GhExplorerError):
    """Transport-level failure (no connectivity, timeout, TLS, DNS)."""

    default_message = (
        "A network error has occurred. "
        "Check your Internet connection and try again later."
    )


class UserNotFoundError(GhExplorerError):
    """The requested user does not exist (404)."""

    default_message = "User not found. Please enter another name."
    retryable = False


class ServerError(GhExplorerError):
    """GitHub answered with a non-2xx status other than 404."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message or f"Server error: {status_code}. Please try again later."
        )


# ── Processing errors ───────────────────────────────────────────────────────


class DecodingError(GhExplorerError):
    """A response body did not match the expected schema."""

    default_message = "There was an error processing the data. Please try again."
