"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from gh_explorer.domain.exceptions import DecodingError

_WHITESPACE_RE = re.compile(r"\s")


def parse_absolute_url(raw: str) -> str:
    """Return *raw* unchanged if it is an absolute URL, else raise ``DecodingError``.

    An absolute URL has both a scheme and a host, e.g.
    ``https://github.com/octocat``.  Relative references and strings with
    embedded whitespace are rejected.
    """
    if _WHITESPACE_RE.search(raw):
        raise DecodingError(f"Invalid URL: '{raw}'")
    try:
        parts = urlsplit(raw)
    except ValueError as exc:
        raise DecodingError(f"Invalid URL: '{raw}'") from exc
    if not parts.scheme or not parts.netloc:
        raise DecodingError(f"Invalid URL: '{raw}'")
    return raw
