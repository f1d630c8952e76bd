"""Port: URL opener — hands a URL to whatever can display it."""

from __future__ import annotations

from typing import Protocol


class UrlOpener(Protocol):
    def open(self, url: str) -> None:
        """Open *url*. Failures are not reported back to the caller."""
        ...
