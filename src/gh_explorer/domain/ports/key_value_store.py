"""Port: key-value store — backs the favorites and search-history lists."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Abstract contract for a string-keyed store of string lists."""

    def get_string_list(self, key: str) -> list[str] | None:
        """Return the list stored under *key*, or ``None`` when absent."""
        ...

    def set_string_list(self, key: str, value: list[str]) -> None:
        """Replace the list stored under *key*."""
        ...

    def remove(self, key: str) -> None:
        """Delete *key*; a missing key is not an error."""
        ...
