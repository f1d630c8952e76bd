"""In-process key-value store — implements the KeyValueStore port."""

from __future__ import annotations


class InMemoryKeyValueStore:
    """Dict-backed store. Lists are copied on the way in and out."""

    def __init__(self, initial: dict[str, list[str]] | None = None) -> None:
        self._data: dict[str, list[str]] = {
            key: list(value) for key, value in (initial or {}).items()
        }

    def get_string_list(self, key: str) -> list[str] | None:
        value = self._data.get(key)
        return list(value) if value is not None else None

    def set_string_list(self, key: str, value: list[str]) -> None:
        self._data[key] = list(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
