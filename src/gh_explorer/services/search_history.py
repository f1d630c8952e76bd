"""Recent searches, kept separately per device family.

The most recent search comes first; re-searching a username moves it to
the front instead of duplicating it.  Each platform caps its history at a
different length.
"""

from __future__ import annotations

from gh_explorer.domain.entities import Platform
from gh_explorer.domain.ports.key_value_store import KeyValueStore

_HISTORY_KEYS: dict[Platform, str] = {
    Platform.IOS: "searchHistory",
    Platform.IPADOS: "iPadSearchHistory",
    Platform.MACOS: "macSearchHistory",
    Platform.TVOS: "tvOSRecentSearches",
    Platform.VISIONOS: "visionSearchHistory",
}

_MAX_HISTORY_ITEMS: dict[Platform, int] = {
    Platform.IOS: 10,
    Platform.IPADOS: 15,
    Platform.MACOS: 10,
    Platform.TVOS: 5,
    Platform.VISIONOS: 10,
}


class ManageSearchHistoryUseCase:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load_search_history(self, platform: Platform) -> list[str]:
        return self._store.get_string_list(_HISTORY_KEYS[platform]) or []

    def add_to_search_history(self, username: str, platform: Platform) -> None:
        if not username:
            return
        history = [entry for entry in self.load_search_history(platform) if entry != username]
        history.insert(0, username)
        self._store.set_string_list(
            _HISTORY_KEYS[platform], history[: _MAX_HISTORY_ITEMS[platform]]
        )

    def remove_from_history(self, username: str, platform: Platform) -> None:
        history = self.load_search_history(platform)
        if username not in history:
            return
        history.remove(username)
        self._store.set_string_list(_HISTORY_KEYS[platform], history)

    def clear_search_history(self, platform: Platform) -> None:
        self._store.remove(_HISTORY_KEYS[platform])
