"""Favorite users — an ordered, duplicate-free list of usernames."""

from __future__ import annotations

import logging

from gh_explorer.domain.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favoriteUsernames"


class ManageFavoritesUseCase:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load_favorites(self) -> list[str]:
        return self._store.get_string_list(FAVORITES_KEY) or []

    def add_to_favorites(self, username: str) -> None:
        favorites = self.load_favorites()
        if username in favorites:
            return
        favorites.append(username)
        self._store.set_string_list(FAVORITES_KEY, favorites)
        logger.debug("Added %s to favorites", username)

    def remove_from_favorites(self, username: str) -> None:
        favorites = self.load_favorites()
        if username not in favorites:
            return
        favorites.remove(username)
        self._store.set_string_list(FAVORITES_KEY, favorites)
        logger.debug("Removed %s from favorites", username)

    def is_favorite(self, username: str) -> bool:
        return username in self.load_favorites()

    def toggle_favorite(self, username: str) -> None:
        if self.is_favorite(username):
            self.remove_from_favorites(username)
        else:
            self.add_to_favorites(username)
