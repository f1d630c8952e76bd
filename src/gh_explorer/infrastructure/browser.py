"""System browser adapter — implements the UrlOpener port."""

from __future__ import annotations

import logging
import webbrowser

logger = logging.getLogger(__name__)


class WebBrowserOpener:
    """Opens URLs in the user's default web browser."""

    def __init__(self, new_tab: bool = True) -> None:
        self._new = 2 if new_tab else 0

    def open(self, url: str) -> None:
        if not webbrowser.open(url, new=self._new):
            logger.warning("No browser available to open %s", url)
