from __future__ import annotations

import logging

from PySide6 import QtCore

from periodica.theming.theme_tokens import LIGHT, THEME_TOKENS, get_theme_tokens, theme_name_for

logger = logging.getLogger(__name__)


class ThemeManager(QtCore.QObject):
    theme_changed = QtCore.Signal(dict)

    def __init__(self) -> None:
        super().__init__()
        self._theme_name = LIGHT
        self._tokens: dict = THEME_TOKENS[LIGHT]

    def set_theme(self, name: str) -> dict:
        self._tokens = get_theme_tokens(name)
        self._theme_name = self._tokens["meta"]["name"]
        logger.debug("Theme set to %s", self._theme_name)
        self.theme_changed.emit(self._tokens)
        return self._tokens

    def set_dark_mode(self, dark_mode: bool) -> dict:
        return self.set_theme(theme_name_for(dark_mode))

    @property
    def theme_name(self) -> str:
        return self._theme_name

    @property
    def is_dark(self) -> bool:
        return self._tokens["meta"]["mode"] == "dark"

    def tokens(self) -> dict:
        return self._tokens


_theme_manager: ThemeManager | None = None


def get_theme_manager() -> ThemeManager:
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager
