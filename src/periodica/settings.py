from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from PySide6 import QtCore

from periodica.localization.translate import Locale

logger = logging.getLogger(__name__)

ORGANIZATION = "Periodica"
APPLICATION = "Periodica"
KEY_DARK_MODE = "dark_mode"
KEY_LANGUAGE = "language"


@dataclass(frozen=True)
class Preferences:
    dark_mode: bool = False
    use_english: bool = True

    @property
    def locale(self) -> Locale:
        return Locale.from_flag(self.use_english)

    def with_dark_mode(self, dark_mode: bool) -> Preferences:
        return replace(self, dark_mode=bool(dark_mode))

    def with_use_english(self, use_english: bool) -> Preferences:
        return replace(self, use_english=bool(use_english))


class PreferenceStore(Protocol):
    def load(self) -> Preferences: ...

    def save(self, preferences: Preferences) -> None: ...


class MemoryPreferenceStore:
    def __init__(self, preferences: Preferences | None = None) -> None:
        self._preferences = preferences or Preferences()

    def load(self) -> Preferences:
        return self._preferences

    def save(self, preferences: Preferences) -> None:
        self._preferences = preferences


class QSettingsPreferenceStore:
    """Persist the theme and language flags with ``QSettings``."""

    def __init__(self, settings: QtCore.QSettings | None = None) -> None:
        self._settings = settings or QtCore.QSettings(ORGANIZATION, APPLICATION)

    def load(self) -> Preferences:
        defaults = Preferences()
        dark_mode = self._settings.value(KEY_DARK_MODE, defaults.dark_mode, type=bool)
        use_english = self._settings.value(KEY_LANGUAGE, defaults.use_english, type=bool)
        preferences = Preferences(dark_mode=bool(dark_mode), use_english=bool(use_english))
        logger.debug("Loaded preferences %s", preferences)
        return preferences

    def save(self, preferences: Preferences) -> None:
        self._settings.setValue(KEY_DARK_MODE, preferences.dark_mode)
        self._settings.setValue(KEY_LANGUAGE, preferences.use_english)
        self._settings.sync()
        logger.debug("Saved preferences %s", preferences)
