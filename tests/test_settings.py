from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from PySide6 import QtCore

from periodica.localization.translate import Locale
from periodica.settings import (
    KEY_DARK_MODE,
    KEY_LANGUAGE,
    MemoryPreferenceStore,
    Preferences,
    QSettingsPreferenceStore,
)


class PreferencesTests(unittest.TestCase):
    def test_defaults(self) -> None:
        prefs = Preferences()
        self.assertFalse(prefs.dark_mode)
        self.assertTrue(prefs.use_english)
        self.assertIs(prefs.locale, Locale.ENGLISH)

    def test_copies(self) -> None:
        prefs = Preferences().with_dark_mode(True).with_use_english(False)
        self.assertEqual(prefs, Preferences(dark_mode=True, use_english=False))
        self.assertIs(prefs.locale, Locale.BANGLA)

    def test_memory_store(self) -> None:
        store = MemoryPreferenceStore()
        self.assertEqual(store.load(), Preferences())
        store.save(Preferences(dark_mode=True))
        self.assertTrue(store.load().dark_mode)


class QSettingsPreferenceStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = str(Path(self._tmp.name) / "prefs.ini")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _settings(self) -> QtCore.QSettings:
        return QtCore.QSettings(self.path, QtCore.QSettings.Format.IniFormat)

    def test_empty_store_gives_defaults(self) -> None:
        self.assertEqual(QSettingsPreferenceStore(self._settings()).load(), Preferences())

    def test_save_and_reload(self) -> None:
        QSettingsPreferenceStore(self._settings()).save(Preferences(dark_mode=True, use_english=False))
        reloaded = QSettingsPreferenceStore(self._settings()).load()
        self.assertEqual(reloaded, Preferences(dark_mode=True, use_english=False))

    def test_uses_two_keys(self) -> None:
        settings = self._settings()
        QSettingsPreferenceStore(settings).save(Preferences())
        self.assertEqual(sorted(settings.allKeys()), sorted([KEY_DARK_MODE, KEY_LANGUAGE]))


if __name__ == "__main__":
    unittest.main()
