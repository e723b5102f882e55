from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.theming.apply_theme import build_stylesheet
from periodica.theming.theme_manager import ThemeManager
from periodica.theming.theme_tokens import DARK, LIGHT, THEME_TOKENS, get_theme_tokens, theme_name_for


class ThemeTokenTests(unittest.TestCase):
    def test_theme_name_for(self) -> None:
        self.assertEqual(theme_name_for(True), DARK)
        self.assertEqual(theme_name_for(False), LIGHT)

    def test_unknown_theme_falls_back_to_light(self) -> None:
        self.assertIs(get_theme_tokens("Solarized"), THEME_TOKENS[LIGHT])

    def test_token_sets_share_keys(self) -> None:
        light, dark = THEME_TOKENS[LIGHT], THEME_TOKENS[DARK]
        self.assertEqual(set(light), set(dark))
        self.assertEqual(set(light["colors"]), set(dark["colors"]))
        self.assertEqual(dark["colors"]["bg"], "#000000")
        self.assertEqual(light["colors"]["bg"], "#ffffff")


class StylesheetTests(unittest.TestCase):
    def test_stylesheet_uses_theme_tokens(self) -> None:
        for name in (LIGHT, DARK):
            tokens = THEME_TOKENS[name]
            stylesheet = build_stylesheet(tokens)
            for key, value in tokens["colors"].items():
                if key == "tile":
                    continue
                self.assertIn(value, stylesheet, key)
            for radius in tokens["radii"].values():
                self.assertIn(f"border-radius: {radius}px", stylesheet)


class ThemeManagerTests(unittest.TestCase):
    def test_set_dark_mode_emits_tokens(self) -> None:
        manager = ThemeManager()
        received: list[dict] = []
        manager.theme_changed.connect(received.append)
        tokens = manager.set_dark_mode(True)
        self.assertTrue(manager.is_dark)
        self.assertEqual(manager.theme_name, DARK)
        self.assertEqual(received, [tokens])
        manager.set_dark_mode(False)
        self.assertFalse(manager.is_dark)
        self.assertEqual(manager.tokens(), THEME_TOKENS[LIGHT])


if __name__ == "__main__":
    unittest.main()
