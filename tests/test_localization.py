from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.chem.elements import KINDS, STATES, all_elements
from periodica.errors import MissingTranslationError
from periodica.localization import bangla
from periodica.localization.translate import (
    FIELD_LABELS,
    Locale,
    localized_kind,
    localized_label,
    localized_name,
    localized_state,
    not_applicable,
    translate_digits,
    ui_text,
    validate_translations,
)


class TranslateDigitsTests(unittest.TestCase):
    def test_digits_map_one_by_one(self) -> None:
        self.assertEqual(translate_digits("118", Locale.BANGLA), "১১৮")
        self.assertEqual(translate_digits("0123456789", Locale.BANGLA), "০১২৩৪৫৬৭৮৯")

    def test_non_digits_pass_through(self) -> None:
        self.assertEqual(translate_digits("1.008", Locale.BANGLA), "১.০০৮")
        self.assertEqual(translate_digits("-12", Locale.BANGLA), "-১২")
        self.assertEqual(translate_digits("N/A", Locale.BANGLA), "N/A")
        self.assertEqual(translate_digits("", Locale.BANGLA), "")

    def test_english_is_unchanged(self) -> None:
        self.assertEqual(translate_digits("1.008", Locale.ENGLISH), "1.008")

    def test_accepts_plain_locale_values(self) -> None:
        self.assertEqual(translate_digits("42", "bn"), "৪২")


class LocalizedLookupTests(unittest.TestCase):
    def test_names(self) -> None:
        self.assertEqual(localized_name(26, Locale.ENGLISH), "Iron")
        self.assertEqual(localized_name(1, Locale.BANGLA), bangla.ELEMENT_NAMES[1])
        self.assertEqual(localized_name(118, Locale.BANGLA), bangla.ELEMENT_NAMES[118])

    def test_name_key_is_parsed_the_same_in_both_locales(self) -> None:
        self.assertEqual(localized_name("26", Locale.ENGLISH), "Iron")
        self.assertEqual(localized_name("26", Locale.BANGLA), bangla.ELEMENT_NAMES[26])
        for locale in Locale:
            with self.assertRaises(MissingTranslationError):
                localized_name(True, locale)
            with self.assertRaises(MissingTranslationError):
                localized_name("abc", locale)

    def test_every_catalog_element_has_a_bangla_name(self) -> None:
        for element in all_elements():
            self.assertTrue(localized_name(element.atomic_number, Locale.BANGLA))

    def test_unknown_atomic_number_is_an_invariant_violation(self) -> None:
        with self.assertRaises(MissingTranslationError):
            localized_name(0, Locale.BANGLA)
        with self.assertRaises(KeyError):
            localized_name(119, Locale.BANGLA)
        with self.assertRaises(MissingTranslationError):
            localized_name(119, Locale.ENGLISH)

    def test_kinds(self) -> None:
        self.assertEqual(localized_kind("Halogen", Locale.ENGLISH), "Halogen")
        self.assertEqual(localized_kind("Halogen", Locale.BANGLA), bangla.KINDS["Halogen"])
        self.assertEqual(localized_kind("Post Transition Metal", Locale.BANGLA), bangla.OTHER_METAL)
        for kind in KINDS:
            self.assertIn(kind, bangla.KINDS)

    def test_unmapped_kind_falls_back_and_warns(self) -> None:
        with self.assertLogs("periodica.localization.translate", level="WARNING") as logs:
            self.assertEqual(localized_kind("Metal", Locale.BANGLA), bangla.OTHER_METAL)
        self.assertIn("'Metal'", logs.output[0])

    def test_states(self) -> None:
        self.assertEqual(localized_state("Gas", Locale.ENGLISH), "Gas")
        for state in STATES:
            self.assertEqual(localized_state(state, Locale.BANGLA), bangla.STATES[state])
        with self.assertLogs("periodica.localization.translate", level="WARNING"):
            self.assertEqual(localized_state("Plasma", Locale.BANGLA), bangla.UNKNOWN_STATE)

    def test_labels(self) -> None:
        self.assertEqual(localized_label("Kind", Locale.ENGLISH), "Kind")
        for label in FIELD_LABELS:
            self.assertEqual(localized_label(label, Locale.BANGLA), bangla.FIELD_LABELS[label])
        with self.assertLogs("periodica.localization.translate", level="WARNING"):
            self.assertEqual(localized_label("Density", Locale.BANGLA), "Density")

    def test_not_applicable(self) -> None:
        self.assertEqual(not_applicable(Locale.ENGLISH), "N/A")
        self.assertEqual(not_applicable(Locale.BANGLA), bangla.NOT_APPLICABLE)

    def test_ui_text(self) -> None:
        self.assertEqual(ui_text("search_placeholder", Locale.ENGLISH), "Search...")
        self.assertEqual(ui_text("search_placeholder", Locale.BANGLA), bangla.UI_TEXT["search_placeholder"])
        self.assertEqual(ui_text("language_toggle", Locale.BANGLA), "English")
        self.assertEqual(ui_text("theme_dark", Locale.BANGLA), "Dark")

    def test_translation_tables_are_complete(self) -> None:
        validate_translations()

    def test_locale_from_flag(self) -> None:
        self.assertIs(Locale.from_flag(True), Locale.ENGLISH)
        self.assertIs(Locale.from_flag(False), Locale.BANGLA)
        self.assertTrue(Locale.ENGLISH.is_primary)
        self.assertFalse(Locale.BANGLA.is_primary)


if __name__ == "__main__":
    unittest.main()
