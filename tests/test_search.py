from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.chem.elements import all_elements, get_element
from periodica.chem.search import matches, search_elements
from periodica.localization import bangla
from periodica.localization.translate import Locale


def numbers(elements) -> list[int]:
    return [element.atomic_number for element in elements]


class SearchElementsTests(unittest.TestCase):
    def test_empty_query_returns_full_catalog(self) -> None:
        result = search_elements("", Locale.ENGLISH)
        self.assertEqual(numbers(result), list(range(1, 119)))
        self.assertEqual(numbers(search_elements(None, Locale.BANGLA)), list(range(1, 119)))

    def test_whitespace_is_matched_literally(self) -> None:
        self.assertEqual(search_elements(" ", Locale.ENGLISH), [])
        self.assertEqual(search_elements("   ", Locale.BANGLA), [])
        self.assertEqual(search_elements("he ", Locale.ENGLISH), [])
        self.assertEqual(numbers(search_elements("he", Locale.ENGLISH)), [2, 44, 75, 104])

    def test_name_or_symbol_substring(self) -> None:
        # He is the symbol of helium and a substring of three other names
        self.assertEqual(numbers(search_elements("He", Locale.ENGLISH)), [2, 44, 75, 104])
        self.assertEqual(numbers(search_elements("fe", Locale.ENGLISH)), [26, 100])

    def test_case_insensitive(self) -> None:
        self.assertEqual(
            numbers(search_elements("HE", Locale.ENGLISH)),
            numbers(search_elements("he", Locale.ENGLISH)),
        )
        self.assertEqual(numbers(search_elements("OXYGEN", Locale.ENGLISH)), [8])

    def test_no_match_is_empty(self) -> None:
        self.assertEqual(search_elements("xyz", Locale.ENGLISH), [])

    def test_bangla_searches_localized_name_and_symbol(self) -> None:
        self.assertEqual(numbers(search_elements("He", Locale.BANGLA)), [2])
        self.assertEqual(numbers(search_elements(bangla.ELEMENT_NAMES[79], Locale.BANGLA)), [79])
        self.assertEqual(search_elements("Iron", Locale.BANGLA), [])

    def test_repeated_search_is_identical(self) -> None:
        first = search_elements("n", Locale.ENGLISH)
        second = search_elements("n", Locale.ENGLISH)
        self.assertEqual(first, second)
        self.assertEqual(numbers(first), sorted(numbers(first)))

    def test_catalog_is_not_mutated(self) -> None:
        before = all_elements()
        search_elements("a", Locale.ENGLISH)
        self.assertIs(all_elements(), before)
        self.assertEqual(len(before), 118)

    def test_custom_catalog_keeps_its_order(self) -> None:
        catalog = [get_element(26), get_element(2), get_element(75)]
        self.assertEqual(numbers(search_elements("e", Locale.ENGLISH, catalog)), [26, 2, 75])
        self.assertEqual(numbers(search_elements("", Locale.ENGLISH, catalog)), [26, 2, 75])

    def test_matches(self) -> None:
        iron = get_element(26)
        self.assertTrue(matches(iron, "ir", Locale.ENGLISH))
        self.assertFalse(matches(iron, "ir", Locale.BANGLA))
        self.assertTrue(matches(iron, "fE", Locale.BANGLA))


if __name__ == "__main__":
    unittest.main()
