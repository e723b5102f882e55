from __future__ import annotations

import dataclasses
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.chem.elements import (
    ELEMENT_COUNT,
    KINDS,
    STATES,
    all_elements,
    get_element,
    get_element_by_symbol,
    parse_atomic_number,
    validate_catalog,
)
from periodica.errors import CatalogIntegrityError


class ElementCatalogTests(unittest.TestCase):
    def test_every_atomic_number_resolves_to_itself(self) -> None:
        for z in range(1, ELEMENT_COUNT + 1):
            element = get_element(z)
            self.assertIsNotNone(element, z)
            self.assertEqual(element.atomic_number, z)

    def test_lookup_miss_returns_none(self) -> None:
        self.assertIsNone(get_element(0))
        self.assertIsNone(get_element(119))
        self.assertIsNone(get_element(-1))

    def test_malformed_deep_link_parameter_is_a_miss(self) -> None:
        for raw in ("", "abc", "2.0", "-5", " ", None, True, "১১"):
            self.assertIsNone(get_element(raw), raw)
        self.assertEqual(get_element("26").symbol, "Fe")
        self.assertEqual(get_element(" 8 ").name, "Oxygen")

    def test_parse_atomic_number_range(self) -> None:
        self.assertEqual(parse_atomic_number("1"), 1)
        self.assertEqual(parse_atomic_number(118), 118)
        self.assertIsNone(parse_atomic_number("119"))
        self.assertIsNone(parse_atomic_number(0))

    def test_catalog_is_ordered_and_complete(self) -> None:
        elements = all_elements()
        self.assertEqual(len(elements), 118)
        self.assertEqual([e.atomic_number for e in elements], list(range(1, 119)))
        self.assertIs(all_elements(), elements)

    def test_symbols_are_unique(self) -> None:
        symbols = [e.symbol for e in all_elements()]
        self.assertEqual(len(symbols), len(set(symbols)))

    def test_tags_are_known(self) -> None:
        for element in all_elements():
            self.assertIn(element.kind, KINDS)
            self.assertIn(element.state, STATES)

    def test_symbol_lookup_is_case_insensitive(self) -> None:
        self.assertEqual(get_element_by_symbol("fe").atomic_number, 26)
        self.assertEqual(get_element_by_symbol(" He ").atomic_number, 2)
        self.assertIsNone(get_element_by_symbol("Xx"))
        self.assertIsNone(get_element_by_symbol(""))

    def test_optional_fields(self) -> None:
        helium = get_element(2)
        self.assertIsNone(helium.electronegativity)
        lanthanum = get_element(57)
        self.assertIsNone(lanthanum.period)
        self.assertIsNone(lanthanum.group)
        self.assertTrue(all(e.atomic_mass is not None for e in all_elements()))

    def test_recorded_values(self) -> None:
        hydrogen = get_element(1)
        self.assertEqual(hydrogen.name, "Hydrogen")
        self.assertEqual(hydrogen.atomic_mass, 1.008)
        self.assertEqual(hydrogen.electron_configuration, "1s1")
        self.assertEqual(get_element(80).state, "Liquid")
        self.assertEqual(get_element(13).kind, "Post Transition Metal")

    def test_source_period_quirks_are_kept(self) -> None:
        self.assertEqual(get_element(17).period, 1)
        self.assertEqual(get_element(50).period, 1)
        self.assertEqual(get_element(35).period, 4)

    def test_elements_are_immutable(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            get_element(1).name = "Protium"


class ValidateCatalogTests(unittest.TestCase):
    def test_shipped_catalog_is_valid(self) -> None:
        validate_catalog(all_elements())

    def test_duplicate_entry_is_reported(self) -> None:
        elements = list(all_elements())
        elements[1] = elements[0]
        with self.assertRaises(CatalogIntegrityError) as ctx:
            validate_catalog(elements)
        problems = "\n".join(ctx.exception.problems)
        self.assertIn("missing atomic numbers: [2]", problems)
        self.assertIn("duplicate atomic numbers: [1]", problems)
        self.assertIn("symbol 'H' already used by 1", problems)

    def test_unknown_kind_and_bad_group_are_reported(self) -> None:
        elements = list(all_elements())
        elements[0] = dataclasses.replace(elements[0], kind="Metal", group=19)
        with self.assertRaises(CatalogIntegrityError) as ctx:
            validate_catalog(elements)
        self.assertEqual(
            ctx.exception.problems,
            ["1: unknown kind 'Metal'", "1: group 19 outside 1..18"],
        )

    def test_short_catalog_is_reported(self) -> None:
        with self.assertRaises(CatalogIntegrityError):
            validate_catalog(all_elements()[:100])


if __name__ == "__main__":
    unittest.main()
