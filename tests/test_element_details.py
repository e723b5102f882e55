from __future__ import annotations

import dataclasses
import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.chem.elements import all_elements, get_element
from periodica.content.element_details import (
    DetailRow,
    neutron_count,
    present_card,
    present_detail,
    present_header,
)
from periodica.localization import bangla
from periodica.localization.translate import FIELD_LABELS, Locale


class ElementDetailsTests(unittest.TestCase):
    def test_helium_in_english(self) -> None:
        rows = present_detail(get_element(2), Locale.ENGLISH)
        self.assertEqual(
            rows,
            [
                DetailRow("Kind", "Noble Gas"),
                DetailRow("Atomic Mass", "4.002"),
                DetailRow("Group", "18"),
                DetailRow("Period", "1"),
                DetailRow("Protons", "2"),
                DetailRow("Neutrons", "2"),
                DetailRow("Electrons", "2"),
                DetailRow("State", "Gas"),
                DetailRow("Electronegativity", "N/A"),
            ],
        )

    def test_helium_in_bangla(self) -> None:
        rows = dict(present_detail(get_element(2), Locale.BANGLA))
        self.assertEqual(rows[bangla.FIELD_LABELS["Electronegativity"]], bangla.NOT_APPLICABLE)
        self.assertEqual(rows[bangla.FIELD_LABELS["Atomic Mass"]], "৪.০০২")
        self.assertEqual(rows[bangla.FIELD_LABELS["Group"]], "১৮")
        self.assertEqual(rows[bangla.FIELD_LABELS["Kind"]], bangla.KINDS["Noble Gas"])
        self.assertEqual(rows[bangla.FIELD_LABELS["State"]], bangla.STATES["Gas"])

    def test_labels_follow_fixed_order(self) -> None:
        labels = [row.label for row in present_detail(get_element(1), Locale.ENGLISH)]
        self.assertEqual(labels, list(FIELD_LABELS))
        labels = [row.label for row in present_detail(get_element(1), Locale.BANGLA)]
        self.assertEqual(labels, [bangla.FIELD_LABELS[label] for label in FIELD_LABELS])

    def test_lanthanide_without_group_or_period(self) -> None:
        rows = dict(present_detail(get_element(57), Locale.ENGLISH))
        self.assertEqual(rows["Group"], "N/A")
        self.assertEqual(rows["Period"], "N/A")
        self.assertEqual(rows["Electronegativity"], "1.1")

    def test_neutron_count_rounds_mass_down(self) -> None:
        self.assertEqual(neutron_count(get_element(1)), 0)
        self.assertEqual(neutron_count(get_element(26)), 29)
        self.assertEqual(neutron_count(get_element(92)), 146)
        self.assertEqual(neutron_count(get_element(118)), 176)

    def test_missing_mass_renders_not_applicable(self) -> None:
        massless = dataclasses.replace(get_element(118), atomic_mass=None)
        self.assertIsNone(neutron_count(massless))
        rows = dict(present_detail(massless, Locale.ENGLISH))
        self.assertEqual(rows["Atomic Mass"], "N/A")
        self.assertEqual(rows["Neutrons"], "N/A")
        rows = dict(present_detail(massless, Locale.BANGLA))
        self.assertEqual(rows[bangla.FIELD_LABELS["Neutrons"]], bangla.NOT_APPLICABLE)

    def test_every_element_presents_in_both_locales(self) -> None:
        for element in all_elements():
            for locale in Locale:
                rows = present_detail(element, locale)
                self.assertEqual(len(rows), 9)
                self.assertTrue(all(row.value for row in rows))
                self.assertEqual(rows[4].value, rows[6].value)

    def test_card(self) -> None:
        card = present_card(get_element(26), Locale.BANGLA)
        self.assertEqual(card.number, "২৬")
        self.assertEqual(card.symbol, "Fe")
        self.assertEqual(card.name, bangla.ELEMENT_NAMES[26])
        self.assertEqual(card.kind, bangla.KINDS["Transition Metal"])
        card = present_card(get_element(26), Locale.ENGLISH)
        self.assertEqual(tuple(card), ("26", "Fe", "Iron", "Transition Metal"))

    def test_header_keeps_configuration_verbatim(self) -> None:
        header = present_header(get_element(8), Locale.BANGLA)
        self.assertEqual(header.number, "৮")
        self.assertEqual(header.symbol, "O")
        self.assertEqual(header.electron_configuration, "1s2 2s2 2p4")


if __name__ == "__main__":
    unittest.main()
