"""Periodic table reference data with English and Bangla presentation."""

from periodica.chem.elements import Element, get_element, get_element_by_symbol, parse_atomic_number
from periodica.chem.elements import all_elements as get_all_elements
from periodica.chem.search import search_elements
from periodica.content.element_details import DetailRow, present_card, present_detail, present_header
from periodica.errors import CatalogIntegrityError, MissingTranslationError, PeriodicaError
from periodica.localization.translate import (
    Locale,
    localized_kind,
    localized_label,
    localized_name,
    localized_state,
    translate_digits,
)

__all__ = [
    "CatalogIntegrityError",
    "DetailRow",
    "Element",
    "Locale",
    "MissingTranslationError",
    "PeriodicaError",
    "get_all_elements",
    "get_element",
    "get_element_by_symbol",
    "localized_kind",
    "localized_label",
    "localized_name",
    "localized_state",
    "parse_atomic_number",
    "present_card",
    "present_detail",
    "present_header",
    "search_elements",
    "translate_digits",
]
