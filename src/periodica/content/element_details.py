from __future__ import annotations

import math
from typing import NamedTuple

from periodica.chem.elements import Element
from periodica.localization.translate import (
    Locale,
    localized_kind,
    localized_label,
    localized_name,
    localized_state,
    not_applicable,
    translate_digits,
)


class DetailRow(NamedTuple):
    label: str
    value: str


class ElementCard(NamedTuple):
    number: str
    symbol: str
    name: str
    kind: str


class ElementHeader(NamedTuple):
    number: str
    symbol: str
    name: str
    electron_configuration: str


def neutron_count(element: Element) -> int | None:
    """Approximate neutron count, floor(atomic mass) - Z.

    Ignores the isotopic distribution, so it can be off by one where the
    standard atomic mass sits just below the dominant isotope.
    """
    if element.atomic_mass is None:
        return None
    return math.floor(element.atomic_mass) - element.atomic_number


def _optional(value, locale: Locale) -> str:
    if value is None:
        return not_applicable(locale)
    return translate_digits(str(value), locale)


def present_detail(element: Element, locale: Locale = Locale.ENGLISH) -> list[DetailRow]:
    locale = Locale(locale)
    raw_rows = (
        ("Kind", localized_kind(element.kind, locale)),
        ("Atomic Mass", _optional(element.atomic_mass, locale)),
        ("Group", _optional(element.group, locale)),
        ("Period", _optional(element.period, locale)),
        ("Protons", _optional(element.atomic_number, locale)),
        ("Neutrons", _optional(neutron_count(element), locale)),
        ("Electrons", _optional(element.atomic_number, locale)),
        ("State", localized_state(element.state, locale)),
        ("Electronegativity", _optional(element.electronegativity, locale)),
    )
    return [DetailRow(localized_label(label, locale), value) for label, value in raw_rows]


def present_card(element: Element, locale: Locale = Locale.ENGLISH) -> ElementCard:
    return ElementCard(
        number=translate_digits(str(element.atomic_number), locale),
        symbol=element.symbol,
        name=localized_name(element.atomic_number, locale),
        kind=localized_kind(element.kind, locale),
    )


def present_header(element: Element, locale: Locale = Locale.ENGLISH) -> ElementHeader:
    return ElementHeader(
        number=translate_digits(str(element.atomic_number), locale),
        symbol=element.symbol,
        name=localized_name(element.atomic_number, locale),
        electron_configuration=element.electron_configuration,
    )
