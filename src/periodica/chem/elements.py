from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from periodica.chem.element_data import ELEMENT_RECORDS
from periodica.errors import CatalogIntegrityError

logger = logging.getLogger(__name__)

ELEMENT_COUNT = 118

KINDS: tuple[str, ...] = (
    "Nonmetal",
    "Noble Gas",
    "Alkali Metal",
    "Alkaline Earth Metal",
    "Metalloid",
    "Halogen",
    "Transition Metal",
    "Post Transition Metal",
    "Lanthanide",
    "Actinide",
)

STATES: tuple[str, ...] = ("Solid", "Liquid", "Gas")


@dataclass(frozen=True)
class Element:
    atomic_number: int
    name: str
    symbol: str
    atomic_mass: float | None
    kind: str
    state: str
    period: int | None
    group: int | None
    electronegativity: float | None
    electron_configuration: str

    @classmethod
    def from_record(cls, record: dict) -> Element:
        return cls(
            atomic_number=int(record["atomicNumber"]),
            name=str(record["name"]),
            symbol=str(record["symbol"]),
            atomic_mass=_optional_float(record.get("atomicMass")),
            kind=str(record["kind"]),
            state=str(record["state"]),
            period=_optional_int(record.get("period")),
            group=_optional_int(record.get("group")),
            electronegativity=_optional_float(record.get("electronegativity")),
            electron_configuration=str(record.get("electronConfiguration") or ""),
        )


def _optional_float(value) -> float | None:
    return None if value is None else float(value)


def _optional_int(value) -> int | None:
    return None if value is None else int(value)


def validate_catalog(elements: tuple[Element, ...] | list[Element]) -> None:
    """Check the catalog invariants, raising ``CatalogIntegrityError`` listing every problem found."""
    problems: list[str] = []
    numbers = [element.atomic_number for element in elements]
    if numbers != list(range(1, ELEMENT_COUNT + 1)):
        missing = sorted(set(range(1, ELEMENT_COUNT + 1)) - set(numbers))
        extra = sorted(set(numbers) - set(range(1, ELEMENT_COUNT + 1)))
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if missing:
            problems.append(f"missing atomic numbers: {missing}")
        if extra:
            problems.append(f"atomic numbers out of range: {extra}")
        if duplicates:
            problems.append(f"duplicate atomic numbers: {duplicates}")
        if not (missing or extra or duplicates):
            problems.append("elements are not in ascending atomic-number order")

    seen_symbols: dict[str, int] = {}
    for element in elements:
        z = element.atomic_number
        symbol = element.symbol
        if not (1 <= len(symbol) <= 2 and symbol.isalpha() and symbol[0].isupper()):
            problems.append(f"{z}: malformed symbol {symbol!r}")
        key = symbol.lower()
        if key in seen_symbols:
            problems.append(f"{z}: symbol {symbol!r} already used by {seen_symbols[key]}")
        seen_symbols[key] = z
        if not element.name:
            problems.append(f"{z}: empty name")
        if element.kind not in KINDS:
            problems.append(f"{z}: unknown kind {element.kind!r}")
        if element.state not in STATES:
            problems.append(f"{z}: unknown state {element.state!r}")
        if element.period is not None and not 1 <= element.period <= 7:
            problems.append(f"{z}: period {element.period} outside 1..7")
        if element.group is not None and not 1 <= element.group <= 18:
            problems.append(f"{z}: group {element.group} outside 1..18")
        if element.atomic_mass is not None and element.atomic_mass <= 0:
            problems.append(f"{z}: non-positive atomic mass {element.atomic_mass}")
    if problems:
        raise CatalogIntegrityError(problems)


@lru_cache(maxsize=1)
def _catalog() -> tuple[tuple[Element, ...], dict[int, Element], dict[str, Element]]:
    elements = tuple(Element.from_record(record) for record in ELEMENT_RECORDS)
    validate_catalog(elements)
    by_number = {element.atomic_number: element for element in elements}
    by_symbol = {element.symbol.lower(): element for element in elements}
    logger.info("Loaded element catalog with %d elements", len(elements))
    return elements, by_number, by_symbol


def all_elements() -> tuple[Element, ...]:
    elements, _, _ = _catalog()
    return elements


def get_element(atomic_number) -> Element | None:
    """Return the element for ``atomic_number``, or ``None`` when it is not in the catalog.

    Accepts anything ``parse_atomic_number`` accepts, so a raw deep-link
    parameter can be passed straight through.
    """
    z = parse_atomic_number(atomic_number)
    if z is None:
        return None
    _, by_number, _ = _catalog()
    return by_number.get(z)


def get_element_by_symbol(symbol: str) -> Element | None:
    if not symbol:
        return None
    _, _, by_symbol = _catalog()
    return by_symbol.get(str(symbol).strip().lower())


def parse_atomic_number(raw) -> int | None:
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        z = raw
    else:
        text = str(raw).strip()
        if not text.isascii() or not text.isdigit():
            logger.debug("Rejected atomic number parameter %r", raw)
            return None
        z = int(text)
    if not 1 <= z <= ELEMENT_COUNT:
        logger.debug("Atomic number %d outside catalog", z)
        return None
    return z
