from __future__ import annotations

import logging
from enum import Enum

from periodica.chem.elements import ELEMENT_COUNT, KINDS, STATES, get_element
from periodica.errors import CatalogIntegrityError, MissingTranslationError
from periodica.localization import bangla

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"

FIELD_LABELS: tuple[str, ...] = (
    "Kind",
    "Atomic Mass",
    "Group",
    "Period",
    "Protons",
    "Neutrons",
    "Electrons",
    "State",
    "Electronegativity",
)

UI_TEXT: dict[str, str] = {
    "search_placeholder": "Search...",
    "theme_light": "Light",
    "theme_dark": "Dark",
    "language_toggle": "বাংলা",
    "back": "Back",
    "no_results": "No elements found",
}

_DIGIT_TABLE = str.maketrans(bangla.DIGITS)


class Locale(str, Enum):
    ENGLISH = "en"
    BANGLA = "bn"

    @classmethod
    def from_flag(cls, use_english: bool) -> Locale:
        return cls.ENGLISH if use_english else cls.BANGLA

    @property
    def is_primary(self) -> bool:
        return self is Locale.ENGLISH


def translate_digits(text: str, locale: Locale = Locale.ENGLISH) -> str:
    """Swap each ASCII digit for the locale's digit; everything else, including ``.`` and ``-``, is kept."""
    text = str(text)
    if Locale(locale).is_primary:
        return text
    return text.translate(_DIGIT_TABLE)


def localized_name(atomic_number: int, locale: Locale = Locale.ENGLISH) -> str:
    """Name for ``atomic_number``; the key is parsed the same way in every locale."""
    element = get_element(atomic_number)
    if element is None:
        raise MissingTranslationError(atomic_number)
    if Locale(locale).is_primary:
        return element.name
    try:
        return bangla.ELEMENT_NAMES[element.atomic_number]
    except KeyError:
        raise MissingTranslationError(atomic_number) from None


def localized_kind(kind: str, locale: Locale = Locale.ENGLISH) -> str:
    if Locale(locale).is_primary:
        return kind
    translated = bangla.KINDS.get(kind)
    if translated is None:
        logger.warning("No Bangla mapping for kind %r, using the other-metal category", kind)
        return bangla.OTHER_METAL
    return translated


def localized_state(state: str, locale: Locale = Locale.ENGLISH) -> str:
    if Locale(locale).is_primary:
        return state
    translated = bangla.STATES.get(state)
    if translated is None:
        logger.warning("No Bangla mapping for state %r, using the unknown-state label", state)
        return bangla.UNKNOWN_STATE
    return translated


def localized_label(label: str, locale: Locale = Locale.ENGLISH) -> str:
    if Locale(locale).is_primary:
        return label
    translated = bangla.FIELD_LABELS.get(label)
    if translated is None:
        logger.warning("No Bangla mapping for label %r", label)
        return label
    return translated


def not_applicable(locale: Locale = Locale.ENGLISH) -> str:
    return NOT_APPLICABLE if Locale(locale).is_primary else bangla.NOT_APPLICABLE


def ui_text(key: str, locale: Locale = Locale.ENGLISH) -> str:
    english = UI_TEXT[key]
    if Locale(locale).is_primary:
        return english
    # theme captions stay in English in both locales
    return bangla.UI_TEXT.get(key, english)


def validate_translations() -> None:
    """Check that every element, kind, state and field label has an explicit Bangla entry."""
    problems: list[str] = []
    missing_names = [z for z in range(1, ELEMENT_COUNT + 1) if z not in bangla.ELEMENT_NAMES]
    if missing_names:
        problems.append(f"missing Bangla names for atomic numbers {missing_names}")
    extra_names = sorted(set(bangla.ELEMENT_NAMES) - set(range(1, ELEMENT_COUNT + 1)))
    if extra_names:
        problems.append(f"Bangla names for unknown atomic numbers {extra_names}")
    problems.extend(f"missing Bangla kind {kind!r}" for kind in KINDS if kind not in bangla.KINDS)
    problems.extend(f"missing Bangla state {state!r}" for state in STATES if state not in bangla.STATES)
    problems.extend(f"missing Bangla label {label!r}" for label in FIELD_LABELS if label not in bangla.FIELD_LABELS)
    if problems:
        raise CatalogIntegrityError(problems)
