from __future__ import annotations

from collections.abc import Iterable

from periodica.chem.elements import Element, all_elements
from periodica.localization.translate import Locale, localized_name


def _haystacks(element: Element, locale: Locale) -> tuple[str, str]:
    if Locale(locale).is_primary:
        return element.name, element.symbol
    return localized_name(element.atomic_number, locale), element.symbol


def matches(element: Element, query: str, locale: Locale = Locale.ENGLISH) -> bool:
    needle = query.casefold()
    return any(needle in text.casefold() for text in _haystacks(element, locale))


def search_elements(
    query: str,
    locale: Locale = Locale.ENGLISH,
    catalog: Iterable[Element] | None = None,
) -> list[Element]:
    """Filter the catalog by a case-insensitive substring of the name or symbol.

    In English the canonical name is searched, in Bangla the localized name;
    the symbol is searched in both. Catalog order is kept and an empty query
    returns every element; whitespace is matched literally.
    """
    elements = all_elements() if catalog is None else catalog
    query = query or ""
    if not query:
        return list(elements)
    return [element for element in elements if matches(element, query, locale)]
