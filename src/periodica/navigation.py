from __future__ import annotations

import logging
from typing import NamedTuple

from periodica.chem.elements import parse_atomic_number

logger = logging.getLogger(__name__)

LIST_ROUTE = "chemicalElements"
DETAIL_ROUTE = "elementDetail"


class Route(NamedTuple):
    name: str
    atomic_number: int | None = None

    @property
    def is_detail(self) -> bool:
        return self.name == DETAIL_ROUTE


def detail_route(atomic_number: int) -> str:
    return f"{DETAIL_ROUTE}/{atomic_number}"


def parse_route(route: str | None) -> Route:
    """Split ``"elementDetail/26"`` style routes.

    Unknown routes fall back to the list. A detail route whose parameter is
    missing, non-numeric or outside the catalog keeps ``atomic_number=None``
    so the caller can show nothing for it.
    """
    text = (route or "").strip().strip("/")
    if not text or text == LIST_ROUTE:
        return Route(LIST_ROUTE)
    name, _, param = text.partition("/")
    if name != DETAIL_ROUTE:
        logger.debug("Unknown route %r, showing the element list", route)
        return Route(LIST_ROUTE)
    atomic_number = parse_atomic_number(param)
    if atomic_number is None:
        logger.debug("Detail route %r does not name a catalog element", route)
    return Route(DETAIL_ROUTE, atomic_number)
