from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from periodica.chem.elements import all_elements
from periodica.errors import CatalogIntegrityError
from periodica.localization.translate import validate_translations


def check_catalog() -> int:
    try:
        elements = all_elements()
        validate_translations()
    except CatalogIntegrityError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Catalog OK: {len(elements)} elements, translations complete.")
    return 0


if __name__ == "__main__":
    sys.exit(check_catalog())
