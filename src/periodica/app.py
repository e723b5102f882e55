from __future__ import annotations

import logging
import os
import sys

from PySide6 import QtWidgets

from periodica.chem.elements import all_elements
from periodica.views.main_window import PeriodicaMainWindow


def _configure_logging() -> None:
    level_name = os.environ.get("PERIODICA_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main() -> None:
    _configure_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("Periodica")
    app.setOrganizationName("Periodica")
    app.setStyle("Fusion")
    all_elements()
    window = PeriodicaMainWindow()
    # optional deep link, e.g. `periodica elementDetail/26`
    routes = [arg for arg in app.arguments()[1:] if not arg.startswith("-")]
    if routes:
        window.open_route(routes[0])
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
