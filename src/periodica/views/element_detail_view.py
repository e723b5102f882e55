from __future__ import annotations

import qtawesome as qta
from PySide6 import QtCore, QtWidgets

from periodica.chem.elements import Element
from periodica.content.element_details import present_detail, present_header
from periodica.localization.translate import Locale, ui_text
from periodica.widgets import DetailRowWidget, ElementTileWidget


class ElementDetailView(QtWidgets.QWidget):
    back_requested = QtCore.Signal()

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._element: Element | None = None
        self._locale = Locale.ENGLISH
        self._tokens: dict = {}

        self.back_button = QtWidgets.QToolButton()
        self.back_button.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.back_button.clicked.connect(self.back_requested.emit)

        self.tile = ElementTileWidget(size=96)
        self.name_label = QtWidgets.QLabel()
        self.name_label.setProperty("role", "title")
        self.name_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.config_label = QtWidgets.QLabel()
        self.config_label.setProperty("role", "muted")
        self.config_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.config_label.setWordWrap(True)

        self.rows_container = QtWidgets.QWidget()
        self.rows_layout = QtWidgets.QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(10)

        header = QtWidgets.QHBoxLayout()
        header.addWidget(self.back_button)
        header.addStretch()

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 16)
        layout.addLayout(header)
        layout.addSpacing(24)
        layout.addWidget(self.tile, 0, QtCore.Qt.AlignmentFlag.AlignHCenter)
        layout.addSpacing(24)
        layout.addWidget(self.name_label)
        layout.addSpacing(4)
        layout.addWidget(self.config_label)
        layout.addSpacing(32)
        layout.addWidget(self.rows_container)
        layout.addStretch()

        self._refresh_chrome()

    @property
    def element(self) -> Element | None:
        return self._element

    def show_element(self, element: Element | None, locale: Locale) -> None:
        self._element = element
        self._locale = Locale(locale)
        self._refresh_chrome()
        self._render()

    def set_locale(self, locale: Locale) -> None:
        self.show_element(self._element, locale)

    def apply_theme(self, tokens: dict) -> None:
        self._tokens = tokens
        self.tile.set_theme(tokens)
        self._refresh_chrome()

    def _refresh_chrome(self) -> None:
        color = self._tokens.get("colors", {}).get("text", "#000000")
        self.back_button.setIcon(qta.icon("fa5s.arrow-left", color=color))
        self.back_button.setText(ui_text("back", self._locale))

    def _clear_rows(self) -> None:
        while self.rows_layout.count():
            item = self.rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    def _render(self) -> None:
        self._clear_rows()
        element = self._element
        if element is None:
            self.tile.set_element("", "")
            self.name_label.clear()
            self.config_label.clear()
            return
        header = present_header(element, self._locale)
        self.tile.set_element(header.symbol, header.number)
        self.name_label.setText(header.name)
        self.config_label.setText(header.electron_configuration)
        for row in present_detail(element, self._locale):
            self.rows_layout.addWidget(DetailRowWidget(row))
