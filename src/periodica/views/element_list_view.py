from __future__ import annotations

import qtawesome as qta
from PySide6 import QtCore, QtWidgets

from periodica.chem.search import search_elements
from periodica.content.element_details import present_card
from periodica.localization.translate import ui_text
from periodica.settings import Preferences
from periodica.widgets import ElementCardWidget


class ElementListView(QtWidgets.QWidget):
    element_activated = QtCore.Signal(int)
    dark_mode_toggled = QtCore.Signal(bool)
    language_toggled = QtCore.Signal(bool)

    def __init__(self, preferences: Preferences, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._preferences = preferences
        self._tokens: dict = {}

        self.theme_button = QtWidgets.QToolButton()
        self.theme_button.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.theme_button.setToolTip("Theme Toggle")
        self.theme_button.clicked.connect(self._toggle_theme)

        self.language_button = QtWidgets.QToolButton()
        self.language_button.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.language_button.setToolTip("Language Toggle")
        self.language_button.clicked.connect(self._toggle_language)

        toggles = QtWidgets.QHBoxLayout()
        toggles.setContentsMargins(8, 16, 8, 16)
        toggles.addWidget(self.theme_button)
        toggles.addStretch()
        toggles.addWidget(self.language_button)

        self.search_edit = QtWidgets.QLineEdit()
        self.search_edit.setClearButtonEnabled(True)
        self._search_action = self.search_edit.addAction(
            qta.icon("fa5s.search"), QtWidgets.QLineEdit.ActionPosition.LeadingPosition
        )
        self.search_edit.textChanged.connect(self._refresh_list)

        self.list_widget = QtWidgets.QListWidget()
        self.list_widget.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.NoSelection)
        self.list_widget.setVerticalScrollMode(QtWidgets.QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        self.list_widget.itemActivated.connect(self._on_item_clicked)

        self.empty_label = QtWidgets.QLabel()
        self.empty_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setProperty("role", "muted")
        self.empty_label.setVisible(False)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(16, 0, 16, 0)
        layout.addLayout(toggles)
        layout.addWidget(self.search_edit)
        layout.addSpacing(8)
        layout.addWidget(self.empty_label)
        layout.addWidget(self.list_widget, 1)

        self._refresh_chrome()
        self._refresh_list()

    @property
    def query(self) -> str:
        return self.search_edit.text()

    def set_preferences(self, preferences: Preferences) -> None:
        locale_changed = preferences.locale != self._preferences.locale
        self._preferences = preferences
        self._refresh_chrome()
        if locale_changed:
            self._refresh_list()

    def apply_theme(self, tokens: dict) -> None:
        self._tokens = tokens
        self._refresh_chrome()
        for row in range(self.list_widget.count()):
            widget = self.list_widget.itemWidget(self.list_widget.item(row))
            if isinstance(widget, ElementCardWidget):
                widget.apply_theme(tokens)

    def _icon_color(self) -> str:
        return self._tokens.get("colors", {}).get("text", "#000000")

    def _refresh_chrome(self) -> None:
        locale = self._preferences.locale
        color = self._icon_color()
        if self._preferences.dark_mode:
            self.theme_button.setIcon(qta.icon("fa5s.sun", color=color))
            self.theme_button.setText(ui_text("theme_light", locale))
        else:
            self.theme_button.setIcon(qta.icon("fa5s.moon", color=color))
            self.theme_button.setText(ui_text("theme_dark", locale))
        self.language_button.setIcon(qta.icon("fa5s.language", color=color))
        self.language_button.setText(ui_text("language_toggle", locale))
        self.search_edit.setPlaceholderText(ui_text("search_placeholder", locale))
        self._search_action.setIcon(qta.icon("fa5s.search", color=color))
        self.empty_label.setText(ui_text("no_results", locale))

    def _refresh_list(self) -> None:
        locale = self._preferences.locale
        elements = search_elements(self.query, locale)
        self.list_widget.clear()
        for element in elements:
            card = ElementCardWidget(present_card(element, locale), element.atomic_number)
            if self._tokens:
                card.apply_theme(self._tokens)
            item = QtWidgets.QListWidgetItem()
            item.setData(QtCore.Qt.ItemDataRole.UserRole, element.atomic_number)
            item.setSizeHint(card.sizeHint())
            self.list_widget.addItem(item)
            self.list_widget.setItemWidget(item, card)
        self.empty_label.setVisible(not elements)

    def _on_item_clicked(self, item: QtWidgets.QListWidgetItem) -> None:
        atomic_number = item.data(QtCore.Qt.ItemDataRole.UserRole)
        if atomic_number:
            self.element_activated.emit(int(atomic_number))

    def _toggle_theme(self) -> None:
        self.dark_mode_toggled.emit(not self._preferences.dark_mode)

    def _toggle_language(self) -> None:
        self.language_toggled.emit(not self._preferences.use_english)
