from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from periodica.chem.elements import get_element
from periodica.navigation import detail_route, parse_route
from periodica.settings import PreferenceStore, Preferences, QSettingsPreferenceStore
from periodica.theming.apply_theme import apply_theme as apply_theme_tokens
from periodica.theming.theme_manager import get_theme_manager
from periodica.views.element_detail_view import ElementDetailView
from periodica.views.element_list_view import ElementListView

logger = logging.getLogger(__name__)


class PeriodicaMainWindow(QtWidgets.QMainWindow):
    def __init__(self, store: PreferenceStore | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Periodic Table")
        self.setMinimumSize(420, 720)
        self._store: PreferenceStore = store or QSettingsPreferenceStore()
        self._preferences: Preferences = self._store.load()
        self._theme_manager = get_theme_manager()
        self._theme_manager.theme_changed.connect(self._on_theme_changed)

        self.list_view = ElementListView(self._preferences)
        self.list_view.element_activated.connect(lambda z: self.open_route(detail_route(z)))
        self.list_view.dark_mode_toggled.connect(self.set_dark_mode)
        self.list_view.language_toggled.connect(self.set_use_english)

        self.detail_view = ElementDetailView()
        self.detail_view.back_requested.connect(self.show_list)

        self.stack = QtWidgets.QStackedWidget()
        self.stack.addWidget(self.list_view)
        self.stack.addWidget(self.detail_view)
        self.setCentralWidget(self.stack)

        back = QtGui.QAction(self)
        back.setShortcuts([QtGui.QKeySequence(QtCore.Qt.Key.Key_Escape), QtGui.QKeySequence.StandardKey.Back])
        back.triggered.connect(self.show_list)
        self.addAction(back)

        self._theme_manager.set_dark_mode(self._preferences.dark_mode)

    def open_route(self, route: str) -> None:
        parsed = parse_route(route)
        if not parsed.is_detail:
            self.show_list()
            return
        element = get_element(parsed.atomic_number) if parsed.atomic_number is not None else None
        if element is None:
            # nothing to show for an unknown element
            self.show_list()
            return
        self.detail_view.show_element(element, self._preferences.locale)
        self.stack.setCurrentWidget(self.detail_view)

    def show_list(self) -> None:
        self.stack.setCurrentWidget(self.list_view)

    def set_dark_mode(self, dark_mode: bool) -> None:
        self._update_preferences(self._preferences.with_dark_mode(dark_mode))
        self._theme_manager.set_dark_mode(dark_mode)

    def set_use_english(self, use_english: bool) -> None:
        self._update_preferences(self._preferences.with_use_english(use_english))
        self.detail_view.set_locale(self._preferences.locale)

    def _update_preferences(self, preferences: Preferences) -> None:
        self._preferences = preferences
        self._store.save(preferences)
        self.list_view.set_preferences(preferences)

    def _on_theme_changed(self, tokens: dict) -> None:
        app = QtWidgets.QApplication.instance()
        if app:
            apply_theme_tokens(app, tokens)
        self.list_view.apply_theme(tokens)
        self.detail_view.apply_theme(tokens)
