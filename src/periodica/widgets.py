from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from periodica.content.element_details import DetailRow, ElementCard


class ElementTileWidget(QtWidgets.QWidget):
    """Rounded symbol box with the atomic number in the top-left corner."""

    def __init__(self, size: int = 96, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._symbol = ""
        self._number = ""
        self._base_color = QtGui.QColor("#ffffff")
        self._text_color = QtGui.QColor("#000000")
        self._border_color = QtGui.QColor("#d1d5db")
        self._symbol_point_size = 32
        self.setFixedSize(size, size)

    def set_theme(self, tokens: dict) -> None:
        colors = tokens.get("colors", {})
        self._base_color = QtGui.QColor(colors.get("tile", "#ffffff"))
        self._text_color = QtGui.QColor(colors.get("text", "#000000"))
        self._border_color = QtGui.QColor(colors.get("border", "#d1d5db"))
        self._symbol_point_size = int(tokens.get("font", {}).get("symbolSize", 32))
        self.update()

    def set_element(self, symbol: str, number: str) -> None:
        self._symbol = symbol
        self._number = number
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        rect = self.rect().adjusted(2, 2, -2, -2)
        radius = max(rect.width() // 4, 6)

        painter.setPen(QtGui.QPen(self._border_color, 1))
        painter.setBrush(QtGui.QBrush(self._base_color))
        painter.drawRoundedRect(rect, radius, radius)

        # symbol scales down with the tile so small list tiles stay legible
        scale = rect.width() / 96
        font = painter.font()
        font.setBold(True)
        font.setPointSize(max(int(self._symbol_point_size * scale), 10))
        painter.setFont(font)
        painter.setPen(QtGui.QPen(self._text_color))
        painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, self._symbol)

        if self._number:
            small_font = painter.font()
            small_font.setBold(False)
            small_font.setPointSize(max(int(11 * scale), 7))
            painter.setFont(small_font)
            inset = max(int(12 * scale), 4)
            painter.drawText(
                rect.adjusted(inset, inset // 2, -inset, -inset),
                QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignLeft,
                self._number,
            )
        painter.end()


class ElementCardWidget(QtWidgets.QWidget):
    def __init__(self, card: ElementCard, atomic_number: int, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.atomic_number = atomic_number
        self.tile = ElementTileWidget(size=56)
        self.tile.set_element(card.symbol, card.number)
        self.name_label = QtWidgets.QLabel(card.name)
        self.name_label.setProperty("role", "title")
        self.kind_label = QtWidgets.QLabel(card.kind)
        self.kind_label.setProperty("role", "muted")

        text_col = QtWidgets.QVBoxLayout()
        text_col.setSpacing(2)
        text_col.addWidget(self.name_label)
        text_col.addWidget(self.kind_label)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.addWidget(self.tile, 0)
        layout.addSpacing(12)
        layout.addLayout(text_col, 1)

    def apply_theme(self, tokens: dict) -> None:
        self.tile.set_theme(tokens)


class DetailRowWidget(QtWidgets.QWidget):
    def __init__(self, row: DetailRow, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.label = QtWidgets.QLabel(row.label)
        self.label.setProperty("role", "muted")
        self.value = QtWidgets.QLabel(row.value)
        self.value.setProperty("role", "muted")
        self.value.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight | QtCore.Qt.AlignmentFlag.AlignVCenter)
        self.value.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.addWidget(self.label)
        layout.addStretch()
        layout.addWidget(self.value)
