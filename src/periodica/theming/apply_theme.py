from __future__ import annotations

from PySide6 import QtGui, QtWidgets


def _relative_luminance(color: QtGui.QColor) -> float:
    def channel(value: float) -> float:
        value /= 255.0
        return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4

    return (
        0.2126 * channel(color.red())
        + 0.7152 * channel(color.green())
        + 0.0722 * channel(color.blue())
    )


def build_palette(tokens: dict) -> QtGui.QPalette:
    colors = tokens["colors"]
    palette = QtGui.QPalette()
    palette.setColor(QtGui.QPalette.ColorRole.Window, QtGui.QColor(colors["bg"]))
    palette.setColor(QtGui.QPalette.ColorRole.Base, QtGui.QColor(colors["surface"]))
    palette.setColor(QtGui.QPalette.ColorRole.AlternateBase, QtGui.QColor(colors["surfaceAlt"]))
    palette.setColor(QtGui.QPalette.ColorRole.WindowText, QtGui.QColor(colors["text"]))
    palette.setColor(QtGui.QPalette.ColorRole.Text, QtGui.QColor(colors["text"]))
    palette.setColor(QtGui.QPalette.ColorRole.PlaceholderText, QtGui.QColor(colors["textMuted"]))
    palette.setColor(QtGui.QPalette.ColorRole.Button, QtGui.QColor(colors["surface"]))
    palette.setColor(QtGui.QPalette.ColorRole.ButtonText, QtGui.QColor(colors["text"]))
    highlight = QtGui.QColor(colors["accent"])
    palette.setColor(QtGui.QPalette.ColorRole.Highlight, highlight)
    highlight_text = QtGui.QColor("#0f172a") if _relative_luminance(highlight) > 0.5 else QtGui.QColor("#f8fafc")
    palette.setColor(QtGui.QPalette.ColorRole.HighlightedText, highlight_text)
    palette.setColor(QtGui.QPalette.ColorRole.ToolTipBase, QtGui.QColor(colors["surface"]))
    palette.setColor(QtGui.QPalette.ColorRole.ToolTipText, QtGui.QColor(colors["text"]))
    return palette


def build_stylesheet(tokens: dict) -> str:
    colors = tokens["colors"]
    radii = tokens["radii"]
    spacing = tokens["spacing"]
    font = tokens["font"]
    return f"""
    * {{
        font-family: "{font["family"]}";
        font-size: {font["baseSize"]}pt;
    }}
    QMainWindow, QStackedWidget {{
        background-color: {colors["bg"]};
    }}
    QWidget {{
        color: {colors["text"]};
    }}
    QToolButton {{
        background: transparent;
        border: none;
        padding: {spacing["xs"]}px {spacing["sm"]}px;
    }}
    QToolButton:hover {{
        color: {colors["accent"]};
    }}
    QLineEdit {{
        background: {colors["surfaceAlt"]};
        border: 1px solid {colors["border"]};
        border-radius: {radii["md"]}px;
        padding: {spacing["sm"]}px {spacing["md"]}px;
        min-height: 28px;
    }}
    QLineEdit:focus {{
        border: 1px solid {colors["focusRing"]};
    }}
    QListWidget {{
        background: {colors["bg"]};
        border: none;
        outline: none;
    }}
    QListWidget::item {{
        background: {colors["surfaceAlt"]};
        border: 1px solid {colors["border"]};
        border-radius: {radii["md"]}px;
        margin: {spacing["xs"]}px 0px;
    }}
    QListWidget::item:hover {{
        border-color: {colors["accent"]};
    }}
    QLabel[role="muted"] {{
        color: {colors["textMuted"]};
    }}
    QLabel[role="title"] {{
        font-size: {font["titleSize"]}pt;
        font-weight: 600;
    }}
    QToolTip {{
        background: {colors["surface"]};
        color: {colors["text"]};
        border: 1px solid {colors["border"]};
        padding: {spacing["xs"]}px;
    }}
    """


def apply_theme(app: QtWidgets.QApplication, tokens: dict) -> None:
    app.setPalette(build_palette(tokens))
    app.setStyleSheet(build_stylesheet(tokens))
