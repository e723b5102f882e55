from __future__ import annotations

import platform

LIGHT = "Light"
DARK = "Dark"


def _default_font_family() -> str:
    if platform.system().lower().startswith("win"):
        return "Segoe UI"
    if platform.system().lower().startswith("darwin"):
        return "San Francisco"
    # Noto Sans carries the Bengali glyphs on most Linux desktops
    return "Noto Sans"


THEME_TOKENS: dict[str, dict] = {
    LIGHT: {
        "meta": {"name": LIGHT, "mode": "light"},
        "colors": {
            "bg": "#ffffff",
            "surface": "#ffffff",
            "surfaceAlt": "#f1f5f9",
            "text": "#000000",
            "textMuted": "#6b7280",
            "border": "#d1d5db",
            "accent": "#2563eb",
            "focusRing": "#0ea5e9",
            "tile": "#ffffff",
        },
        "radii": {"md": 12},
        "spacing": {"xs": 4, "sm": 8, "md": 12, "lg": 16},
        "font": {"family": _default_font_family(), "baseSize": 11, "titleSize": 20, "symbolSize": 32},
    },
    DARK: {
        "meta": {"name": DARK, "mode": "dark"},
        "colors": {
            "bg": "#000000",
            "surface": "#121212",
            "surfaceAlt": "#1f1f1f",
            "text": "#ffffff",
            "textMuted": "#d1d5db",
            "border": "#3f3f46",
            "accent": "#60a5fa",
            "focusRing": "#fbbf24",
            "tile": "#2b2b2b",
        },
        "radii": {"md": 12},
        "spacing": {"xs": 4, "sm": 8, "md": 12, "lg": 16},
        "font": {"family": _default_font_family(), "baseSize": 11, "titleSize": 20, "symbolSize": 32},
    },
}


def theme_name_for(dark_mode: bool) -> str:
    return DARK if dark_mode else LIGHT


def get_theme_tokens(name: str) -> dict:
    return THEME_TOKENS.get(name, THEME_TOKENS[LIGHT])
