"""Theme utilities for dashboard charts."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

# Slice/bar colors, cycled when there are more categories than colors.
PALETTE: tuple[str, ...] = ("#6366f1", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6", "#06b6d4")


class ThemeMode(str, Enum):
    """UI theme mode shared by the widget and the figure builders."""

    DARK = "dark"
    LIGHT = "light"


def resolve_theme(theme: Optional[Union[str, ThemeMode]]) -> ThemeMode:
    """Convert str (or None) to ThemeMode. Anything but "dark"/"plotly_dark" is LIGHT."""
    if isinstance(theme, ThemeMode):
        return theme
    if theme is None:
        return ThemeMode.LIGHT
    if str(theme).lower() in ("dark", "plotly_dark"):
        return ThemeMode.DARK
    return ThemeMode.LIGHT


def get_theme_colors(theme: ThemeMode) -> tuple[str, str]:
    """Get background and foreground colors for a theme."""
    if theme is ThemeMode.DARK:
        return "#000000", "#ffffff"
    return "#ffffff", "#000000"


def get_theme_template(theme: ThemeMode) -> str:
    """Get Plotly template name for a theme."""
    if theme is ThemeMode.DARK:
        return "plotly_dark"
    return "plotly_white"


def palette_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]
