"""Header component for the login dashboard app.

Provides build_dashboard_header() with title, subtitle and theme toggle.
"""

from __future__ import annotations

from typing import Callable, Optional

from nicegui import ui


def build_dashboard_header(
    *,
    title: str = "Login Dashboard",
    subtitle: str = "Employee login monitoring",
    on_theme_change: Optional[Callable[[bool], None]] = None,
) -> ui.dark_mode:
    """Build header with title on the left and a dark/light toggle on the right.

    Args:
        title: Header title.
        subtitle: Smaller text next to the title.
        on_theme_change: Called with the new dark-mode value after a toggle.

    Returns:
        Dark mode controller for the page.
    """
    dark_mode = ui.dark_mode(False)

    def _update_theme_icon() -> None:
        icon = "light_mode" if dark_mode.value else "dark_mode"
        theme_btn.props(f"icon={icon}")

    def _toggle_theme() -> None:
        dark_mode.value = not dark_mode.value
        _update_theme_icon()
        if on_theme_change is not None:
            on_theme_change(bool(dark_mode.value))

    with ui.header().classes("items-center justify-between").props("dense").style(
        "min-height: 36px; height: 36px; padding: 0 8px;"
    ):
        with ui.row().classes("items-center gap-2"):
            ui.label(title).classes("!text-lg font-bold text-white")
            ui.label(subtitle).classes("text-xs text-white opacity-80")

        theme_btn = ui.button(
            icon="dark_mode",
            on_click=_toggle_theme,
        ).props("flat round dense text-color=white").tooltip("Toggle dark / light mode")
        _update_theme_icon()

    return dark_mode
