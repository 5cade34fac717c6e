"""Default classes and props for NiceGUI elements used by the dashboard app."""

from __future__ import annotations

from nicegui import ui

from logindash.utils.logging import get_logger

logger = get_logger(__name__)

# tailwind text size -> quasar size
TEXT_SIZE_QUASAR = {
    "text-xs": "xs",
    "text-sm": "sm",
    "text-base": "md",
    "text-lg": "lg",
}


def setUpGuiDefaults(text_size: str = "text-base") -> None:
    """Set up default classes and props for the ui elements the dashboard uses.

    Args:
        text_size: Tailwind CSS text size class ('text-xs', 'text-sm',
                   'text-base', 'text-lg').

    Raises:
        ValueError: For any other text size.
    """
    if text_size not in TEXT_SIZE_QUASAR:
        raise ValueError(f"Unsupported text_size {text_size!r}; expected one of {sorted(TEXT_SIZE_QUASAR)}")
    text_size_quasar = TEXT_SIZE_QUASAR[text_size]

    logger.debug(f'using classes text_size:"{text_size}" text_size_quasar:{text_size_quasar}')

    ui.label.default_classes(f"{text_size} select-text")
    ui.button.default_classes(text_size)
    ui.button.default_props("dense")
    ui.table.default_classes(text_size)
    ui.table.default_props("dense flat")
