"""UI components for interactive menus."""

from tmenu.cli.ui.base import MenuBackend
from tmenu.cli.ui.panels import (
    calculate_visible_range,
    clear_screen,
    console,
    format_scroll_indicator,
    interrupt_on_signals,
    terminal_session,
)
from tmenu.cli.ui.render import MenuTheme, TerminalRenderer

__all__ = [
    "MenuBackend",
    "MenuTheme",
    "TerminalRenderer",
    "calculate_visible_range",
    "clear_screen",
    "console",
    "format_scroll_indicator",
    "interrupt_on_signals",
    "terminal_session",
]
