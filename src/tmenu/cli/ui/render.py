"""Rich renderer for menu sessions."""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich import box
from rich.align import Align
from rich.cells import cell_len
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from tmenu.cli.ui.panels import (
    calculate_visible_range,
    clear_screen,
    console,
    enter_terminal,
    format_scroll_indicator,
    leave_terminal,
    reset_cursor,
    terminal_session,
)
from tmenu.core.keys import LEGEND
from tmenu.core.model import MenuModel
from tmenu.utils.config import Config
from tmenu.utils.constants import (
    DEFAULT_BORDER_STYLE,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_HIGHLIGHT_SYMBOL,
    DEFAULT_SUBMENU_BORDER_STYLE,
    DEFAULT_SUBMENU_MARKER,
    PANEL_H_PADDING,
    PANEL_V_PADDING,
)


class MenuTheme:
    """Colours and glyphs used to draw the menu."""

    def __init__(
        self,
        border_style: str = DEFAULT_BORDER_STYLE,
        submenu_border_style: str = DEFAULT_SUBMENU_BORDER_STYLE,
        highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
        highlight_symbol: str = DEFAULT_HIGHLIGHT_SYMBOL,
        submenu_marker: str = DEFAULT_SUBMENU_MARKER,
    ):
        self.border_style = border_style
        self.submenu_border_style = submenu_border_style
        self.highlight_style = highlight_style
        self.highlight_symbol = highlight_symbol
        self.submenu_marker = submenu_marker

    @classmethod
    def from_config(cls, config: Config) -> "MenuTheme":
        return cls(
            border_style=config.border_style,
            submenu_border_style=config.submenu_border_style,
            highlight_style=config.highlight_style,
            highlight_symbol=config.highlight_symbol,
            submenu_marker=config.submenu_marker,
        )


def menu_width(model: MenuModel, theme: MenuTheme) -> int:
    """Panel width that fits the widest label, the title and the legend."""
    marker = cell_len(theme.submenu_marker)
    widest = max(
        cell_len(entry.label) + (marker if entry.is_submenu else 0)
        for entry in model.entries
    )
    widest = max(widest, cell_len(model.title))
    return max(widest + PANEL_H_PADDING, cell_len(LEGEND) + 4)


def build_menu_panel(
    model: MenuModel,
    theme: MenuTheme,
    max_width: int,
    max_height: int,
    scroll_offset: int = 0,
) -> tuple[Panel, int]:
    """Build the panel for the displayed level.

    Args:
        model: Menu state to draw
        theme: Colours and glyphs
        max_width: Terminal width
        max_height: Terminal height
        scroll_offset: Scroll offset from the previous frame

    Returns:
        Tuple of (panel, new_scroll_offset)
    """
    entries = model.entries
    cursor = model.cursor_index
    symbol = theme.highlight_symbol
    blank = " " * cell_len(symbol)

    max_visible = max(1, max_height - PANEL_V_PADDING)
    if len(entries) > max_visible:
        # Leave room for the scroll indicators
        max_visible = max(1, max_visible - 2)
    start, end, scroll_offset = calculate_visible_range(
        cursor, len(entries), max_visible, scroll_offset
    )
    scrolling = end - start < len(entries)

    lines = []
    top_ind, bottom_ind = format_scroll_indicator(start, len(entries) - end)
    if scrolling:
        lines.append(Text(f"{blank}{top_ind}", style="dim"))

    for i in range(start, end):
        entry = entries[i]
        label = entry.label
        if entry.is_submenu:
            label += theme.submenu_marker
        if i == cursor:
            lines.append(Text(f"{symbol}{label}", style=theme.highlight_style))
        else:
            lines.append(Text(f"{blank}{label}"))

    if scrolling:
        lines.append(Text(f"{blank}{bottom_ind}", style="dim"))

    border_style = theme.border_style if model.is_root else theme.submenu_border_style
    panel = Panel(
        Group(*lines),
        title=Text(model.title),
        title_align="center",
        subtitle=Text(LEGEND),
        subtitle_align="right",
        box=box.ROUNDED,
        border_style=border_style,
        padding=(1, 0),
        width=min(menu_width(model, theme), max_width),
    )
    return panel, scroll_offset


class TerminalRenderer:
    """Draw menu levels centered on the terminal with rich."""

    def __init__(
        self,
        target: Optional[Console] = None,
        theme: Optional[MenuTheme] = None,
        alt_screen: bool = True,
    ):
        self.console = target or console
        self.theme = theme or MenuTheme()
        self.alt_screen = alt_screen
        self._shape = None
        self._scroll_offset = 0

    def session(self):
        self._shape = None
        return terminal_session(self.console, alt_screen=self.alt_screen)

    @contextmanager
    def suspend(self) -> Iterator[None]:
        """Leave the menu screen while a command runs, then come back."""
        leave_terminal(self.console, self.alt_screen)
        try:
            yield
        finally:
            enter_terminal(self.console, self.alt_screen)
            # Force a full redraw
            self._shape = None

    def draw(self, model: MenuModel) -> None:
        width, height = self.console.size
        shape = (tuple(model.breadcrumb), model.depth, width, height)
        if shape != self._shape:
            self._scroll_offset = 0

        # The trailing newline of print() takes the last row
        frame_height = max(1, height - 1)
        panel, self._scroll_offset = build_menu_panel(
            model, self.theme, width, frame_height, self._scroll_offset
        )

        if shape != self._shape:
            clear_screen(self.console)
            self._shape = shape
        else:
            reset_cursor(self.console)
        self.console.print(
            Align.center(panel, vertical="middle", height=frame_height)
        )
