"""Terminal menu backend using simple-term-menu."""

from typing import Optional

from simple_term_menu import TerminalMenu

from tmenu.cli.ui.panels import interrupt_on_signals
from tmenu.core.model import MenuDefinition, MenuModel, SessionResult
from tmenu.core.runner import Executor
from tmenu.utils.debug import debug_session, log_error
from tmenu.utils.exceptions import CommandExecutionError


def _escape(label: str) -> str:
    # "|" separates preview data in simple-term-menu entries
    return label.replace("|", "\\|")


class SimpleTerminalMenu:
    """Menu backend built on simple-term-menu.

    Drives the same MenuModel as the rich renderer: Esc/q in a submenu goes
    back one level, at the root it cancels.
    """

    def __init__(
        self,
        cycle: bool = True,
        executor: Optional[Executor] = None,
        submenu_marker: str = " ›",
    ):
        self.cycle = cycle
        self.executor = executor
        self.submenu_marker = submenu_marker

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> Optional[int]:
        """Show selection menu.

        Args:
            options: List of option strings
            title: Optional title shown above menu
            cursor_index: Starting cursor position

        Returns:
            Selected index or None if cancelled (q/Esc)

        Raises:
            KeyboardInterrupt: On Ctrl+C
        """
        if not options:
            return None

        menu = TerminalMenu(
            [_escape(option) for option in options],
            title=title if title else None,
            cursor_index=cursor_index,
            menu_cursor="➔ ",
            menu_cursor_style=("fg_yellow", "bold"),
            menu_highlight_style=("fg_yellow", "bold"),
            cycle_cursor=self.cycle,
            clear_screen=True,
            raise_error_on_interrupt=True,
        )
        return menu.show()

    def run(self, definition: MenuDefinition) -> SessionResult:
        """Run a full session over `definition`."""
        model = MenuModel(definition, cycle=self.cycle)
        debug_session("simple session start", title=model.title)
        try:
            with interrupt_on_signals():
                return self._loop(model)
        except KeyboardInterrupt:
            model.cancel()
            return SessionResult.interrupted()

    def _loop(self, model: MenuModel) -> SessionResult:
        while True:
            options = [
                entry.label + (self.submenu_marker if entry.is_submenu else "")
                for entry in model.entries
            ]
            choice = self.select(
                options,
                title=" › ".join(model.breadcrumb),
                cursor_index=model.cursor_index,
            )
            if choice is None:
                if model.back():
                    continue
                model.cancel()
                return SessionResult.cancelled()

            model.select(choice)
            entry = model.current_entry()
            if model.enter_submenu():
                continue
            if entry.is_exit:
                model.cancel()
                return SessionResult.cancelled()
            if self.executor is not None:
                try:
                    self.executor(entry)
                except CommandExecutionError as e:
                    log_error("exec", str(e))
                continue
            return SessionResult.confirmed(model.confirm())
