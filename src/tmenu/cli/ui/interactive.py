"""Interactive menu sessions."""

from typing import Callable, Optional

from tmenu.cli.ui.base import MenuBackend
from tmenu.cli.ui.render import MenuTheme, TerminalRenderer
from tmenu.core.model import MenuDefinition, SessionResult
from tmenu.core.runner import Executor, Runner
from tmenu.utils.config import Config


class RichMenu:
    """Default backend: rich panel redrawn on every readchar keypress."""

    def __init__(
        self,
        renderer: Optional[TerminalRenderer] = None,
        read_key: Optional[Callable[[], str]] = None,
        cycle: bool = True,
        executor: Optional[Executor] = None,
    ):
        self.renderer = renderer or TerminalRenderer()
        self.read_key = read_key
        self.cycle = cycle
        self.executor = executor

    def run(self, definition: MenuDefinition) -> SessionResult:
        read_key = self.read_key
        if read_key is None:
            import readchar

            read_key = readchar.readkey

        runner = Runner(
            definition,
            renderer=self.renderer,
            read_key=read_key,
            cycle=self.cycle,
            executor=self.executor,
        )
        return runner.run()


def create_backend(
    config: Config,
    simple: bool = False,
    executor: Optional[Executor] = None,
) -> MenuBackend:
    """Pick the menu backend for this session."""
    if simple:
        from tmenu.cli.ui.menu import SimpleTerminalMenu

        return SimpleTerminalMenu(
            cycle=config.cycle_cursor,
            executor=executor,
            submenu_marker=config.submenu_marker,
        )
    renderer = TerminalRenderer(theme=MenuTheme.from_config(config))
    return RichMenu(renderer=renderer, cycle=config.cycle_cursor, executor=executor)
