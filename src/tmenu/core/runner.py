"""Menu session main loop.

The runner wires the model, a renderer and a key reader into a
render-then-wait cycle:

    IDLE -> RENDERING -> WAITING_FOR_INPUT -> (RENDERING | CONFIRMED | CANCELLED)

It never touches the terminal directly; renderers own it.
"""

from contextlib import AbstractContextManager
from enum import Enum
from typing import Callable, Optional, Protocol

from tmenu.core.keys import KeyIntent, is_escape, resolve_key
from tmenu.core.model import MenuDefinition, MenuEntry, MenuModel, SessionResult
from tmenu.utils.debug import debug_key, debug_session, log_error
from tmenu.utils.exceptions import CommandExecutionError


class RunnerState(Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    WAITING_FOR_INPUT = "waiting_for_input"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Renderer(Protocol):
    """Protocol for terminal renderers.

    Allows swapping the drawing backend (and faking it in tests).
    """

    def session(self) -> AbstractContextManager:
        """Acquire the terminal for the whole session, restore it on exit."""
        ...

    def suspend(self) -> AbstractContextManager:
        """Hand the terminal back temporarily (e.g. to run a command)."""
        ...

    def draw(self, model: MenuModel) -> None:
        """Draw the current menu level."""
        ...


# Executes an entry's action in exec mode
Executor = Callable[[MenuEntry], None]


class Runner:
    """Run one interactive menu session."""

    def __init__(
        self,
        definition: MenuDefinition,
        renderer: Renderer,
        read_key: Callable[[], str],
        cycle: bool = True,
        executor: Optional[Executor] = None,
    ):
        self.model = MenuModel(definition, cycle=cycle)
        self.renderer = renderer
        self.read_key = read_key
        self.executor = executor
        self.state = RunnerState.IDLE

    def run(self) -> SessionResult:
        """Loop until the user confirms or cancels.

        Returns:
            SessionResult with the confirmed entry, or a cancelled/interrupted
            status. The renderer's session is exited on every path.
        """
        debug_session("session start", title=self.model.title)
        with self.renderer.session():
            try:
                result = self._loop()
            except KeyboardInterrupt:
                result = self._cancel(interrupted=True)
        debug_session("session end", status=result.status, action=result.action)
        return result

    def _loop(self) -> SessionResult:
        while True:
            self.state = RunnerState.RENDERING
            self.renderer.draw(self.model)

            self.state = RunnerState.WAITING_FOR_INPUT
            key = self.read_key()
            intent = resolve_key(key)
            debug_key("key", key=repr(key), intent=intent)
            if intent is None:
                continue

            result = self._handle(intent, key)
            if result is not None:
                return result

    def _handle(self, intent: KeyIntent, key: str) -> Optional[SessionResult]:
        model = self.model
        if intent is KeyIntent.UP:
            model.move(-1)
        elif intent is KeyIntent.DOWN:
            model.move(1)
        elif intent is KeyIntent.FIRST:
            model.move_first()
        elif intent is KeyIntent.LAST:
            model.move_last()
        elif intent is KeyIntent.BACK:
            if not model.back() and is_escape(key):
                return self._cancel()
        elif intent is KeyIntent.CANCEL:
            return self._cancel()
        elif intent is KeyIntent.INTERRUPT:
            return self._cancel(interrupted=True)
        elif intent is KeyIntent.CONFIRM:
            return self._confirm()
        return None

    def _confirm(self) -> Optional[SessionResult]:
        model = self.model
        entry = model.current_entry()
        if model.enter_submenu():
            debug_session("entered submenu", title=model.title, depth=model.depth)
            return None
        if entry.is_exit:
            return self._cancel()
        if self.executor is not None:
            self._execute(entry)
            return None
        model.confirm()
        self.state = RunnerState.CONFIRMED
        return SessionResult.confirmed(entry)

    def _execute(self, entry: MenuEntry):
        with self.renderer.suspend():
            try:
                self.executor(entry)
            except CommandExecutionError as e:
                log_error("exec", str(e))

    def _cancel(self, interrupted: bool = False) -> SessionResult:
        self.model.cancel()
        self.state = RunnerState.CANCELLED
        if interrupted:
            return SessionResult.interrupted()
        return SessionResult.cancelled()
