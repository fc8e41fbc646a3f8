"""Menu data model and cursor navigation."""

from dataclasses import dataclass, field
from typing import Optional

from tmenu.utils.constants import EXIT_ACTION, ExitCode
from tmenu.utils.exceptions import SessionStateError


@dataclass(frozen=True)
class MenuEntry:
    """A selectable item: a label with either an action or a submenu."""

    label: str
    action: str = ""
    submenu: Optional["MenuDefinition"] = None

    @property
    def is_submenu(self) -> bool:
        return self.submenu is not None

    @property
    def is_exit(self) -> bool:
        """True for the reserved action that ends the session."""
        return not self.is_submenu and self.action == EXIT_ACTION


@dataclass(frozen=True)
class MenuDefinition:
    """Ordered, immutable list of entries under a title."""

    title: str
    entries: tuple[MenuEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def count_entries(self) -> int:
        """Count entries at every level, submenu entries included."""
        total = 0
        for entry in self.entries:
            total += 1
            if entry.submenu is not None:
                total += entry.submenu.count_entries()
        return total


@dataclass
class SelectionState:
    """Cursor position plus the one-shot confirmed/cancelled outcome."""

    cursor_index: int = 0
    confirmed: bool = False
    cancelled: bool = False

    @property
    def finalized(self) -> bool:
        return self.confirmed or self.cancelled

    def confirm(self):
        self._check_open()
        self.confirmed = True

    def cancel(self):
        self._check_open()
        self.cancelled = True

    def _check_open(self):
        if self.finalized:
            raise SessionStateError("selection already finalized")


@dataclass
class _Level:
    definition: MenuDefinition
    cursor_index: int


class MenuModel:
    """Navigable view over a MenuDefinition.

    Tracks the displayed level, the cursor within it and the history of
    parent levels entered through submenus.
    """

    def __init__(self, definition: MenuDefinition, cycle: bool = True):
        if not definition.entries:
            raise ValueError("menu must have at least one entry")
        self.root = definition
        self.cycle = cycle
        self.state = SelectionState()
        self._current = definition
        self._history: list[_Level] = []

    @property
    def title(self) -> str:
        return self._current.title

    @property
    def entries(self) -> tuple[MenuEntry, ...]:
        return self._current.entries

    @property
    def cursor_index(self) -> int:
        return self.state.cursor_index

    @property
    def depth(self) -> int:
        """Number of submenus entered (0 at the root)."""
        return len(self._history)

    @property
    def is_root(self) -> bool:
        return not self._history

    @property
    def breadcrumb(self) -> list[str]:
        """Titles from the root to the displayed level."""
        return [level.definition.title for level in self._history] + [self.title]

    def current_entry(self) -> MenuEntry:
        return self.entries[self.state.cursor_index]

    def move(self, direction: int) -> int:
        """Move the cursor by `direction` steps (negative moves up).

        Wraps around the list ends when `cycle` is set, otherwise clamps.
        Returns the new cursor index.
        """
        count = len(self.entries)
        target = self.state.cursor_index + direction
        if self.cycle:
            target %= count
        else:
            target = max(0, min(count - 1, target))
        self.state.cursor_index = target
        return target

    def select(self, index: int) -> int:
        """Put the cursor on `index` of the displayed level."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"entry index {index} out of range")
        self.state.cursor_index = index
        return index

    def move_first(self) -> int:
        self.state.cursor_index = 0
        return 0

    def move_last(self) -> int:
        self.state.cursor_index = len(self.entries) - 1
        return self.state.cursor_index

    def enter_submenu(self) -> bool:
        """Descend into the current entry if it is a submenu."""
        entry = self.current_entry()
        if entry.submenu is None:
            return False
        self._history.append(_Level(self._current, self.state.cursor_index))
        self._current = entry.submenu
        self.state.cursor_index = 0
        return True

    def back(self) -> bool:
        """Return to the parent level, restoring its cursor."""
        if not self._history:
            return False
        level = self._history.pop()
        self._current = level.definition
        self.state.cursor_index = level.cursor_index
        return True

    def confirm(self) -> MenuEntry:
        """Finalize the session on the current entry."""
        self.state.confirm()
        return self.current_entry()

    def cancel(self):
        """Finalize the session without a selection."""
        self.state.cancel()


@dataclass(frozen=True)
class SessionResult:
    """Outcome of one menu session."""

    status: str
    entry: Optional[MenuEntry] = field(default=None)

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    INTERRUPTED = "interrupted"

    @classmethod
    def confirmed(cls, entry: MenuEntry) -> "SessionResult":
        return cls(cls.CONFIRMED, entry)

    @classmethod
    def cancelled(cls) -> "SessionResult":
        return cls(cls.CANCELLED)

    @classmethod
    def interrupted(cls) -> "SessionResult":
        return cls(cls.INTERRUPTED)

    @property
    def action(self) -> Optional[str]:
        return self.entry.action if self.entry is not None else None

    @property
    def exit_code(self) -> int:
        if self.status == self.CONFIRMED:
            return ExitCode.SELECTED
        if self.status == self.INTERRUPTED:
            return ExitCode.INTERRUPTED
        return ExitCode.CANCELLED
