"""Base protocol for menu backends."""

from typing import Protocol

from tmenu.core.model import MenuDefinition, SessionResult


class MenuBackend(Protocol):
    """Protocol for menu implementations.

    Allows swapping menu backends if needed.
    """

    def run(self, definition: MenuDefinition) -> SessionResult:
        """Run one session, return its outcome."""
        ...
