"""Core menu logic: template parsing, model, key handling and session loop."""

from tmenu.core.keys import KeyIntent, resolve_key
from tmenu.core.model import (
    MenuDefinition,
    MenuEntry,
    MenuModel,
    SelectionState,
    SessionResult,
)
from tmenu.core.parser import load_menu, parse_menu
from tmenu.core.runner import Runner, RunnerState

__all__ = [
    "KeyIntent",
    "MenuDefinition",
    "MenuEntry",
    "MenuModel",
    "Runner",
    "RunnerState",
    "SelectionState",
    "SessionResult",
    "load_menu",
    "parse_menu",
    "resolve_key",
]
