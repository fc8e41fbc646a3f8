"""tmenu - Lightweight, fast terminal menu."""

from importlib.metadata import version

__version__ = version("tmenu")

from tmenu.core.model import MenuDefinition, MenuEntry, SessionResult
from tmenu.core.parser import load_menu, parse_menu

__all__ = [
    "MenuDefinition",
    "MenuEntry",
    "SessionResult",
    "load_menu",
    "parse_menu",
]
