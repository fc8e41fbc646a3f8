"""Utilities for tmenu."""

from tmenu.utils.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    TmenuError,
)

__all__ = ["ConfigNotFoundError", "ConfigParseError", "TmenuError"]
