"""Custom exceptions for tmenu.

This module defines a hierarchy of exceptions for different error types:
- TmenuError: Base exception for all tmenu errors
- ConfigNotFoundError: Menu template file is missing
- ConfigParseError: Menu template is malformed (with optional line number)
- SessionStateError: Selection state finalized twice
- CommandExecutionError: Shell command could not be started
"""

from typing import Optional


class TmenuError(Exception):
    """Base exception for all tmenu errors.

    All tmenu-specific exceptions inherit from this class, allowing
    callers to catch all tmenu errors with a single except clause.
    """

    pass


class ConfigNotFoundError(TmenuError):
    """Menu template file is missing.

    Attributes:
        path: Path that was looked up
    """

    def __init__(self, path: str):
        super().__init__(f"Menu file '{path}' does not exist")
        self.path = path


class ConfigParseError(TmenuError):
    """Menu template is malformed.

    Raised when a template cannot be parsed, such as:
    - Lines that are neither a key nor an entry
    - Bad indentation (tabs, second top-level key)
    - Empty menus or entries without an action

    Attributes:
        line: 1-based line number of the offending line, if known
    """

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class SessionStateError(TmenuError):
    """Selection state errors.

    Raised when a session is finalized more than once.
    """

    pass


class CommandExecutionError(TmenuError):
    """Shell command could not be started."""

    pass
