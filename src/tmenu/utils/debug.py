"""Debug logging utility."""

import sys
from datetime import datetime
from typing import Optional

from tmenu.utils.config import Config, get_tmenu_dir

_config = None
_debug_override: Optional[bool] = None
# Set while a session owns the terminal, so log lines don't tear the UI
_quiet = False


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_tmenu_dir())
    return _config


def set_debug_override(enabled: Optional[bool]):
    """Force debug mode on or off for this process (None = use config)."""
    global _debug_override
    _debug_override = enabled


def set_quiet(quiet: bool):
    """Suppress stderr echo while the terminal is in use."""
    global _quiet
    _quiet = quiet


def is_debug_enabled() -> bool:
    """Check whether debug logging is on."""
    if _debug_override is not None:
        return _debug_override
    return bool(_get_config().debug)


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_dir = get_tmenu_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        with open(log_dir / "debug.log", "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _echo(line: str):
    if _quiet:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'parse', 'session', 'key', 'exec'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not is_debug_enabled():
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[tmenu:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    # Log to file (always) and stderr
    _log_to_file(line)
    _echo(line)


def debug_parse(message: str, **kwargs):
    """Log parse-related debug message."""
    debug("parse", message, **kwargs)


def debug_session(message: str, **kwargs):
    """Log session-related debug message."""
    debug("session", message, **kwargs)


def debug_key(message: str, **kwargs):
    """Log key-related debug message."""
    debug("key", message, **kwargs)


def debug_exec(message: str, **kwargs):
    """Log command execution debug message."""
    debug("exec", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'session', 'exec'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[tmenu:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)
    _echo(line)
