"""Terminal ownership and scrolling-list utilities.

The menu is drawn on stderr so stdout only carries the chosen action.
"""

import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.control import Control

from tmenu.utils.debug import set_quiet

console = Console(stderr=True)


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int = 0,
) -> tuple[int, int, int]:
    """Calculate visible window for scrolling list.

    Args:
        cursor: Current cursor position
        total_items: Total number of items
        max_visible: Maximum items that fit on screen
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (start_idx, end_idx, new_scroll_offset)
    """
    if total_items <= max_visible:
        return 0, total_items, 0

    # Adjust scroll to keep cursor visible
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1
    scroll_offset = min(scroll_offset, total_items - max_visible)

    start = scroll_offset
    end = min(start + max_visible, total_items)

    return start, end, scroll_offset


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str, str]:
    """Format scroll indicators.

    Returns:
        Tuple of (top_indicator, bottom_indicator)
    """
    top = f"↑ {hidden_above} more" if hidden_above > 0 else ""
    bottom = f"↓ {hidden_below} more" if hidden_below > 0 else ""
    return top, bottom


def clear_screen(target: Optional[Console] = None) -> None:
    """Clear terminal screen and hide cursor."""
    target = target or console
    target.show_cursor(False)
    target.clear()


def reset_cursor(target: Optional[Console] = None) -> None:
    """Move cursor to home position without clearing.

    This allows overwriting content in place, avoiding flicker.
    Cursor should already be hidden by clear_screen().
    """
    target = target or console
    if target.is_terminal:
        target.control(Control.home())


def _save_tty_mode():
    """Snapshot termios attributes of stdin, None when not a tty."""
    try:
        import termios
    except ImportError:  # Windows
        return None
    try:
        fd = sys.stdin.fileno()
        if not sys.stdin.isatty():
            return None
        return fd, termios.tcgetattr(fd)
    except (OSError, ValueError, AttributeError):
        return None


def _restore_tty_mode(saved) -> None:
    if saved is None:
        return
    import termios

    fd, attrs = saved
    try:
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
    except (OSError, termios.error):
        pass  # tty went away (hangup)


def _raise_interrupt(signum, frame):
    raise KeyboardInterrupt(f"signal {signum}")


def _install_signal_handlers() -> dict:
    """Turn SIGTERM/SIGHUP into KeyboardInterrupt so cleanup still runs."""
    if threading.current_thread() is not threading.main_thread():
        return {}
    previous = {}
    for name in ("SIGTERM", "SIGHUP"):
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        previous[signum] = signal.signal(signum, _raise_interrupt)
    return previous


def _restore_signal_handlers(previous: dict) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


@contextmanager
def interrupt_on_signals() -> Iterator[None]:
    """Raise KeyboardInterrupt on SIGTERM/SIGHUP inside the block."""
    previous = _install_signal_handlers()
    try:
        yield
    finally:
        _restore_signal_handlers(previous)


def enter_terminal(target: Console, alt_screen: bool = True) -> None:
    """Take over the screen: alternate buffer, hidden cursor."""
    set_quiet(True)
    if alt_screen:
        target.set_alt_screen(True)
    target.show_cursor(False)


def leave_terminal(target: Console, alt_screen: bool = True) -> None:
    """Give the screen back: visible cursor, main buffer."""
    target.show_cursor(True)
    if alt_screen:
        target.set_alt_screen(False)
    set_quiet(False)


@contextmanager
def terminal_session(
    target: Optional[Console] = None, alt_screen: bool = True
) -> Iterator[Console]:
    """Own the terminal for a menu session.

    Restores cursor visibility, the main screen buffer, the tty mode and
    the previous SIGTERM/SIGHUP handlers on every exit path.
    """
    target = target or console
    saved_mode = _save_tty_mode()
    with interrupt_on_signals():
        try:
            enter_terminal(target, alt_screen)
            yield target
        finally:
            try:
                leave_terminal(target, alt_screen)
            finally:
                _restore_tty_mode(saved_mode)
