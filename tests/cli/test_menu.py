"""Tests for the simple-term-menu backend."""

import os
import signal
import time

import pytest

from tmenu.cli.ui.menu import SimpleTerminalMenu
from tmenu.core.parser import parse_menu


@pytest.fixture
def menu():
    return parse_menu(
        "Main:\n"
        '  "Alpha"[1]: echo alpha\n'
        "  Tools:\n"
        '    "Top"[1]: htop\n'
        '  "Quit"[1]: exit\n'
    )


def scripted_select(monkeypatch, *choices):
    """Replace the terminal menu with scripted choices; record what was shown."""
    shown = []
    pending = list(choices)

    def select(self, options, title="", cursor_index=0):
        shown.append((title, list(options), cursor_index))
        choice = pending.pop(0)
        if isinstance(choice, BaseException):
            raise choice
        return choice

    monkeypatch.setattr(SimpleTerminalMenu, "select", select)
    return shown


def test_confirm(monkeypatch, menu):
    scripted_select(monkeypatch, 0)

    result = SimpleTerminalMenu().run(menu)

    assert result.status == "confirmed"
    assert result.action == "echo alpha"


def test_submenu_and_breadcrumb(monkeypatch, menu):
    shown = scripted_select(monkeypatch, 1, 0)

    result = SimpleTerminalMenu(submenu_marker=" >").run(menu)

    assert result.action == "htop"
    assert shown[0][1] == ["Alpha", "Tools >", "Quit"]
    assert shown[1][0] == "Main › Tools"


def test_escape_in_submenu_goes_back(monkeypatch, menu):
    shown = scripted_select(monkeypatch, 1, None, 0)

    result = SimpleTerminalMenu().run(menu)

    assert result.action == "echo alpha"
    # Parent cursor restored on the submenu entry
    assert shown[2][2] == 1


def test_escape_at_root_cancels(monkeypatch, menu):
    scripted_select(monkeypatch, None)

    result = SimpleTerminalMenu().run(menu)

    assert result.status == "cancelled"
    assert result.action is None


def test_exit_action_cancels(monkeypatch, menu):
    scripted_select(monkeypatch, 2)

    assert SimpleTerminalMenu().run(menu).status == "cancelled"


def test_ctrl_c_interrupts(monkeypatch, menu):
    scripted_select(monkeypatch, KeyboardInterrupt())

    result = SimpleTerminalMenu().run(menu)

    assert result.status == "interrupted"
    assert result.exit_code == 130


def test_exec_mode(monkeypatch, menu):
    ran = []
    scripted_select(monkeypatch, 0, 0, None)

    result = SimpleTerminalMenu(executor=lambda e: ran.append(e.action)).run(menu)

    assert ran == ["echo alpha", "echo alpha"]
    assert result.status == "cancelled"


def test_select_empty_options():
    assert SimpleTerminalMenu().select([]) is None


@pytest.mark.skipif(os.name == "nt", reason="needs SIGTERM")
def test_sigterm_interrupts_and_restores_handler(monkeypatch, menu):
    """SIGTERM while the menu is shown ends the session through cleanup."""
    before = signal.getsignal(signal.SIGTERM)

    def select(self, options, title="", cursor_index=0):
        os.kill(os.getpid(), signal.SIGTERM)
        time.sleep(5)
        return 0

    monkeypatch.setattr(SimpleTerminalMenu, "select", select)

    result = SimpleTerminalMenu().run(menu)

    assert result.status == "interrupted"
    assert result.exit_code == 130
    assert signal.getsignal(signal.SIGTERM) == before
