"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

SAMPLE_MENU = """\
# sample
Main Menu:
  "Editor"[1]: nano notes.txt
  "Git status"[1]: git status
  System:
    "Processes"[1]: htop
    "Disk usage"[1]: df -h
  "Quit"[1]: exit
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_tmenu_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/tmenu directory."""
    tmenu_dir = temp_dir / ".tmenu"
    tmenu_dir.mkdir()
    monkeypatch.setenv("TMENU_DIR", str(tmenu_dir))
    for key in (
        "TMENU_DEBUG",
        "TMENU_CYCLE_CURSOR",
        "TMENU_EXEC_COMMANDS",
        "TMENU_MENU_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    return tmenu_dir


@pytest.fixture
def menu_file(temp_dir):
    """Write the sample template and return its path."""
    path = temp_dir / "tmenu.toon"
    path.write_text(SAMPLE_MENU)
    return path


@pytest.fixture(autouse=True)
def reset_debug_state():
    """Keep debug-module globals from leaking between tests."""
    from tmenu.utils import debug

    debug._config = None
    debug.set_debug_override(None)
    debug.set_quiet(False)
    yield
    debug._config = None
    debug.set_debug_override(None)
    debug.set_quiet(False)
