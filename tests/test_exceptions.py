"""Tests for custom exceptions."""

import pytest

from tmenu.utils.exceptions import (
    CommandExecutionError,
    ConfigNotFoundError,
    ConfigParseError,
    SessionStateError,
    TmenuError,
)


def test_tmenu_error_is_base():
    """Test TmenuError is base exception for all tmenu errors."""
    assert issubclass(ConfigNotFoundError, TmenuError)
    assert issubclass(ConfigParseError, TmenuError)
    assert issubclass(SessionStateError, TmenuError)
    assert issubclass(CommandExecutionError, TmenuError)


def test_not_found_carries_path():
    """Test ConfigNotFoundError keeps the looked-up path."""
    err = ConfigNotFoundError("menus/missing.toon")
    assert err.path == "menus/missing.toon"
    assert "menus/missing.toon" in str(err)


def test_parse_error_has_line():
    """Test ConfigParseError prefixes the line number."""
    err = ConfigParseError("cannot parse line", line=7)
    assert err.line == 7
    assert str(err) == "line 7: cannot parse line"


def test_parse_error_without_line():
    """Test ConfigParseError works without a line number."""
    err = ConfigParseError("menu has no entries")
    assert err.line is None
    assert str(err) == "menu has no entries"


def test_catch_specific_exception():
    """Test that specific exceptions can be caught."""
    with pytest.raises(ConfigParseError):
        raise ConfigParseError("test")

    with pytest.raises(TmenuError):
        raise ConfigNotFoundError("also caught by base")
