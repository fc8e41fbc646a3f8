"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from tmenu.utils.constants import (
    DEFAULT_BORDER_STYLE,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_HIGHLIGHT_SYMBOL,
    DEFAULT_MENU_FILE,
    DEFAULT_SUBMENU_BORDER_STYLE,
    DEFAULT_SUBMENU_MARKER,
)


def get_tmenu_dir() -> Path:
    """Get the tmenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("TMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "tmenu"


class Config:
    """Application configuration."""

    # Persisted keys, in file order
    KEYS = (
        "menu_file",
        "cycle_cursor",
        "exec_commands",
        "shell",
        "debug",
        "border_style",
        "submenu_border_style",
        "highlight_style",
        "highlight_symbol",
        "submenu_marker",
    )

    def __init__(self, tmenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.tmenu_dir = tmenu_dir or get_tmenu_dir()
        self._config_file = self.tmenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.menu_file = DEFAULT_MENU_FILE
        self.cycle_cursor = True  # Wrap around at list boundaries
        self.exec_commands = False  # Print the action instead of running it
        self.shell = ""  # Empty means sh -c (cmd /C on Windows)
        self.debug = False
        self.border_style = DEFAULT_BORDER_STYLE
        self.submenu_border_style = DEFAULT_SUBMENU_BORDER_STYLE
        self.highlight_style = DEFAULT_HIGHLIGHT_STYLE
        self.highlight_symbol = DEFAULT_HIGHLIGHT_SYMBOL
        self.submenu_marker = DEFAULT_SUBMENU_MARKER
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text(encoding="utf-8"))
            except (ValueError, OSError):
                # Unreadable, not UTF-8 or not JSON
                data = None
            if isinstance(data, dict):
                self._apply_file(data)

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_file(self, data: dict):
        """Take known keys whose value matches the default's type."""
        for key in self.KEYS:
            value = data.get(key)
            if isinstance(value, type(getattr(self, key))):
                setattr(self, key, value)
        env = data.get("env")
        if isinstance(env, dict):
            self.env = {
                k: v
                for k, v in env.items()
                if isinstance(k, str) and isinstance(v, str)
            }

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell TMENU_* vars."""
        prefix = "TMENU_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both TMENU_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in self.KEYS:
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)
