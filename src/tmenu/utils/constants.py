"""Constants used throughout tmenu."""

# Template loaded when no file is given
DEFAULT_MENU_FILE = "tmenu.toon"

# Title used when the template has no top-level key
DEFAULT_TITLE = "Main Menu"

# Action that ends the session instead of being emitted or executed
EXIT_ACTION = "exit"


# Process exit codes
class ExitCode:
    """Exit status constants for the CLI."""

    SELECTED = 0
    CANCELLED = 1
    CONFIG_ERROR = 2
    INTERRUPTED = 130


# Rendering defaults
DEFAULT_BORDER_STYLE = "cyan"
DEFAULT_SUBMENU_BORDER_STYLE = "magenta"
DEFAULT_HIGHLIGHT_STYLE = "bold yellow on color(24)"
DEFAULT_HIGHLIGHT_SYMBOL = " ➔ "
DEFAULT_SUBMENU_MARKER = " ›"

# Horizontal room around the widest label (borders, cursor symbol, padding)
PANEL_H_PADDING = 14
# Vertical room around the entries (borders and blank padding rows)
PANEL_V_PADDING = 4
