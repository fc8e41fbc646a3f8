"""CLI entry point for tmenu.

Uses Typer for argument parsing with lazy loading, so `--check` and error
paths never import the interactive UI.
"""

from pathlib import Path
from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="tmenu",
    help="Lightweight, fast terminal menu driven by a .toon template",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from tmenu import __version__

        print(f"tmenu {__version__}")
        raise typer.Exit()


@app.command()
def main(
    menu_file: Optional[Path] = typer.Argument(
        None,
        metavar="MENU_FILE",
        help="Menu template (.toon). Defaults to the configured menu_file.",
        show_default=False,
    ),
    exec_commands: Optional[bool] = typer.Option(
        None,
        "--exec/--print",
        help="Run chosen commands in place, or print the action and exit.",
        show_default=False,
    ),
    cycle: Optional[bool] = typer.Option(
        None,
        "--wrap/--clamp",
        help="Wrap the cursor around the list ends, or stop at them.",
        show_default=False,
    ),
    simple: bool = typer.Option(
        False, "--simple", help="Use the simple-term-menu backend"
    ),
    check: bool = typer.Option(
        False, "--check", help="Validate the template and print it as a tree"
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Write debug log to ~/.config/tmenu/debug.log"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Show the menu and print (or run) the chosen entry's action.

    Exit status: 0 selected, 1 cancelled, 2 bad template, 130 interrupted.
    """
    from tmenu.cli.commands import cmd_check, cmd_run

    class Args:
        def __init__(self):
            self.menu_file = menu_file
            self.exec_commands = exec_commands
            self.cycle = cycle
            self.simple = simple
            self.debug = debug

    if check:
        cmd_check(Args())
        return
    cmd_run(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
