"""CLI command handlers."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from tmenu.core.model import MenuDefinition
from tmenu.core.parser import load_menu
from tmenu.utils.config import Config, get_tmenu_dir
from tmenu.utils.constants import ExitCode
from tmenu.utils.debug import debug, set_debug_override
from tmenu.utils.exceptions import ConfigNotFoundError, ConfigParseError


def _load_or_exit(path) -> MenuDefinition:
    """Load the template, or print the error and exit before touching the tty."""
    from tmenu.cli.ui import console

    try:
        return load_menu(path)
    except (ConfigNotFoundError, ConfigParseError) as e:
        debug("parse", "failed to load menu", path=path, error=e)
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)


def build_tree(definition: MenuDefinition) -> Tree:
    """Render a MenuDefinition as a rich Tree."""
    tree = Tree(f"[bold cyan]{escape(definition.title)}[/bold cyan]")

    def add_level(node: Tree, level: MenuDefinition):
        for entry in level.entries:
            if entry.submenu is not None:
                branch = node.add(f"[magenta]{escape(entry.label)}[/magenta]")
                add_level(branch, entry.submenu)
            else:
                node.add(f"{escape(entry.label)} [dim]→ {escape(entry.action)}[/dim]")

    add_level(tree, definition)
    return tree


def cmd_check(args):
    """Parse the template and print it as a tree."""
    if args.debug:
        set_debug_override(True)

    config = Config(get_tmenu_dir())
    definition = _load_or_exit(args.menu_file or config.menu_file)

    out = Console()
    out.print(build_tree(definition))
    out.print(
        f"[green]OK[/green] [dim]{definition.count_entries()} entries[/dim]",
        highlight=False,
    )


def cmd_run(args):
    """Run an interactive menu session.

    On confirmation the chosen action is printed to stdout (or run, in exec
    mode). Exits with the session's status code.
    """
    from tmenu.cli.ui.interactive import create_backend
    from tmenu.core.executor import make_executor

    if args.debug:
        set_debug_override(True)

    config = Config(get_tmenu_dir())
    if args.cycle is not None:
        config.cycle_cursor = args.cycle
    exec_commands = args.exec_commands
    if exec_commands is None:
        exec_commands = config.exec_commands

    menu_file = args.menu_file or config.menu_file
    definition = _load_or_exit(menu_file)

    executor = make_executor(config.shell or None) if exec_commands else None
    backend = create_backend(config, simple=args.simple, executor=executor)
    result = backend.run(definition)

    if result.action is not None:
        print(result.action, flush=True)
    sys.exit(result.exit_code)
