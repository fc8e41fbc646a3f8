"""Run menu actions as shell commands (exec mode)."""

import os
import subprocess
from typing import Callable, Optional

from tmenu.core.model import MenuEntry
from tmenu.utils.debug import debug_exec
from tmenu.utils.exceptions import CommandExecutionError


def shell_argv(command: str, shell: Optional[str] = None) -> list[str]:
    """Build the argv that runs `command` through a shell."""
    if shell:
        return [shell, "-c", command]
    if os.name == "nt":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def run_shell_command(command: str, shell: Optional[str] = None) -> int:
    """Run a command attached to the terminal and return its exit status.

    Raises:
        CommandExecutionError: If the shell itself cannot be started
    """
    argv = shell_argv(command, shell)
    debug_exec("running command", argv=argv)
    try:
        result = subprocess.run(argv)
    except OSError as e:
        raise CommandExecutionError(f"cannot run '{argv[0]}': {e}") from e
    debug_exec("command finished", returncode=result.returncode)
    return result.returncode


def wait_for_enter(prompt: str = "\nPress Enter to return...") -> None:
    """Block until the user presses Enter."""
    print(prompt, end="", flush=True)
    try:
        input()
    except EOFError:
        pass  # stdin closed, nothing to wait for


def make_executor(shell: Optional[str] = None) -> Callable[[MenuEntry], None]:
    """Build an exec-mode executor: run the entry's action, then wait."""

    def execute(entry: MenuEntry) -> None:
        run_shell_command(entry.action, shell)
        wait_for_enter()

    return execute
