"""Allow `python -m tmenu.cli`."""

from tmenu.cli import cli_main

cli_main()
