"""Daybook CLI: entry point for the interactive diary console."""

import click

from daybook import __version__


@click.group()
@click.version_option(version=__version__, package_name="daybook")
def main() -> None:
    """Daybook: a small in-memory diary for the terminal."""


# Register subcommands
from .run_cmd import run

main.add_command(run)
