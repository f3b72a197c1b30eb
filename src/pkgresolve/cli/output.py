"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import re

import typer
from rich.console import Console as RichConsole
from rich.table import Table

from pkgresolve.cli.config import CLIConfig


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if not CLIConfig.is_machine_mode():
            self._rich_console.print(*args, **kwargs)
            return

        for arg in args:
            if isinstance(arg, str):
                # Remove rich markup
                plain = re.sub(r'\[/?[a-z ]+\]', '', arg).strip()
                if plain:
                    typer.echo(plain)
            elif isinstance(arg, Table) or hasattr(arg, '__rich__'):
                # Tables are human-only; machine mode uses --json
                pass
            elif arg:
                typer.echo(arg)

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


_console = MachineAwareConsole()


def get_console() -> MachineAwareConsole:
    """Get the shared machine-aware console."""
    return _console
