"""
Common CLI helpers shared by the command modules.
"""

from pathlib import Path
from typing import Optional

import typer

from pkgresolve.exceptions import ConfigError, TableError
from pkgresolve.resolution import PackageResolver, build_resolver
from pkgresolve.user_config import get_user_config, load_table_file
from .output import get_console

console = get_console()


def load_resolver_or_exit(table_path: Optional[Path], strict: Optional[bool]) -> PackageResolver:
    """
    Build a package-name resolver from an explicit table file or the user config.

    Args:
        table_path: JSON file mapping import paths to names; overrides the config table
        strict: Force strict/guess mode; None uses the config setting

    Raises:
        typer.Exit: If the table file can't be loaded or holds an invalid entry
    """
    config = get_user_config()
    if strict is None:
        strict = config.is_strict()

    if table_path is not None:
        try:
            table = load_table_file(table_path)
        except ConfigError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
    else:
        table = config.table()

    try:
        return build_resolver(table, strict=strict)
    except TableError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
