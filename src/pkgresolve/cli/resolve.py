"""
CLI Resolution Commands

package, imports
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table
from rich.markup import escape

from pkgresolve.cli.config import CLIConfig
from pkgresolve.exceptions import PackageNotFoundError, ParserError
from pkgresolve.logging_config import logger
from pkgresolve.resolution import collect_imports, parse_source, resolve_import_names
from .common import load_resolver_or_exit
from .output import get_console

console = get_console()

STRICT_HELP = "Fail on import paths missing from the table instead of guessing (default: config 'strict')."
TABLE_HELP = "JSON file mapping import paths to package names. Overrides the configured table."


def package_cmd(
    paths: List[str] = typer.Argument(..., help="Import paths to resolve."),
    strict: Optional[bool] = typer.Option(None, "--strict/--guess", help=STRICT_HELP),
    table_path: Optional[Path] = typer.Option(
        None,
        "--table",
        "-t",
        help=TABLE_HELP,
        dir_okay=False,
    ),
    from_dir: str = typer.Option(".", "--dir", "-d", help="Directory the import is resolved from."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Resolve import paths to package names.
    """
    resolver = load_resolver_or_exit(table_path, strict)
    results = []
    failed = False

    for path in paths:
        try:
            results.append({"path": path, "name": resolver.resolve_package(path, from_dir), "error": None})
        except (PackageNotFoundError, ValueError) as e:
            logger.debug(f"Failed to resolve {path}: {e}")
            results.append({"path": path, "name": None, "error": str(e)})
            failed = True

    if json_output:
        typer.echo(json.dumps(results, indent=2))
    elif CLIConfig.is_machine_mode():
        for result in results:
            typer.echo(f"{result['path']}\t{result['name'] or 'ERROR: ' + result['error']}")
    else:
        table = Table(title="Package Names")
        table.add_column("Import Path", style="cyan")
        table.add_column("Name", style="green")
        for result in results:
            name = escape(result["name"]) if result["name"] else f"[red]{escape(result['error'])}[/red]"
            table.add_row(escape(result["path"]), name)
        console.print(table)

    if failed:
        raise typer.Exit(code=1)


def imports_cmd(
    file: Path = typer.Argument(..., help="Python file to list imports for.", exists=True, dir_okay=False),
    strict: Optional[bool] = typer.Option(None, "--strict/--guess", help=STRICT_HELP),
    table_path: Optional[Path] = typer.Option(
        None,
        "--table",
        "-t",
        help=TABLE_HELP,
        dir_okay=False,
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    List a file's imports with the package names they resolve to.
    """
    resolver = load_resolver_or_exit(table_path, strict)

    try:
        module = parse_source(file.read_bytes(), str(file))
    except ParserError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    resolved = resolve_import_names(collect_imports(module), resolver, str(file.parent))

    if json_output:
        typer.echo(json.dumps([entry.model_dump() for entry in resolved], indent=2))
    elif CLIConfig.is_machine_mode():
        for entry in resolved:
            marker = " *" if entry.is_wildcard else ""
            typer.echo(f"{entry.line}\t{entry.path}\t{entry.local_name or 'ERROR: ' + entry.error}{marker}")
    else:
        table = Table(title=f"Imports in {escape(str(file))}")
        table.add_column("Line", justify="right")
        table.add_column("Import Path", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Wildcard")
        for entry in resolved:
            name = escape(entry.local_name) if entry.local_name else f"[red]{escape(entry.error)}[/red]"
            table.add_row(str(entry.line), escape(entry.path), name, "yes" if entry.is_wildcard else "")
        console.print(table)

    if any(entry.error for entry in resolved):
        raise typer.Exit(code=1)
