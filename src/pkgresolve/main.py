import typer

from pkgresolve import __version__
from pkgresolve.logging_config import setup_logging
from pkgresolve.cli import resolve
from pkgresolve.cli.config import CLIConfig

app = typer.Typer(help="Resolve package names and import provenance for source rewriting.")


@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables and colors (also via PKGRESOLVE_HUMAN_MODE env var)"
    ),
):
    """
    pkgresolve: package names and import provenance.

    Machine mode is DEFAULT (pure data, no formatting).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
    elif CLIConfig.is_machine_mode():
        setup_logging(suppress_console=True, force=True)


app.command(name="package")(resolve.package_cmd)
app.command(name="imports")(resolve.imports_cmd)


@app.command()
def version():
    """
    Prints the current version of pkgresolve.
    """
    typer.echo(f"pkgresolve v{__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
