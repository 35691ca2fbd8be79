"""
CLI for modrequire.

Provides the `modrequire` command for checking module names and loading
modules by name from the shell, e.g. to verify a plugin configured by name
is importable in the current environment.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .errors import ModuleRuntimeError
from .loader import search_path
from .names import is_module_name
from .names import module_import_name
from .names import module_notional_filename
from .runtime import try_require_module
from .runtime import use_module
from .runtime import use_package_optimistically
from .settings import LoaderSettings
from .settings import LoadReport

MODES = ("strict", "optimistic", "try")


def print_report(report: LoadReport) -> None:
    """Print a load report with colored output."""
    if report.loaded:
        status = click.style("loaded", fg="green", bold=True)
    else:
        status = click.style("not loaded", fg="yellow", bold=True)

    click.echo(f"{report.name}: {status} ({report.mode})")
    click.echo(f"  filename: {report.filename}")
    if report.version is not None:
        click.echo(f"  version:  {report.version}")


@click.group()
@click.version_option(version=__version__, prog_name="modrequire")
def cli() -> None:
    """modrequire - Load Python modules by name."""
    pass


@cli.command()
@click.argument("names", nargs=-1, required=True)
def check(names: tuple[str, ...]) -> None:
    """Check that each NAME is a valid module name."""
    all_valid = True
    for name in names:
        if is_module_name(name):
            symbol = click.style("✓", fg="green")
        else:
            symbol = click.style("✗", fg="red")
            all_valid = False
        click.echo(f"  {symbol} {name}")

    sys.exit(0 if all_valid else 1)


@cli.command()
@click.argument("name")
def filename(name: str) -> None:
    """Print the notional filename for module NAME."""
    try:
        click.echo(module_notional_filename(name))
    except ModuleRuntimeError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("name")
@click.option(
    "--mode",
    "-m",
    type=click.Choice(MODES),
    default="strict",
    show_default=True,
    help="strict: every failure is an error; optimistic: a missing module is fine; "
    "try: exit 1 if the module is missing or too old",
)
@click.option("--min-version", help="Minimum __version__ the module must declare")
@click.option(
    "--include",
    "-I",
    "include",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to search before sys.path (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def load(
    name: str,
    mode: str,
    min_version: str | None,
    include: tuple[Path, ...],
    as_json: bool,
    verbose: bool,
) -> None:
    """Load module NAME.

    Examples:

        modrequire load json

        modrequire load my_plugin -I ./plugins --min-version 1.2

        modrequire load maybe_installed --mode try
    """
    settings = LoaderSettings.from_env().with_paths(list(include))
    if verbose or settings.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        notional = module_notional_filename(name)
        import_name = module_import_name(name)
        with search_path(*settings.search_paths):
            if mode == "strict":
                use_module(name, min_version)
                loaded = True
            elif mode == "optimistic":
                use_package_optimistically(name, min_version)
                loaded = import_name in sys.modules
            else:
                loaded = try_require_module(name, min_version)
    except ModuleRuntimeError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)

    module = sys.modules.get(import_name)
    declared = getattr(module, "__version__", None) if module is not None else None
    report = LoadReport(
        name=name,
        filename=notional,
        mode=mode,  # type: ignore[arg-type]
        loaded=loaded,
        version=None if declared is None else str(declared),
    )

    if as_json:
        click.echo(report.model_dump_json(indent=2))
    else:
        print_report(report)

    sys.exit(1 if mode == "try" and not loaded else 0)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
