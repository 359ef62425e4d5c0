"""Command-line interface."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from doxnav import __version__, config_pg
from doxnav.errors import MalformedDataError
from doxnav.render import render_markdown
from doxnav.table import NavTable, load_table
from doxnav.table.derive import count_entries, max_depth, walk
from doxnav.table.dump import dump_json, dump_navtree_js, dump_yaml


class ExportFormat(str, Enum):
    js = "js"
    json = "json"
    yaml = "yaml"


def _make_logger(
    quiet: bool, verbose: bool = False
) -> tuple[Callable[..., None], Callable[..., None]]:
    """Create log and log_verbose functions for CLI output.

    Args:
        quiet: If True, suppress all output.
        verbose: If True, enable verbose logging (quiet overrides this).

    Returns:
        Tuple of (log, log_verbose) functions.
    """
    effective_verbose = verbose and not quiet

    def log(msg: str, color: str = "green", err: bool = False) -> None:
        if not quiet:
            typer.secho(msg, fg=color, err=err)

    def log_verbose(msg: str, color: str = "green", err: bool = False) -> None:
        if effective_verbose:
            typer.secho(msg, fg=color, err=err)

    return log, log_verbose


def version_callback(value: bool) -> None:
    """Print version and exit if --version flag is set."""
    if value:
        typer.echo(f"doxnav {__version__}")
        raise typer.Exit()


def _load_or_exit(
    table: Path | None, resolve: bool, log: Callable[..., None]
) -> NavTable:
    """Load the requested table, or the built-in one when no path is given."""
    if table is None:
        return NavTable(name=config_pg.NAME, entries=config_pg.load())
    try:
        return load_table(table, resolve=resolve)
    except FileNotFoundError as e:
        log(f"Error: {e}", color="red", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        log(f"Error reading table: {e}", color="red", err=True)
        raise typer.Exit(1) from None
    except MalformedDataError as e:
        log(f"Error loading table: {e}", color="red", err=True)
        raise typer.Exit(1) from None


app = typer.Typer(
    help="Load, check and convert documentation navigation tables.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

TableOption = Annotated[
    Path | None,
    typer.Option(
        "--table",
        "-t",
        help="Navigation table file (.js, .json, .yml); defaults to the built-in table",
    ),
]
ResolveOption = Annotated[
    bool,
    typer.Option("--resolve", "-r", help="Inline child tables from sibling files"),
]


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Load, check and convert documentation navigation tables."""


@app.command()
def validate(
    table: TableOption = None,
    resolve: ResolveOption = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List every entry"),
    ] = False,
) -> None:
    """Check that a navigation table is well formed."""
    log, log_verbose = _make_logger(quiet, verbose)

    nav = _load_or_exit(table, resolve, log)
    source = table or "built-in"

    log(f"Table valid: {source}")
    log(f"  Name: {nav.name}")
    log(f"  Top-level entries: {len(nav)}")
    log(f"  Entries: {count_entries(nav.entries)}")
    log(f"  Depth: {max_depth(nav.entries)}")

    for depth, entry in walk(nav.entries):
        target = entry.target or "(group)"
        suffix = f" -> {entry.child_ref}" if entry.child_ref else ""
        log_verbose(f"  {'  ' * depth}- {entry.title}: {target}{suffix}")


@app.command()
def show(
    table: TableOption = None,
    resolve: ResolveOption = False,
    base_url: Annotated[
        str,
        typer.Option("--base-url", "-b", help="Prefix for entry targets"),
    ] = "",
    title: Annotated[
        str | None,
        typer.Option("--title", help="Heading written above the outline"),
    ] = None,
) -> None:
    """Print a navigation table as a Markdown outline."""
    log, _ = _make_logger(quiet=False)
    nav = _load_or_exit(table, resolve, log)
    typer.echo(render_markdown(nav.entries, base_url=base_url, title=title), nl=False)


@app.command()
def export(
    table: TableOption = None,
    resolve: ResolveOption = False,
    fmt: Annotated[
        ExportFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = ExportFormat.js,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (defaults to stdout)"),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Variable name for js output"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
) -> None:
    """Write a navigation table as a Doxygen script, JSON or YAML."""
    log, _ = _make_logger(quiet)
    nav = _load_or_exit(table, resolve, log)

    if fmt is ExportFormat.js:
        content = dump_navtree_js(name or nav.name, nav.entries)
    elif fmt is ExportFormat.json:
        content = dump_json(nav.entries)
    else:
        content = dump_yaml(nav.entries)

    if output is None:
        typer.echo(content, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
    except OSError as exc:
        log(f"Error writing output file: {exc}", color="red", err=True)
        raise typer.Exit(1) from None

    log(f"Wrote {output} ({len(content):,} bytes)")


if __name__ == "__main__":
    app()
