"""Typer CLI entry point for initgen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from initgen import __version__
from initgen.config import load_config
from initgen.exceptions import InitgenError
from initgen.generator import InitGenerator

app = typer.Typer(
    name="initgen",
    help="Generate re-exporting __init__.py files for a Python package tree.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console(stderr=True)


def _error_exit(message: str) -> None:
    """Print a styled error and exit."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"initgen {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path, typer.Argument(metavar="DIR", help="Package directory to generate index files for")
    ],
    python_version: Annotated[
        str | None,
        typer.Option("--python-version", "-p", help="Target Python version (default 3.12)"),
    ] = None,
    respect_all: Annotated[
        bool | None,
        typer.Option("--respect-all/--ignore-all", help="Honor literal __all__ lists (default respect)"),
    ] = None,
    sort: Annotated[
        bool | None,
        typer.Option("--sort/--no-sort", help="Sort imports and __all__ (default sort)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Glob pattern of entry names to skip (repeatable)"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Write an __init__.py into every directory under DIR that has public names."""
    try:
        config = load_config(
            directory,
            Path.cwd(),
            python_version=python_version,
            respect_all=respect_all,
            sort=sort,
            verbose=verbose or None,
            exclude=exclude or None,
        )
        generator = InitGenerator(config)
        generator.generate()
    except InitgenError as exc:
        _error_exit(str(exc))
        return

    count = len(generator.written)
    noun = "file" if count == 1 else "files"
    console.print(f"[green]initgen[/green] wrote [bold]{count}[/bold] index {noun}")
