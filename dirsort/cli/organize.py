"""
CLI command for organizing a directory.

Sorts the files of a directory into subdirectories by extension or by type.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..errors import OrganizerError
from ..organization import (
    FileMove,
    FileOrganizer,
    OrganizationResult,
    OrganizeMode,
    RunOptions,
)
from ..shared import setup_logging

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.option(
    "-s",
    "--source",
    type=click.Path(path_type=Path),
    default=".",
    show_default=True,
    help="Source directory to organize (not scanned recursively)",
)
@click.option(
    "-m",
    "--mode",
    type=click.Choice([mode.value for mode in OrganizeMode], case_sensitive=False),
    default=OrganizeMode.TYPE.value,
    show_default=True,
    help="Organize by file extension or by file type",
)
@click.option(
    "-d",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report destinations without moving any files",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
@click.option(
    "-j",
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of parallel workers [default: CPU count]",
)
@click.version_option(__version__, prog_name="dirsort")
def organize(
    source: Path,
    mode: str,
    dry_run: bool,
    verbose: bool,
    workers: Optional[int],
) -> None:
    """
    Sort the files in a directory into subdirectories.

    Every regular file directly inside SOURCE is moved to
    SOURCE/<category>/<name>. Subdirectories are left alone.

    \b
    Examples:
        # Preview where each file would go
        dirsort -s ~/Downloads --dry-run

        # Sort by file type (Images/, Documents/, Code/, ...)
        dirsort -s ~/Downloads

        # Sort by extension (jpg/, pdf/, md/, ...)
        dirsort -s ~/Downloads -m extension -v

    \b
    Type categories:
        Images, Documents, Archives, Audio, Videos,
        Executables, Data, Web, Code, Other
    """
    setup_logging(verbose=verbose, quiet=not verbose)

    options = RunOptions(
        source=source,
        mode=OrganizeMode(mode.lower()),
        dry_run=dry_run,
        verbose=verbose,
        workers=workers,
    )

    show_moves = verbose or dry_run
    organizer = FileOrganizer(
        options, progress_callback=_print_move if show_moves else None
    )

    try:
        organizer.validate()

        if verbose:
            console.print(
                f"Organizing files in: {_display(source)}", soft_wrap=True
            )
            console.print(f"Mode: {options.mode.value}")
            console.print(f"Dry run: {dry_run}")

        files = organizer.collect()

        if verbose:
            console.print(f"Found {len(files)} files to organize")

        result = organizer.organize(files)

    except OrganizerError as e:
        err_console.print(f"[red]Error: {_display(str(e))}[/red]", soft_wrap=True)
        if verbose:
            err_console.print_exception()
        sys.exit(1)

    if verbose:
        _display_result(result)

    if result.dry_run:
        console.print("Dry run completed - no files were actually moved")
    elif verbose:
        console.print("[green]Organization completed successfully[/green]")


def _display(value) -> str:
    """
    Make a path or message printable as rich text.

    Undecodable bytes in file names (lone surrogates) become U+FFFD.
    """
    text = os.fsdecode(value) if isinstance(value, (bytes, os.PathLike)) else value
    try:
        text = text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    except UnicodeEncodeError:
        text = text.encode("utf-8", "replace").decode("utf-8")
    return escape(text)


def _print_move(move: FileMove) -> None:
    """Print one per-file progress line."""
    console.print(
        f"Moving {_display(move.source.name)} to {_display(move.destination)}",
        soft_wrap=True,
        highlight=False,
    )


def _display_result(result: OrganizationResult) -> None:
    """Display organization result."""
    table = Table(title="Results")
    table.add_column("Category", style="cyan")
    table.add_column("Files", style="green", justify="right")

    for category, count in result.categories().items():
        table.add_row(_display(category), str(count))

    table.add_row("Total", str(result.total_files), style="bold")
    console.print(table)


if __name__ == "__main__":
    organize()
