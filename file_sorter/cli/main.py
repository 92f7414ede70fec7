"""Command line interface for the File Sorter."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.classifier import Classifier
from ..core.config import get_config
from ..core.exceptions import (
    FileSorterError, FileSystemError, PathNotFoundError, PermissionDeniedError, ScanError
)
from ..core.logging_config import setup_logging
from ..core.models import MoveAction, ProcessingFailure
from ..core.organizer import Organizer
from ..core.scanner import FileScanner

console = Console(highlight=False, soft_wrap=True)


@click.command()
@click.version_option(version=__version__, message="v%(version)s")
@click.option("--dir", "directory", default=".", show_default=True,
              type=click.Path(path_type=Path), help="Directory to organize")
@click.option("--dry-run", is_flag=True, help="Preview changes without moving files")
def cli(directory: Path, dry_run: bool):
    """Sort the files of a directory into category folders by extension."""
    app_config = get_config()
    setup_logging(app_config.logging)

    scanner = FileScanner(Classifier(app_config.build_category_table()))
    try:
        scan_result = scanner.scan_directory(directory)
    except FileSorterError as e:
        handle_cli_error(e, "directory scan")
        raise click.exceptions.Exit(1)

    if dry_run:
        console.print("[bold yellow]DRY RUN MODE: No files will be moved[/bold yellow]")

    organizer = Organizer(max_workers=app_config.organize.max_workers)
    result = organizer.run(
        scan_result.records,
        dry_run=dry_run,
        on_action=_report_action,
        on_failure=_report_failure,
    )

    console.print("[bold green]Processing complete![/bold green]")
    done_text = "would be moved" if result.dry_run else "moved"
    console.print(
        f"Files {done_text}: [bold]{len(result.actions)}[/bold], "
        f"folders skipped: {result.skipped_directories}, "
        f"entries unreadable: {len(scan_result.skipped)}, "
        f"errors: [bold red]{len(result.failures)}[/bold red]"
    )


def _report_action(action: MoveAction) -> None:
    console.print(escape(action.describe()))


def _report_failure(failure: ProcessingFailure) -> None:
    console.print(f"[red]❌ Error processing {escape(str(failure))}[/red]")


def handle_cli_error(error: Exception, operation: str = "operation") -> None:
    """
    Handle CLI errors with appropriate user feedback.

    Args:
        error: The exception that occurred
        operation: Description of the operation that failed
    """
    if isinstance(error, PathNotFoundError):
        console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
        console.print("[yellow]Please check that the path exists and is accessible.[/yellow]")
    elif isinstance(error, PermissionDeniedError):
        console.print(f"[bold red]Permission Error:[/bold red] {escape(str(error))}")
        console.print("[yellow]Please check directory permissions or run with appropriate privileges.[/yellow]")
    elif isinstance(error, ScanError):
        console.print(f"[bold red]Scan Error:[/bold red] {escape(str(error))}")
    elif isinstance(error, FileSystemError):
        console.print(f"[bold red]File System Error:[/bold red] {escape(str(error))}")
        console.print("[yellow]Please check that the path is a readable directory.[/yellow]")
    else:
        console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")

    logging.getLogger(__name__).error(f"CLI error in {operation}: {error}", exc_info=True)


if __name__ == "__main__":
    cli()
