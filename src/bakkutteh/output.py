"""Console output for bakkutteh."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

logger = logging.getLogger(__name__)

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]OK[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]ERROR[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]...[/blue] {message}")


def emit_dry_run(job_name: str, text: str, output_path: str | Path | None = None) -> None:
    """Print the dry-run manifest, and write it to ``output_path`` if given.

    The file receives ``text`` verbatim.
    """
    console.print(f"\nDry run result for job [bold magenta]{job_name}[/bold magenta]\n")
    console.print(text, markup=False, highlight=False)

    if output_path is not None:
        path = Path(output_path)
        path.write_text(text)
        logger.debug("Dry-run manifest written to %s", path)
        print_success(f"Dry-run manifest written to {path}")
