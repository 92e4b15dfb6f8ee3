from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from user_pipeline.config import Settings
from user_pipeline.errors import PipelineError
from user_pipeline.pipeline import PipelineResult

_STEP_LABELS = {
    "fetch": "fetching users",
    "persist": "persisting users",
}


def _console(console: Optional[Console]) -> Console:
    return console if console is not None else Console(highlight=False, emoji=False)


def print_status(result: PipelineResult, console: Optional[Console] = None) -> None:
    """
    Print the single status line that closes a run.

    Either the number of persisted users and where they went, or a notice that
    nothing matched (in which case nothing was written).
    """
    console = _console(console)
    if result["persisted_path"] is not None:
        console.print(
            f"\n[green]Successfully persisted {result['matched']} users to "
            f"{escape(str(result['persisted_path']))}[/green]",
            soft_wrap=True,
        )
    else:
        console.print("\n[yellow]No users matched the filter criteria[/yellow]", soft_wrap=True)


def print_error(exc: PipelineError, console: Optional[Console] = None) -> None:
    """Report a failed step, naming it."""
    console = _console(console)
    label = _STEP_LABELS.get(exc.step, exc.step)
    console.print(f"[red]Error {label}: {escape(exc.message)}[/red]", soft_wrap=True)


def print_settings(settings: Settings, console: Optional[Console] = None) -> None:
    """Render the effective configuration as a rich table."""
    console = _console(console)
    table = Table(title="User Pipeline Settings", box=box.ROUNDED)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    for field_name in Settings.model_fields:
        table.add_row(field_name, escape(str(getattr(settings, field_name))))

    console.print(table)


__all__ = ["print_error", "print_settings", "print_status"]
