"""CLI for healthmate: serve / verify / summarize commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from healthmate.core.config import AppSettings
from healthmate.exceptions import EmptyInputError
from healthmate.heuristics import score_note, summarize_note
from healthmate.models import SummaryMode

app = typer.Typer(name="healthmate", help="Medical report analysis, note verification and health chatbot")
console = Console()


def _read_note(note_file: Path) -> str:
    if not note_file.is_file():
        raise typer.BadParameter(f"No such file: {note_file}")
    return note_file.read_text(encoding="utf-8")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to HEALTHMATE_API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to HEALTHMATE_API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = AppSettings()
    uvicorn.run(
        "healthmate.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
        reload=reload,
        log_level=settings.observability.log_level.lower(),
    )


@app.command()
def verify(
    note_file: Path = typer.Argument(..., help="Text file with the clinical note"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
) -> None:
    """Score a clinical note for length and section coverage."""
    try:
        result = score_note(_read_note(note_file))
    except EmptyInputError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(result.model_dump(), indent=2))
        return

    colour = "green" if result.score >= 70 else "yellow" if result.score >= 40 else "red"
    console.print(f"[bold]Quality score:[/bold] [{colour}]{result.score}/100[/{colour}]")

    if result.issues:
        table = Table(title="Issues")
        table.add_column("#", style="dim", width=3)
        table.add_column("Issue")
        for i, issue in enumerate(result.issues, 1):
            table.add_row(str(i), issue)
        console.print(table)

    console.print("\n[bold]Suggestions:[/bold]")
    for suggestion in result.suggestions:
        console.print(f"  - {suggestion}")


@app.command()
def summarize(
    note_file: Path = typer.Argument(..., help="Text file with the clinical note"),
    mode: SummaryMode = typer.Option(SummaryMode.PATIENT, "--mode", "-m", help="Summary audience"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Summarize a clinical note for a patient or a clinician."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        result = summarize_note(_read_note(note_file), mode)
    except EmptyInputError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(result.summary)

    table = Table(title="Insights")
    table.add_column("Label", style="cyan")
    table.add_column("Value")
    table.add_column("Trend", style="dim")
    for insight in result.insights:
        table.add_row(insight.label, insight.value, insight.trend or "")
    console.print(table)


if __name__ == "__main__":
    app()
