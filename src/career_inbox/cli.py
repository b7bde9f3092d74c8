"""Command-line interface for Career Inbox."""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from career_inbox.analysis.dedup import find_duplicate_pairs
from career_inbox.analysis.gaps import identify_application_gaps
from career_inbox.analysis.records import get_field
from career_inbox.config import settings
from career_inbox.core.models import ImportBatch
from career_inbox.parsing.pipeline import ApplicationEmailParser
from career_inbox.parsing.samples import import_sample_applications
from career_inbox.utils.logging import configure_logging

app = typer.Typer(
    name="career-inbox",
    help="Career Inbox - import job applications from confirmation emails",
    add_completion=False,
)
console = Console()


def _load_records(path: Path) -> List[Any]:
    """Read a JSON object or array of objects from disk."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"Could not read {path}: {e}", style="red", markup=False)
        raise typer.Exit(code=1)
    
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    
    console.print(f"{path} must contain a JSON object or array", style="red", markup=False)
    raise typer.Exit(code=1)


def _print_json(payload: Any) -> None:
    # Plain print keeps the output machine readable
    print(json.dumps(payload, indent=2))


def _show_batch(batch: ImportBatch, as_json: bool) -> None:
    if as_json:
        _print_json(batch.model_dump(mode="json", by_alias=True))
        return
    
    table = Table(title=f"Imported applications ({batch.source})")
    table.add_column("Platform", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("Applied")
    
    for application in batch.applications:
        table.add_row(
            application.platform or "",
            escape(application.title),
            escape(application.company),
            escape(application.location),
            application.applied_date.date().isoformat()
        )
    
    console.print(table)
    for failure in batch.failed:
        console.print(f"⚠️  {failure.message_id or '-'}: {failure.subject!r} ({failure.reason})", markup=False)
    console.print(batch.message)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="JSON file with one email or a list of emails"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Import applications from a file of emails."""
    emails = _load_records(path)
    batch = ApplicationEmailParser().process_batch(emails, source=path.name)
    _show_batch(batch, as_json)


@app.command()
def sample(
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Import the built-in sample emails."""
    _show_batch(import_sample_applications(), as_json)


@app.command()
def duplicates(
    path: Path = typer.Argument(..., help="JSON file with application records"),
    window: Optional[float] = typer.Option(None, help="Applied date window in days"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
) -> None:
    """List pairs of applications that look like the same submission."""
    records = _load_records(path)
    window = settings.duplicate_window_days if window is None else window
    pairs = find_duplicate_pairs(records, date_window_days=window)
    
    if as_json:
        _print_json([{"first": i, "second": j} for i, j in pairs])
        return
    
    if not pairs:
        console.print("✅ No duplicate applications found")
        return
    
    for i, j in pairs:
        first, second = records[i], records[j]
        console.print(
            f"🔁 #{i} {get_field(first, 'title')!r} @ {get_field(first, 'company')!r}"
            f"  ~  #{j} {get_field(second, 'title')!r} @ {get_field(second, 'company')!r}",
            markup=False
        )


@app.command()
def gaps(
    path: Path = typer.Argument(..., help="JSON file with application records"),
    days: Optional[int] = typer.Option(None, min=1, help="Minimum gap length in days"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Find inactivity windows in an application history."""
    records = _load_records(path)
    found = identify_application_gaps(records, gap_days=days or settings.gap_threshold_days)
    
    if as_json:
        _print_json([gap.model_dump(mode="json", by_alias=True) for gap in found])
        return
    
    if not found:
        console.print("✅ No gaps in your application history")
        return
    
    table = Table(title="Application gaps")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Days", justify="right", style="red")
    table.add_column("Suggestion")
    for gap in found:
        table.add_row(
            gap.start_date.date().isoformat(),
            gap.end_date.date().isoformat(),
            str(gap.days_missing),
            gap.suggestion
        )
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(settings.host, help="Host to bind to"),
    port: int = typer.Option(settings.port, help="Port to bind to"),
    reload: bool = typer.Option(settings.reload, help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn
    
    console.print(f"🚀 Starting Career Inbox on {host}:{port}")
    uvicorn.run(
        "career_inbox.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="Career Inbox Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Duplicate Window (days)", str(settings.duplicate_window_days))
    table.add_row("Gap Threshold (days)", str(settings.gap_threshold_days))
    table.add_row("Host", settings.host)
    table.add_row("Port", str(settings.port))
    
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from career_inbox import __version__
    console.print(f"Career Inbox v{__version__}")


@app.callback()
def _setup() -> None:
    configure_logging()


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
