"""Command-line interface for the activity report engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .aggregator import aggregate
from .config import ReportSettings
from .errors import ReportError
from .loader import load_periods
from .paths import get_exports_dir, get_raw_data_dir
from .reporting import ReportPrinter, write_json_report
from .rules import RULE_CATALOG

app = typer.Typer(help="Turn captured window activity into Program/Project reports.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _settings(platform: Optional[str], utc: bool) -> ReportSettings:
    try:
        return ReportSettings.from_options(platform=platform, utc=utc)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--platform") from exc


def _raw_path(raw_file: Path) -> Path:
    """Accept a path, or a bare file name inside the raw data directory."""
    if raw_file.is_file():
        return raw_file
    candidate = get_raw_data_dir() / raw_file
    if candidate.is_file():
        return candidate
    raise typer.BadParameter(f"No capture file named {raw_file}", param_hint="RAW_FILE")


@app.command()
def report(
    raw_file: Path = typer.Argument(
        ...,
        help="JSON file of captured activity periods, or a file name in the raw data directory.",
    ),
    platform: Optional[str] = typer.Option(
        None, "--platform", help="OS tag used to pick rules (linux, win32, darwin)."
    ),
    utc: bool = typer.Option(False, "--utc", help="Format timestamps in UTC instead of local time."),
    export: bool = typer.Option(
        True, "--export/--no-export", help="Write the report as JSON next to other exports."
    ),
    export_dir: Optional[Path] = typer.Option(
        None, "--export-dir", path_type=Path, help="Directory for exported reports."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the report."),
) -> None:
    """Build a report from a raw capture file."""
    settings = _settings(platform, utc)
    raw_file = _raw_path(raw_file)
    try:
        final_report = aggregate(load_periods(raw_file), settings)
    except ReportError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not quiet:
        typer.echo(ReportPrinter(settings.not_applicable).render(final_report))
    if export:
        target = write_json_report(final_report, raw_file.name, export_dir or get_exports_dir())
        typer.echo(f"Report written to {target}")


@app.command()
def rules(
    platform: Optional[str] = typer.Option(None, "--platform", help="Only list rules for this OS tag."),
) -> None:
    """List the rule catalog in resolution order."""
    for position, rule in enumerate(RULE_CATALOG):
        if platform and rule.operating_system != platform:
            continue
        matchers = ", ".join(rule.executable_matchers) or "(default)"
        typer.echo(f"{position:>3}  {rule.operating_system:<7} {rule.program_label:<24} {matchers}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the API."),
    port: int = typer.Option(8765, "--port", min=1, max=65535, help="TCP port for the API."),
    platform: Optional[str] = typer.Option(None, "--platform", help="Default OS tag for reports."),
    utc: bool = typer.Option(False, "--utc", help="Format timestamps in UTC."),
    open_browser: bool = typer.Option(
        False,
        "--open-browser/--no-open-browser",
        help="Open the interactive API docs in your default browser.",
    ),
) -> None:
    """Serve the report API over HTTP."""
    from .server_runner import run_server

    run_server(
        host=host,
        port=port,
        settings=_settings(platform, utc),
        open_browser=open_browser,
    )
