"""ItemReport CLI.

Commands:
- render: Print a CSV or HTML report for a viewer over an items file
- preview: Show the items a viewer would see, with priority markers and total
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from itemreport.config import get_config
from itemreport.core.logging import configure_logging
from itemreport.exceptions import ItemReportError
from itemreport.ingestion.items import load_items
from itemreport.models import ReportFormat, Viewer
from itemreport.reporting.builder import ReportGenerator
from itemreport.reporting.fields import render_value
from itemreport.reporting.transform import build_body
from itemreport.reporting.visibility import filter_visible

app = typer.Typer(
    name="itemreport",
    help="ItemReport - role-aware CSV/HTML line item reports",
    no_args_is_help=True,
)

log = structlog.get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """ItemReport - role-aware CSV/HTML line item reports."""
    try:
        config = get_config()
    except ItemReportError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    configure_logging(
        level="DEBUG" if verbose else config.log_level,
        json_logs=config.log_format == "json",
    )


def _load_or_exit(items_file: Path):
    try:
        return load_items(items_file)
    except ItemReportError as e:
        log.debug("items_file_rejected", path=str(items_file), error=str(e))
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def render(
    report_type: str = typer.Argument(..., help="Report format: CSV or HTML"),
    items_file: Path = typer.Argument(..., help="Items file (JSON/YAML/CSV)"),
    user: str = typer.Option(..., "--user", "-u", help="Viewer display name"),
    role: str = typer.Option("STANDARD", "--role", "-r", help="Viewer role (STANDARD or ADMIN)"),
    escape_html: bool = typer.Option(
        False, "--escape-html", help="HTML-escape interpolated fields"
    ),
):
    """Render a report to stdout."""
    items = _load_or_exit(items_file)

    report_config = get_config().report
    if escape_html:
        report_config = replace(report_config, escape_html=True)

    generator = ReportGenerator(config=report_config)
    output = generator.generate_report(report_type, Viewer(name=user, role=role), items)
    log.debug("report_rendered", report_type=report_type, role=role, item_count=len(items))
    # Plain write; rich markup would mangle HTML tags
    typer.echo(output)


@app.command()
def preview(
    items_file: Path = typer.Argument(..., help="Items file (JSON/YAML/CSV)"),
    user: str = typer.Option(..., "--user", "-u", help="Viewer display name"),
    role: str = typer.Option("STANDARD", "--role", "-r", help="Viewer role (STANDARD or ADMIN)"),
):
    """Show visible items, priority markers and total for a viewer."""
    items = _load_or_exit(items_file)
    report_config = get_config().report
    log.debug("report_preview", role=role, item_count=len(items))

    viewer = Viewer(name=user, role=role)
    body = build_body(
        viewer,
        items,
        ReportFormat.CSV,
        visibility_threshold=report_config.visibility_threshold,
        priority_threshold=report_config.priority_threshold,
    )
    visible = filter_visible(viewer, items, report_config.visibility_threshold)

    console.print(f"[bold]Report preview:[/bold] user={escape(user)}, role={escape(role)}")

    table = Table(title="Visible Items")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    table.add_column("Priority", justify="center")

    for item in visible:
        table.add_row(
            escape(render_value(item.id)),
            escape(render_value(item.name)),
            render_value(item.value),
            "[bold yellow]★[/bold yellow]" if item.priority else "",
        )

    console.print(table)
    console.print(f"\n  Visible items: {body.visible_count} of {len(items)}")
    console.print(f"  Priority items: {body.priority_count}")
    console.print(f"  [bold]Total:[/bold] {render_value(body.total)}")
