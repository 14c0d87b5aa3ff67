"""
Output formatters for CLI.
"""

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from logingest.domain.entities import Log

__all__ = ["render_logs", "render_table", "render_json"]


def render_logs(logs: list[Log], output_format: str, console: Console) -> None:
    """
    Render logs in the specified format.

    Args:
        logs: List of Log objects to render
        output_format: One of "table", "json"
        console: Rich Console for output
    """
    match output_format:
        case "json":
            render_json(logs, console)
        case _:
            render_table(logs, console)


def render_table(logs: list[Log], console: Console) -> None:
    """Render logs as a Rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Time", style="dim", width=20)
    table.add_column("Customer", style="cyan")
    table.add_column("Type")
    table.add_column("Namespace")
    table.add_column("Text", overflow="fold")

    for log in logs:
        # ts_rfc3339 is passed through unvalidated from submissions
        try:
            time_str = log.timestamp().strftime("%Y-%m-%d %H:%M:%S")
        except ValueError:
            time_str = log.ts_rfc3339

        text = log.log_text
        if len(text) > 200:
            text = text[:197] + "..."

        # Submission fields are arbitrary text, never markup
        table.add_row(
            escape(time_str),
            escape(log.customer_id),
            escape(log.log_type),
            escape(log.namespace or "-"),
            escape(text) if text else "[dim]-[/dim]",
        )

    console.print(table)


def render_json(logs: list[Log], console: Console) -> None:
    """Render logs as JSON."""
    output = [log.to_dict() for log in logs]
    json_str = json.dumps(output, indent=2)
    console.print(json_str, markup=False, highlight=False, soft_wrap=True)
