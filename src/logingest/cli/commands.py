"""
CLI commands using the application layer use case.

Wires submission files to a fresh LogStore through IngestLogsUseCase.
"""

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from logingest.application.ingest_logs import IngestLogsUseCase
from logingest.cli.output import render_logs
from logingest.config import IngestSettings
from logingest.core.exceptions import LogIngestError, SubmissionError
from logingest.domain.entities import EventSubmission, UnstructuredSubmission
from logingest.logging_config import configure_logging
from logingest.normalization.timestamps import EpochUnit
from logingest.store.memory import LogStore

__all__ = ["normalize_command", "load_payloads", "detect_kind"]

logger = logging.getLogger(__name__)


def load_payloads(file_path: str) -> list[Any]:
    """
    Read a JSON file holding one submission object or a list of them.

    Raises:
        SubmissionError: If the file cannot be read or is not valid JSON
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SubmissionError(f"Cannot read {file_path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SubmissionError(f"Invalid JSON in {file_path}: {e}") from e
    return data if isinstance(data, list) else [data]


def detect_kind(payload: Any) -> str:
    """Pick the submission kind from the collection key it carries."""
    if isinstance(payload, dict):
        if "entries" in payload:
            return "unstructured"
        if "events" in payload:
            return "events"
    raise SubmissionError("Cannot tell submission kind: expected 'entries' or 'events'")


def normalize_command(
    files: tuple[str, ...],
    kind: str,
    output_format: str,
    epoch_unit: str | None,
    config_path: str | None,
    quiet: bool,
    console: Console,
    error_console: Console,
) -> int:
    """
    Execute the normalize command.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    try:
        settings = IngestSettings.load(config_path)
    except LogIngestError as e:
        error_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    configure_logging(settings.log_level_value)
    if epoch_unit:
        settings.epoch_unit = EpochUnit.from_string(epoch_unit)
        settings.source.append("--epoch-unit")
    logger.debug(
        "Settings epoch_unit=%s log_level=%s from %s",
        settings.epoch_unit.value, settings.log_level,
        ", ".join(settings.source) or "defaults",
    )

    store = LogStore()
    use_case = IngestLogsUseCase(store, settings)
    exit_code = 0
    submissions = 0

    for file_path in files:
        try:
            for payload in load_payloads(file_path):
                payload_kind = detect_kind(payload) if kind == "auto" else kind
                if payload_kind == "unstructured":
                    use_case.ingest_unstructured(UnstructuredSubmission.from_dict(payload))
                else:
                    use_case.ingest_structured_events(EventSubmission.from_dict(payload))
                submissions += 1
        except LogIngestError as e:
            error_console.print(f"[red]Error in {escape(file_path)}:[/red] {escape(str(e))}")
            if e.fatal:
                return 1
            exit_code = 1
            continue

    logs = store.snapshot()
    logger.info("Normalized %d submissions into %d logs", submissions, len(logs))

    if logs:
        render_logs(logs, output_format, console)
        if not quiet and output_format == "table":
            console.print(
                f"\n[dim]Total: {len(logs)} logs from {submissions} submissions[/dim]"
            )
    elif not quiet:
        console.print("[yellow]No logs produced.[/yellow]")

    return exit_code
