"""
logingest - Normalize heterogeneous log submissions into canonical logs.

Free-text log submissions and structured security-event submissions are
converted into one canonical Log shape and collected in a thread-safe,
append-only in-memory store.

Usage:
    from logingest import LogStore, IngestLogsUseCase, UnstructuredSubmission

    store = LogStore()
    ingest = IngestLogsUseCase(store)

    ingest.ingest_unstructured(UnstructuredSubmission.from_dict(payload))
    ingest.ingest_structured_events(EventSubmission.from_dict(events_payload))

    for log in store.snapshot():
        print(log.to_json())

    # Pure normalization without a store
    from logingest import normalize_unstructured
    logs = normalize_unstructured(submission)
"""

__version__ = "0.1.0"

from logingest.domain.entities import (
    Log,
    UnstructuredEntry,
    UnstructuredSubmission,
    EventMetadata,
    Event,
    EventSubmission,
)
from logingest.core.exceptions import (
    LogIngestError,
    SubmissionError,
    TimestampResolutionError,
    StoreCorruptedError,
    ConfigurationError,
)
from logingest.normalization import (
    EpochUnit,
    resolve_timestamp,
    normalize_unstructured,
    normalize_events,
)
from logingest.store import LogStore
from logingest.config import IngestSettings
from logingest.application import IngestLogsUseCase

__all__ = [
    # Version
    "__version__",
    # Entities
    "Log",
    "UnstructuredEntry",
    "UnstructuredSubmission",
    "EventMetadata",
    "Event",
    "EventSubmission",
    # Exceptions
    "LogIngestError",
    "SubmissionError",
    "TimestampResolutionError",
    "StoreCorruptedError",
    "ConfigurationError",
    # Normalization
    "EpochUnit",
    "resolve_timestamp",
    "normalize_unstructured",
    "normalize_events",
    # Store and use case
    "LogStore",
    "IngestSettings",
    "IngestLogsUseCase",
    # Convenience functions
    "ingest_unstructured",
    "ingest_structured_events",
]


def ingest_unstructured(store: LogStore, submission: UnstructuredSubmission) -> None:
    """
    Normalize an unstructured submission into ``store`` with default settings.

    Args:
        store: Store that receives the logs
        submission: Decoded unstructured submission
    """
    IngestLogsUseCase(store).ingest_unstructured(submission)


def ingest_structured_events(store: LogStore, submission: EventSubmission) -> None:
    """
    Normalize a structured event submission into ``store`` with default settings.

    Args:
        store: Store that receives the logs
        submission: Decoded event submission
    """
    IngestLogsUseCase(store).ingest_structured_events(submission)
