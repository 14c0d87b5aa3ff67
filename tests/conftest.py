"""
Pytest fixtures for logingest tests.
"""

import pytest
from datetime import datetime, timezone

from logingest.domain.entities import (
    Event,
    EventMetadata,
    EventSubmission,
    UnstructuredEntry,
    UnstructuredSubmission,
)
from logingest.store.memory import LogStore


FIXED_NOW = datetime(2026, 1, 27, 10, 15, 32, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def store() -> LogStore:
    """Empty log store."""
    return LogStore()


@pytest.fixture
def unstructured_payload() -> dict:
    """Decoded unstructured submission with one RFC 3339 and one epoch entry."""
    return {
        "customer_id": "acme",
        "log_type": "auth",
        "namespace": None,
        "entries": [
            {"log_text": "login ok", "ts_rfc3339": "2024-01-01T00:00:00Z"},
            {"log_text": "login fail", "ts_epoch_microseconds": 1704067200000},
        ],
    }


@pytest.fixture
def events_payload() -> dict:
    """Decoded structured event submission."""
    return {
        "customer_id": "acme",
        "events": [
            {
                "metadata": {
                    "log_type": "WINDOWS_DEFENDER",
                    "namespace": "corp",
                    "ts_rfc3339": "2026-01-27T10:00:00Z",
                },
            },
            {
                "metadata": {
                    "log_type": "OKTA",
                    "ts_epoch_microseconds": 1769508000000,
                },
                "invalid": True,
            },
        ],
    }


@pytest.fixture
def unstructured_submission() -> UnstructuredSubmission:
    """Unstructured submission with three entries and a namespace."""
    return UnstructuredSubmission(
        customer_id="acme",
        log_type="nginx",
        namespace="prod",
        entries=[
            UnstructuredEntry(log_text="GET / 200", ts_rfc3339="2026-01-27T10:15:32Z"),
            UnstructuredEntry(log_text="GET /health 200", ts_epoch_microseconds=1769508932000),
            UnstructuredEntry(log_text="POST /login 401"),
        ],
    )


@pytest.fixture
def event_submission() -> EventSubmission:
    """Structured submission with one event of each timestamp kind."""
    return EventSubmission(
        customer_id="acme",
        events=[
            Event(metadata=EventMetadata(log_type="GCP_DNS", ts_rfc3339="2026-01-27T10:15:32Z")),
            Event(metadata=EventMetadata(log_type="OKTA", namespace="idp",
                                         ts_epoch_microseconds=1769508932000)),
            Event(metadata=EventMetadata(log_type="CS_EDR"), invalid=True),
        ],
    )
