"""
Domain entities for logingest.

The canonical Log entity and the two submission shapes that are normalized
into it. Field names are the wire names used by the ingestion API and by
anything that reads the store afterwards.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from logingest.core.exceptions import SubmissionError

__all__ = [
    "Log",
    "UnstructuredEntry",
    "UnstructuredSubmission",
    "EventMetadata",
    "Event",
    "EventSubmission",
]


def _require(data: dict[str, Any], key: str, kind: str) -> Any:
    """Fetch a required key from decoded payload data."""
    if not isinstance(data, dict):
        raise SubmissionError(
            f"Expected an object, got {type(data).__name__}",
            submission_kind=kind,
        )
    if key not in data or data[key] is None:
        raise SubmissionError(
            f"Missing required field '{key}'",
            field_name=key,
            submission_kind=kind,
        )
    return data[key]


def _require_list(data: dict[str, Any], key: str, kind: str) -> list[Any]:
    value = _require(data, key, kind)
    if not isinstance(value, list):
        raise SubmissionError(
            f"Field '{key}' must be a list",
            field_name=key,
            submission_kind=kind,
        )
    return value


@dataclass
class Log:
    """
    The canonical normalized log record.

    Every submission, whatever its shape, is converted into a sequence of
    these. ``ts_rfc3339`` is always populated; see
    ``logingest.normalization.timestamps`` for how it is resolved.
    """
    customer_id: str
    log_type: str
    log_text: str
    ts_rfc3339: str
    namespace: str | None = None

    def timestamp(self) -> datetime:
        """Parse ``ts_rfc3339`` into an aware datetime."""
        from dateutil.parser import isoparse

        return isoparse(self.ts_rfc3339)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON export."""
        return {
            "customer_id": self.customer_id,
            "log_type": self.log_type,
            "log_text": self.log_text,
            "ts_rfc3339": self.ts_rfc3339,
            "namespace": self.namespace,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Log":
        """Deserialize from dictionary."""
        return cls(
            customer_id=_require(data, "customer_id", "log"),
            log_type=_require(data, "log_type", "log"),
            log_text=_require(data, "log_text", "log"),
            ts_rfc3339=_require(data, "ts_rfc3339", "log"),
            namespace=data.get("namespace"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "Log":
        return cls.from_dict(json.loads(text))


@dataclass
class UnstructuredEntry:
    """A single free-text line inside an unstructured submission."""
    log_text: str
    ts_epoch_microseconds: int | None = None
    ts_rfc3339: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_text": self.log_text,
            "ts_epoch_microseconds": self.ts_epoch_microseconds,
            "ts_rfc3339": self.ts_rfc3339,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnstructuredEntry":
        return cls(
            log_text=_require(data, "log_text", "unstructured_entry"),
            ts_epoch_microseconds=data.get("ts_epoch_microseconds"),
            ts_rfc3339=data.get("ts_rfc3339"),
        )


@dataclass
class UnstructuredSubmission:
    """
    Free-text logs for one customer and one log type.

    Namespace and log type apply to every entry; timestamps are per entry.
    """
    customer_id: str
    log_type: str
    namespace: str | None = None
    entries: list[UnstructuredEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "customer_id": self.customer_id,
            "log_type": self.log_type,
            "namespace": self.namespace,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnstructuredSubmission":
        """
        Build a submission from a decoded JSON object.

        Only the presence of required keys is checked; values are taken
        as given.

        Raises:
            SubmissionError: If a required key is missing
        """
        kind = "unstructured"
        return cls(
            customer_id=_require(data, "customer_id", kind),
            log_type=_require(data, "log_type", kind),
            namespace=data.get("namespace"),
            entries=[
                UnstructuredEntry.from_dict(e)
                for e in _require_list(data, "entries", kind)
            ],
        )


@dataclass
class EventMetadata:
    """Classification and timing carried by every structured event."""
    log_type: str
    namespace: str | None = None
    ts_epoch_microseconds: int | None = None
    ts_rfc3339: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_type": self.log_type,
            "namespace": self.namespace,
            "ts_epoch_microseconds": self.ts_epoch_microseconds,
            "ts_rfc3339": self.ts_rfc3339,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventMetadata":
        return cls(
            log_type=_require(data, "log_type", "event_metadata"),
            namespace=data.get("namespace"),
            ts_epoch_microseconds=data.get("ts_epoch_microseconds"),
            ts_rfc3339=data.get("ts_rfc3339"),
        )


@dataclass
class Event:
    """
    A structured security event.

    ``invalid`` is accepted and carried through serialization but is not
    consulted during normalization.
    """
    metadata: EventMetadata
    invalid: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "invalid": self.invalid,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Event":
        return cls(
            metadata=EventMetadata.from_dict(_require(data, "metadata", "event")),
            invalid=data.get("invalid"),
        )


@dataclass
class EventSubmission:
    """Structured events for one customer."""
    customer_id: str
    events: list[Event] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "customer_id": self.customer_id,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventSubmission":
        """
        Build a submission from a decoded JSON object.

        Raises:
            SubmissionError: If a required key is missing
        """
        kind = "events"
        return cls(
            customer_id=_require(data, "customer_id", kind),
            events=[
                Event.from_dict(e)
                for e in _require_list(data, "events", kind)
            ],
        )
