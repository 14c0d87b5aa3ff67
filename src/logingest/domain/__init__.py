"""
Domain layer for logingest.

Contains the canonical log entity and the submission shapes.
This layer has no dependencies on the store or the CLI.
"""

from logingest.domain.entities import (
    Log,
    UnstructuredEntry,
    UnstructuredSubmission,
    EventMetadata,
    Event,
    EventSubmission,
)

__all__ = [
    "Log",
    "UnstructuredEntry",
    "UnstructuredSubmission",
    "EventMetadata",
    "Event",
    "EventSubmission",
]
