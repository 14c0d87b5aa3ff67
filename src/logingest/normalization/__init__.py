"""
Normalization for logingest.

Two pure functions, one per submission shape, plus the timestamp
resolution rule they share.
"""

from logingest.normalization.timestamps import (
    EpochUnit,
    format_rfc3339,
    epoch_to_rfc3339,
    resolve_timestamp,
)
from logingest.normalization.unstructured import normalize_unstructured
from logingest.normalization.events import normalize_events

__all__ = [
    "EpochUnit",
    "format_rfc3339",
    "epoch_to_rfc3339",
    "resolve_timestamp",
    "normalize_unstructured",
    "normalize_events",
]
