"""
Normalizer for structured security-event submissions.
"""

from logingest.domain.entities import EventSubmission, Log
from logingest.normalization.timestamps import Clock, EpochUnit, resolve_timestamp

__all__ = ["normalize_events"]


def normalize_events(
    submission: EventSubmission,
    *,
    epoch_unit: EpochUnit = EpochUnit.MILLISECONDS,
    clock: Clock | None = None,
) -> list[Log]:
    """
    Convert a structured event submission into canonical logs.

    One Log per event, in input order. Events carry no free text, so
    ``log_text`` is always empty. The ``invalid`` flag is not consulted:
    flagged events are normalized like any other.

    Args:
        submission: Decoded event submission
        epoch_unit: How to read ``ts_epoch_microseconds``
        clock: Source of "now" for events without a timestamp

    Returns:
        List of Log objects, same length as ``submission.events``
    """
    logs = []
    for event in submission.events:
        meta = event.metadata
        logs.append(Log(
            customer_id=submission.customer_id,
            log_type=meta.log_type,
            log_text="",
            ts_rfc3339=resolve_timestamp(
                meta.ts_rfc3339,
                meta.ts_epoch_microseconds,
                epoch_unit=epoch_unit,
                clock=clock,
            ),
            namespace=meta.namespace,
        ))
    return logs
