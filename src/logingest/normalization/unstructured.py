"""
Normalizer for free-text log submissions.
"""

from logingest.domain.entities import Log, UnstructuredSubmission
from logingest.normalization.timestamps import Clock, EpochUnit, resolve_timestamp

__all__ = ["normalize_unstructured"]


def normalize_unstructured(
    submission: UnstructuredSubmission,
    *,
    epoch_unit: EpochUnit = EpochUnit.MILLISECONDS,
    clock: Clock | None = None,
) -> list[Log]:
    """
    Convert an unstructured submission into canonical logs.

    One Log per entry, in input order. Customer, log type and namespace
    come from the submission; text and timestamp come from the entry.

    Args:
        submission: Decoded unstructured submission
        epoch_unit: How to read ``ts_epoch_microseconds``
        clock: Source of "now" for entries without a timestamp

    Returns:
        List of Log objects, same length as ``submission.entries``
    """
    return [
        Log(
            customer_id=submission.customer_id,
            log_type=submission.log_type,
            log_text=entry.log_text,
            ts_rfc3339=resolve_timestamp(
                entry.ts_rfc3339,
                entry.ts_epoch_microseconds,
                epoch_unit=epoch_unit,
                clock=clock,
            ),
            namespace=submission.namespace,
        )
        for entry in submission.entries
    ]
