"""
Ingest logs use case.

Orchestrates normalization and storage for both submission shapes.
"""

import logging

from logingest.config import IngestSettings
from logingest.domain.entities import EventSubmission, UnstructuredSubmission
from logingest.normalization.events import normalize_events
from logingest.normalization.timestamps import Clock
from logingest.normalization.unstructured import normalize_unstructured
from logingest.store.memory import LogStore

__all__ = ["IngestLogsUseCase"]

logger = logging.getLogger(__name__)


class IngestLogsUseCase:
    """
    Use case: Normalize submissions and append them to a log store.

    Orchestrates: submission -> normalization -> store

    Normalization runs outside the store lock; only the append is
    serialized. Every log from one submission is appended in a single
    critical section, or none are.

    Example:
        store = LogStore()
        use_case = IngestLogsUseCase(store)

        use_case.ingest_unstructured(UnstructuredSubmission.from_dict(payload))
        for log in store.snapshot():
            print(f"{log.ts_rfc3339}: {log.log_text}")
    """

    def __init__(
        self,
        store: LogStore,
        settings: IngestSettings | None = None,
        clock: Clock | None = None,
    ):
        """
        Initialize the use case.

        Args:
            store: Store that receives normalized logs
            settings: Normalization settings (defaults if omitted)
            clock: Optional source of "now" for records without timestamps
        """
        self.store = store
        self.settings = settings or IngestSettings()
        self.clock = clock

    def ingest_unstructured(self, submission: UnstructuredSubmission) -> None:
        """
        Normalize an unstructured submission and append it to the store.

        Raises:
            StoreCorruptedError: If the store is unusable
        """
        logs = normalize_unstructured(
            submission,
            epoch_unit=self.settings.epoch_unit,
            clock=self.clock,
        )
        self.store.extend(logs)
        logger.debug(
            "Ingested %d unstructured logs for customer %s (log_type=%s)",
            len(logs), submission.customer_id, submission.log_type,
        )

    def ingest_structured_events(self, submission: EventSubmission) -> None:
        """
        Normalize a structured event submission and append it to the store.

        Raises:
            StoreCorruptedError: If the store is unusable
        """
        logs = normalize_events(
            submission,
            epoch_unit=self.settings.epoch_unit,
            clock=self.clock,
        )
        self.store.extend(logs)
        logger.debug(
            "Ingested %d structured events for customer %s",
            len(logs), submission.customer_id,
        )
