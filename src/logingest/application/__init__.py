"""
Application layer for logingest.

Contains the use case that wires normalization to the store.
This layer coordinates the flow but contains no normalization logic.
"""

from logingest.application.ingest_logs import IngestLogsUseCase

__all__ = ["IngestLogsUseCase"]
