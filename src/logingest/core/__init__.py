"""
Core exceptions for logingest.
"""

from logingest.core.exceptions import (
    LogIngestError,
    SubmissionError,
    TimestampResolutionError,
    StoreCorruptedError,
    ConfigurationError,
)

__all__ = [
    "LogIngestError",
    "SubmissionError",
    "TimestampResolutionError",
    "StoreCorruptedError",
    "ConfigurationError",
]
