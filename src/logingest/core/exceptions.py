"""
Custom exceptions for logingest.
"""

__all__ = [
    "LogIngestError",
    "SubmissionError",
    "TimestampResolutionError",
    "StoreCorruptedError",
    "ConfigurationError",
]


class LogIngestError(Exception):
    """
    Base exception for all logingest errors.

    ``fatal`` errors mean the store can no longer accept submissions;
    callers stop ingesting instead of moving on to the next submission.
    """

    fatal = False

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class SubmissionError(LogIngestError):
    """Raised when a decoded submission payload lacks a required key."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        submission_kind: str | None = None,
    ):
        details = {}
        if field_name is not None:
            details["field"] = field_name
        if submission_kind is not None:
            details["kind"] = submission_kind
        super().__init__(message, details)
        self.field_name = field_name
        self.submission_kind = submission_kind


class TimestampResolutionError(LogIngestError):
    """Raised when an epoch value cannot be represented as a datetime."""

    def __init__(self, message: str, epoch_value: int | None = None, unit: str | None = None):
        details = {}
        if epoch_value is not None:
            details["epoch_value"] = epoch_value
        if unit is not None:
            details["unit"] = unit
        super().__init__(message, details)
        self.epoch_value = epoch_value
        self.unit = unit


class StoreCorruptedError(LogIngestError):
    """
    Raised when the log store can no longer be used.

    A store becomes corrupted when an append fails inside its critical
    section. This is a process-level fault; callers must not retry.
    """

    fatal = True


class ConfigurationError(LogIngestError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {}
        if config_key is not None:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
