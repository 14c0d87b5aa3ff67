"""
Timestamp resolution shared by both normalizers.

Source records may carry an RFC 3339 string, an epoch integer, both, or
neither. Exactly one canonical RFC 3339 string comes out, resolved
independently for every entry or event.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable

from logingest.core.exceptions import TimestampResolutionError

__all__ = [
    "EpochUnit",
    "Clock",
    "utc_now",
    "format_rfc3339",
    "epoch_to_rfc3339",
    "resolve_timestamp",
]

Clock = Callable[[], datetime]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class EpochUnit(Enum):
    """
    Resolution at which ``ts_epoch_microseconds`` values are read.

    The field is named for microseconds but existing producers send
    milliseconds, so MILLISECONDS is the default.
    """
    MILLISECONDS = "ms"
    MICROSECONDS = "us"

    @classmethod
    def from_string(cls, unit: str) -> "EpochUnit":
        """
        Parse a unit name.

        Handles: ms, millis, milliseconds, us, micros, microseconds.

        Raises:
            ValueError: If the name is not recognized
        """
        mapping = {
            "ms": cls.MILLISECONDS,
            "millis": cls.MILLISECONDS,
            "milliseconds": cls.MILLISECONDS,
            "us": cls.MICROSECONDS,
            "micros": cls.MICROSECONDS,
            "microseconds": cls.MICROSECONDS,
        }
        try:
            return mapping[unit.lower().strip()]
        except KeyError:
            raise ValueError(f"Unknown epoch unit: {unit}") from None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_rfc3339(value: datetime) -> str:
    """
    Render an aware datetime as RFC 3339 in UTC.

    Fractional seconds are dropped when zero and shown at millisecond
    precision when the value falls on a whole millisecond.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)

    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return value.isoformat(timespec=timespec)


def epoch_to_rfc3339(value: int, unit: EpochUnit = EpochUnit.MILLISECONDS) -> str:
    """
    Convert an epoch integer to an RFC 3339 UTC string.

    Raises:
        TimestampResolutionError: If the value is outside the datetime range
    """
    try:
        if unit is EpochUnit.MILLISECONDS:
            delta = timedelta(milliseconds=value)
        else:
            delta = timedelta(microseconds=value)
        instant = _EPOCH + delta
    except OverflowError as e:
        raise TimestampResolutionError(
            "Epoch value out of range",
            epoch_value=value,
            unit=unit.value,
        ) from e
    return format_rfc3339(instant)


def resolve_timestamp(
    ts_rfc3339: str | None,
    ts_epoch: int | None,
    epoch_unit: EpochUnit = EpochUnit.MILLISECONDS,
    clock: Clock | None = None,
) -> str:
    """
    Pick the canonical timestamp for one record.

    Precedence: the RFC 3339 string verbatim, then the epoch value, then
    the current time from ``clock``.

    Args:
        ts_rfc3339: RFC 3339 string from the source, used unchanged
        ts_epoch: Epoch integer from the source
        epoch_unit: How to read ``ts_epoch``
        clock: Source of "now"; defaults to the UTC wall clock

    Returns:
        RFC 3339 timestamp string
    """
    if ts_rfc3339 is not None:
        return ts_rfc3339
    if ts_epoch is not None:
        return epoch_to_rfc3339(ts_epoch, epoch_unit)
    return format_rfc3339((clock or utc_now)())
