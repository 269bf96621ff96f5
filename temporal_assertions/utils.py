"""
Temporal Utilities - Consolidated Module

Small helpers shared by the models and assertion adapters: timezone
normalisation, offset conversion and the component/total breakdown of
durations. Nothing here does calendar arithmetic; it only reads values the
standard library already computes.
"""

import logging
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

MICROSECONDS_PER_MILLISECOND = 1_000
MICROSECONDS_PER_SECOND = 1_000_000
MICROSECONDS_PER_MINUTE = 60 * MICROSECONDS_PER_SECOND
MICROSECONDS_PER_HOUR = 60 * MICROSECONDS_PER_MINUTE
MICROSECONDS_PER_DAY = 24 * MICROSECONDS_PER_HOUR

OffsetLike = Union[timezone, timedelta]


# =============================================================================
# Timezone Utilities
# =============================================================================

def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to convert to UTC

    Returns:
        Datetime in UTC timezone, or None if input is None

    Examples:
        >>> dt = datetime(2024, 1, 1, 10, 0, tzinfo=ZoneInfo('America/New_York'))
        >>> to_utc(dt)  # -> 2024-01-01 15:00:00+00:00
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def ensure_timezone_aware(dt: datetime, assumed_tz: Optional[str] = "UTC") -> datetime:
    """Ensure datetime has timezone information.

    If the datetime is naive, adds the specified timezone. If already
    timezone-aware, returns unchanged.

    Args:
        dt: Datetime to make timezone-aware
        assumed_tz: Timezone to assume for naive datetimes (default: "UTC")

    Returns:
        Timezone-aware datetime, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        tz = timezone.utc if assumed_tz in (None, "UTC") else ZoneInfo(assumed_tz)
        logger.debug(f"Assuming {tz} for naive datetime {dt.isoformat()}")
        return dt.replace(tzinfo=tz)

    return dt


def is_aware(value: Union[datetime, time]) -> bool:
    """Check whether a datetime or time carries a usable UTC offset."""
    if value.tzinfo is None:
        return False
    if isinstance(value, datetime):
        return value.utcoffset() is not None
    return value.tzinfo.utcoffset(None) is not None


def is_utc(tz: Optional[tzinfo]) -> bool:
    """Check if a tzinfo is the UTC singleton or the UTC zone."""
    if tz is None:
        return False
    if tz is timezone.utc:
        return True
    return isinstance(tz, ZoneInfo) and tz.key in ("UTC", "Etc/UTC")


def zone_key(tz: Optional[tzinfo]) -> Optional[str]:
    """Return the IANA key of a ZoneInfo, or None for other tzinfo objects."""
    return getattr(tz, 'key', None)


# =============================================================================
# Offset Utilities
# =============================================================================

def to_offset(value: Optional[OffsetLike]) -> Optional[timezone]:
    """Normalise a timedelta or timezone into a fixed-offset timezone.

    Args:
        value: A ``timezone`` or a ``timedelta`` giving the offset from UTC

    Returns:
        The equivalent ``timezone``, or None if input is None

    Raises:
        TypeError: If the value is neither a timezone nor a timedelta
    """
    if value is None:
        return None
    if isinstance(value, timezone):
        return value
    if isinstance(value, timedelta):
        return timezone(value)
    raise TypeError(f"Expected timezone or timedelta, got {type(value).__name__}")


def offset_delta(value: Optional[OffsetLike]) -> Optional[timedelta]:
    """Return the UTC offset of a timezone (or timedelta) as a timedelta."""
    if value is None:
        return None
    if isinstance(value, timedelta):
        return value
    return value.utcoffset(None)


def offset_of(value: Union[datetime, time]) -> Optional[timezone]:
    """Return the fixed offset in effect for an aware datetime or time."""
    if value is None or value.tzinfo is None:
        return None
    delta = value.utcoffset()
    return None if delta is None else timezone(delta)


def format_offset(value: OffsetLike) -> str:
    """Format an offset as ``+HH:MM`` (with seconds when present)."""
    delta = offset_delta(value)
    sign = "-" if delta < timedelta(0) else "+"
    total = abs(total_microseconds(delta)) // MICROSECONDS_PER_SECOND
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


# =============================================================================
# Duration Utilities
# =============================================================================

def total_microseconds(delta: timedelta) -> int:
    """Exact length of a timedelta in microseconds."""
    return (delta.days * 86_400 + delta.seconds) * MICROSECONDS_PER_SECOND + delta.microseconds


def duration_components(delta: timedelta) -> dict:
    """Split a timedelta into sign-carrying components truncated toward zero.

    Python normalises ``timedelta(hours=-1)`` to ``-1 day, 23:00:00``; this
    breakdown instead reports ``days=0, hours=-1``.

    Returns:
        Dict with days, hours, minutes, seconds, milliseconds and microseconds
        (the microseconds are the sub-millisecond remainder)
    """
    micros = total_microseconds(delta)
    sign = -1 if micros < 0 else 1
    remaining = abs(micros)

    days, remaining = divmod(remaining, MICROSECONDS_PER_DAY)
    hours, remaining = divmod(remaining, MICROSECONDS_PER_HOUR)
    minutes, remaining = divmod(remaining, MICROSECONDS_PER_MINUTE)
    seconds, remaining = divmod(remaining, MICROSECONDS_PER_SECOND)
    milliseconds, microseconds = divmod(remaining, MICROSECONDS_PER_MILLISECOND)

    return {
        'days': sign * days,
        'hours': sign * hours,
        'minutes': sign * minutes,
        'seconds': sign * seconds,
        'milliseconds': sign * milliseconds,
        'microseconds': sign * microseconds,
    }


def duration_total(delta: timedelta, unit: str) -> float:
    """Length of a timedelta expressed as a float number of ``unit``.

    Args:
        delta: The duration
        unit: One of days, hours, minutes, seconds, milliseconds, microseconds

    Raises:
        ValueError: If the unit is unknown
    """
    per_unit = {
        'days': MICROSECONDS_PER_DAY,
        'hours': MICROSECONDS_PER_HOUR,
        'minutes': MICROSECONDS_PER_MINUTE,
        'seconds': MICROSECONDS_PER_SECOND,
        'milliseconds': MICROSECONDS_PER_MILLISECOND,
        'microseconds': 1,
    }
    if unit not in per_unit:
        raise ValueError(f"Unknown duration unit: {unit}")
    return total_microseconds(delta) / per_unit[unit]


def is_approximately_equal(value: float, expected: float, precision: float) -> bool:
    """True when ``value`` lies within ``precision`` of ``expected``."""
    return abs(value - expected) <= precision


def distance(first, second):
    """Non-negative difference of two ordered values.

    The larger operand is always the minuend so the result never goes negative,
    which keeps it comparable with a non-negative precision.
    """
    return first - second if first > second else second - first


# =============================================================================
# Time-of-day Utilities
# =============================================================================

def microsecond_of_day(value: Union[datetime, time]) -> int:
    """Microseconds elapsed since midnight for a datetime or time."""
    return (
        value.hour * MICROSECONDS_PER_HOUR
        + value.minute * MICROSECONDS_PER_MINUTE
        + value.second * MICROSECONDS_PER_SECOND
        + value.microsecond
    )


def clock_hour_of_half_day(value: Union[datetime, time]) -> int:
    """Hour on a 12-hour clock, in the range 1-12."""
    hour = value.hour % 12
    return 12 if hour == 0 else hour
