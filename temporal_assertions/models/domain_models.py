"""
Temporal Value Models

Immutable value types for the temporal concepts the standard library has no
type for. Everything else (dates, times, datetimes, durations, offsets,
periods) uses ``datetime``, ``zoneinfo`` and ``dateutil`` directly.

Organized by concept:
1. Supporting enums
2. Annual dates (a month and day that recur every year)
3. Date intervals (inclusive ranges of calendar dates)
4. Intervals (half-open ranges of instants, optionally unbounded)
5. Offset dates (a calendar date paired with a UTC offset)
"""

from calendar import isleap, monthrange
from datetime import date, datetime, timedelta, timezone
from enum import Enum, IntEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils import format_offset, to_offset, to_utc
from .base import DateTimeMixin, OrderedValueMixin

# 2000 is a leap year, so it admits every day that any year admits.
_LEAP_YEAR = 2000


# =============================================================================
# Supporting Enums
# =============================================================================

class CalendarSystem(str, Enum):
    """Calendar system a date interval is expressed in."""
    ISO = "ISO"
    GREGORIAN = "Gregorian"
    JULIAN = "Julian"
    COPTIC = "Coptic"
    ISLAMIC = "Islamic"
    PERSIAN = "Persian"
    HEBREW = "Hebrew"
    BADI = "Badi"
    UM_AL_QURA = "Um Al Qura"

    def __str__(self) -> str:
        return self.value


class IsoDayOfWeek(IntEnum):
    """Day of week numbered as ``date.isoweekday()`` numbers it."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self) -> str:
        return self.name.capitalize()


# =============================================================================
# Annual Date
# =============================================================================

class AnnualDate(OrderedValueMixin, BaseModel):
    """
    A month and day without a year, such as a birthday.

    Ordered by month, then day. 29 February is a valid annual date but is not
    valid in every year; see ``is_valid_year``.
    """

    month: int = Field(..., ge=1, le=12, description="Month of year (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_day_in_month(self):
        """Reject days the month never has, e.g. 30 February."""
        max_day = monthrange(_LEAP_YEAR, self.month)[1]
        if self.day > max_day:
            raise ValueError(f"Day {self.day} is not valid for month {self.month}")
        return self

    def _sort_key(self):
        return (self.month, self.day)

    def is_valid_year(self, year: int) -> bool:
        """Whether this day and month exist in ``year``."""
        return not (self.month == 2 and self.day == 29 and not isleap(year))

    def in_year(self, year: int) -> date:
        """The date this annual date falls on in ``year``.

        Raises:
            ValueError: If the annual date does not exist in that year
        """
        if not self.is_valid_year(year):
            raise ValueError(f"{self} is not valid in year {year}")
        return date(year, self.month, self.day)

    def __str__(self) -> str:
        return f"--{self.month:02d}-{self.day:02d}"


# =============================================================================
# Date Interval
# =============================================================================

class DateInterval(BaseModel):
    """
    An inclusive range of calendar dates.

    Both ``start`` and ``end`` belong to the interval; a one-day interval has
    ``start == end``.
    """

    start: date = Field(..., description="First date in the interval")
    end: date = Field(..., description="Last date in the interval (inclusive)")
    calendar: CalendarSystem = Field(default=CalendarSystem.ISO, description="Calendar system of both dates")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_order(self):
        """Ensure the interval does not end before it starts."""
        if self.end < self.start:
            raise ValueError(f"end ({self.end.isoformat()}) must not be before start ({self.start.isoformat()})")
        return self

    def contains(self, value: Union[date, 'DateInterval']) -> bool:
        """Whether a date, or every date of another interval, lies in this one.

        Raises:
            ValueError: If another interval uses a different calendar system
        """
        if isinstance(value, DateInterval):
            if value.calendar != self.calendar:
                raise ValueError(
                    f"Cannot compare intervals in calendars {self.calendar} and {value.calendar}"
                )
            return self.start <= value.start and value.end <= self.end
        if isinstance(value, datetime):
            value = value.date()
        return self.start <= value <= self.end

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()}]"


# =============================================================================
# Interval
# =============================================================================

class Interval(DateTimeMixin, BaseModel):
    """
    A half-open range of instants, ``[start, end)``.

    Either end may be ``None``, meaning the interval extends to the start or
    end of time. Naive datetimes and ISO strings are normalised to aware UTC
    by ``DateTimeMixin``.
    """

    start: Optional[datetime] = Field(None, description="Inclusive start, or None if unbounded")
    end: Optional[datetime] = Field(None, description="Exclusive end, or None if unbounded")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_order(self):
        """Ensure the interval does not end before it starts."""
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError(f"end ({self.end.isoformat()}) must not be before start ({self.start.isoformat()})")
        return self

    @property
    def has_start(self) -> bool:
        return self.start is not None

    @property
    def has_end(self) -> bool:
        return self.end is not None

    @property
    def duration(self) -> timedelta:
        """Length of the interval.

        Raises:
            ValueError: If either end is unbounded
        """
        if not (self.has_start and self.has_end):
            raise ValueError(f"Interval {self} is unbounded and has no duration")
        return self.end - self.start

    def contains(self, value: Union[datetime, 'Interval']) -> bool:
        """Whether an instant, or all of another interval, lies in this one."""
        if isinstance(value, Interval):
            starts_inside = self.start is None or (value.start is not None and self.start <= value.start)
            ends_inside = self.end is None or (value.end is not None and value.end <= self.end)
            return starts_inside and ends_inside

        instant = to_utc(value)
        if self.start is not None and instant < self.start:
            return False
        if self.end is not None and instant >= self.end:
            return False
        return True

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        start = self.start.isoformat() if self.has_start else "StartOfTime"
        end = self.end.isoformat() if self.has_end else "EndOfTime"
        return f"{start}/{end}"


# =============================================================================
# Offset Date
# =============================================================================

class OffsetDate(BaseModel):
    """
    A calendar date with a fixed offset from UTC.

    Two offset dates are equal only when both the date and the offset match.
    A ``timedelta`` is accepted for the offset.
    """

    local_date: date = Field(..., description="The calendar date")
    offset: timezone = Field(..., description="Offset from UTC")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator('offset', mode='before')
    @classmethod
    def validate_offset(cls, v):
        """Accept a timedelta as the offset."""
        try:
            return to_offset(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @property
    def year(self) -> int:
        return self.local_date.year

    @property
    def month(self) -> int:
        return self.local_date.month

    @property
    def day(self) -> int:
        return self.local_date.day

    def isoweekday(self) -> int:
        return self.local_date.isoweekday()

    def timetuple(self):
        return self.local_date.timetuple()

    def __str__(self) -> str:
        return f"{self.local_date.isoformat()}{format_offset(self.offset)}"
