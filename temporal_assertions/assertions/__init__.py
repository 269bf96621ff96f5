"""
Assertion adapters, one per temporal type.

Each adapter wraps a nullable subject; use ``temporal_assertions.should()`` to
pick one by the subject's type, or construct an adapter directly (required
when the subject is None).
"""

from .annual_date import AnnualDateAssertions
from .base import TemporalAssertions
from .date_interval import DateIntervalAssertions
from .duration import DurationAssertions
from .instant import InstantAssertions
from .interval import IntervalAssertions
from .local_date import LocalDateAssertions
from .local_date_time import LocalDateTimeAssertions
from .local_time import LocalTimeAssertions
from .offset import OffsetAssertions
from .offset_date import OffsetDateAssertions
from .offset_date_time import OffsetDateTimeAssertions
from .offset_time import OffsetTimeAssertions
from .period import PeriodAssertions
from .zoned_date_time import ZonedDateTimeAssertions

__all__ = [
    "TemporalAssertions",
    "AnnualDateAssertions",
    "DateIntervalAssertions",
    "DurationAssertions",
    "InstantAssertions",
    "IntervalAssertions",
    "LocalDateAssertions",
    "LocalDateTimeAssertions",
    "LocalTimeAssertions",
    "OffsetAssertions",
    "OffsetDateAssertions",
    "OffsetDateTimeAssertions",
    "OffsetTimeAssertions",
    "PeriodAssertions",
    "ZonedDateTimeAssertions",
]
