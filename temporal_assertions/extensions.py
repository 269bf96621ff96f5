"""
Entry point selecting an assertion adapter by the subject's type.

```python
from temporal_assertions import should

should(timedelta(seconds=5)).be_close_to(timedelta(seconds=7), timedelta(seconds=3))
should(AnnualDate(month=2, day=29)).be_valid_in_year(2024)
```

Dispatch order matters: ``datetime`` is a subclass of ``date``, so it is
checked first. Aware datetimes are routed by their tzinfo:

- ``ZoneInfo``            -> ZonedDateTimeAssertions
- ``timezone.utc``        -> InstantAssertions
- any other tzinfo        -> OffsetDateTimeAssertions

``None`` carries no type and cannot be dispatched; construct the adapter for
the expected type directly to assert on an absent value.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from .assertions import (
    AnnualDateAssertions,
    DateIntervalAssertions,
    DurationAssertions,
    InstantAssertions,
    IntervalAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDateAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    TemporalAssertions,
    ZonedDateTimeAssertions,
)
from .core import AssertionReporter
from .exceptions import UnsupportedSubjectError
from .models import AnnualDate, DateInterval, Interval, OffsetDate
from .utils import is_aware

logger = logging.getLogger(__name__)

# Checked in order; only types without subclass ambiguity live here
_SIMPLE_ADAPTERS = (
    (AnnualDate, AnnualDateAssertions),
    (DateInterval, DateIntervalAssertions),
    (Interval, IntervalAssertions),
    (OffsetDate, OffsetDateAssertions),
    (relativedelta, PeriodAssertions),
    (timedelta, DurationAssertions),
    (timezone, OffsetAssertions),
)


def _datetime_adapter(subject: datetime) -> type:
    if not is_aware(subject):
        return LocalDateTimeAssertions
    if isinstance(subject.tzinfo, ZoneInfo):
        return ZonedDateTimeAssertions
    if subject.tzinfo is timezone.utc:
        return InstantAssertions
    return OffsetDateTimeAssertions


def adapter_for(subject: Any) -> type:
    """Return the adapter class for a subject.

    Raises:
        UnsupportedSubjectError: If the subject is None or of an unsupported type
    """
    if subject is None:
        raise UnsupportedSubjectError(subject)

    for value_type, adapter in _SIMPLE_ADAPTERS:
        if isinstance(subject, value_type):
            return adapter

    if isinstance(subject, datetime):
        return _datetime_adapter(subject)
    if isinstance(subject, date):
        return LocalDateAssertions
    if isinstance(subject, time):
        return OffsetTimeAssertions if is_aware(subject) else LocalTimeAssertions

    raise UnsupportedSubjectError(subject)


def should(subject: Any, name: Optional[str] = None,
           reporter: Optional[AssertionReporter] = None) -> TemporalAssertions:
    """Wrap a temporal value in the matching assertion adapter.

    Args:
        subject: The value under test
        name: Overrides the type name in failure messages
        reporter: Reporter to evaluate with (defaults to the global one)

    Returns:
        The adapter instance for the subject's type

    Raises:
        UnsupportedSubjectError: If the subject is None or of an unsupported type
    """
    adapter = adapter_for(subject)
    logger.debug(f"Selected {adapter.__name__} for {type(subject).__name__}")
    return adapter(subject, name=name, reporter=reporter)
