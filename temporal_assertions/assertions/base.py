"""
Base Assertion Adapter and Shared Field Mixins

Every adapter wraps one nullable subject and evaluates one matcher per method
call through the ``AssertionReporter``. Methods return a continuation so
several checks can be chained on the same subject:

```python
should(date(2024, 2, 29)).have_year(2024).and_.have_day(29)
```

## Helpers

- ``_be`` / ``_not_be``: null-aware equality
- ``_compare``: ordering, absent subject always fails
- ``_close_to``: tolerance check, negative precision rejected up front
- ``_feature``: field or derived value comparison
- ``_satisfy``: boolean property

## Mixins

Field assertions shared between types live in mixins so that, for instance,
``LocalDateAssertions`` and ``ZonedDateTimeAssertions`` read the year the same
way. Mixins only rely on the helpers above.
"""

from datetime import date, datetime, time
from typing import Any, Callable, Optional, Union

from ..core import (
    AndConstraint,
    AndWhichConstraint,
    AssertionReporter,
    HasFeature,
    IsCloseTo,
    IsEqualTo,
    IsOrdered,
    Satisfies,
    TemporalMatcher,
    get_reporter,
)
from ..models import IsoDayOfWeek
from ..utils import OffsetLike, clock_hour_of_half_day, microsecond_of_day, offset_of, to_offset


class TemporalAssertions:
    """Base class for all assertion adapters.

    Attributes:
        subject_type: Name of the subject's type used in failure messages
    """

    subject_type = "value"

    def __init__(self, subject: Any, name: Optional[str] = None, reporter: Optional[AssertionReporter] = None):
        """Initialize the adapter.

        Args:
            subject: The value under test (may be None)
            name: Overrides the type name in failure messages
            reporter: Reporter to evaluate with (defaults to the global one)
        """
        self._subject = subject
        self._name = name
        self._reporter = reporter

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def identifier(self) -> str:
        return self._name or self.subject_type

    @property
    def reporter(self) -> AssertionReporter:
        return self._reporter or get_reporter()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._subject!r})"

    def _evaluate(self, matcher: TemporalMatcher, because: str, because_args) -> AndConstraint:
        self.reporter.evaluate(self.identifier, self._subject, matcher, because, because_args)
        return AndConstraint(self)

    def _be(self, expected: Any, because: str = "", because_args=(),
            equals: Optional[Callable[[Any, Any], bool]] = None) -> AndConstraint:
        return self._evaluate(IsEqualTo(expected, equals), because, because_args)

    def _not_be(self, unexpected: Any, because: str = "", because_args=(),
                equals: Optional[Callable[[Any, Any], bool]] = None) -> AndConstraint:
        return self._evaluate(IsEqualTo(unexpected, equals, negated=True), because, because_args)

    def _compare(self, relation: str, expected: Any, because: str = "", because_args=(),
                 key: Optional[Callable[[Any], Any]] = None) -> AndConstraint:
        return self._evaluate(IsOrdered(relation, expected, key), because, because_args)

    def _close_to(self, expected: Any, precision: Any, because: str = "", because_args=(),
                  negated: bool = False, distance: Optional[Callable[[Any, Any], Any]] = None) -> AndConstraint:
        matcher = IsCloseTo(expected, precision, distance, negated=negated)
        return self._evaluate(matcher, because, because_args)

    def _feature(self, label: str, getter: Callable[[Any], Any], expected: Any, because: str = "",
                 because_args=(), negated: bool = False,
                 compare: Optional[Callable[[Any, Any], bool]] = None,
                 describe_actual: Optional[Callable[[Any], str]] = None) -> AndConstraint:
        matcher = HasFeature(label, getter, expected, compare, negated=negated, describe_actual=describe_actual)
        return self._evaluate(matcher, because, because_args)

    def _satisfy(self, label: str, predicate: Callable[[Any], bool], because: str = "", because_args=(),
                 negated: bool = False, describe_actual: Optional[Callable[[Any], str]] = None) -> AndConstraint:
        matcher = Satisfies(label, predicate, describe_actual, negated=negated)
        return self._evaluate(matcher, because, because_args)


# =============================================================================
# Ordering
# =============================================================================

class OrderingMixin:
    """Comparisons using the subject type's total order."""

    def be_greater_than(self, expected, because: str = "", *because_args) -> AndConstraint:
        return self._compare('greater_than', expected, because, because_args)

    def be_greater_than_or_equal_to(self, expected, because: str = "", *because_args) -> AndConstraint:
        return self._compare('greater_than_or_equal_to', expected, because, because_args)

    def be_less_than(self, expected, because: str = "", *because_args) -> AndConstraint:
        return self._compare('less_than', expected, because, because_args)

    def be_less_than_or_equal_to(self, expected, because: str = "", *because_args) -> AndConstraint:
        return self._compare('less_than_or_equal_to', expected, because, because_args)


# =============================================================================
# Date Fields
# =============================================================================

def _day_of_week(value) -> IsoDayOfWeek:
    return IsoDayOfWeek(value.isoweekday())


def _day_of_year(value) -> int:
    return value.timetuple().tm_yday


class DateFieldsMixin:
    """Calendar fields of anything with ``year``, ``month``, ``day`` and ``isoweekday()``."""

    def have_year(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("year", lambda s: s.year, expected, because, because_args)

    def not_have_year(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("year", lambda s: s.year, unexpected, because, because_args, negated=True)

    def have_month(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("month", lambda s: s.month, expected, because, because_args)

    def not_have_month(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("month", lambda s: s.month, unexpected, because, because_args, negated=True)

    def have_day(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day", lambda s: s.day, expected, because, because_args)

    def not_have_day(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day", lambda s: s.day, unexpected, because, because_args, negated=True)

    def have_day_of_week(self, expected: Union[IsoDayOfWeek, int], because: str = "", *because_args) -> AndConstraint:
        return self._feature("day of week", _day_of_week, IsoDayOfWeek(expected), because, because_args)

    def not_have_day_of_week(self, unexpected: Union[IsoDayOfWeek, int], because: str = "",
                             *because_args) -> AndConstraint:
        return self._feature("day of week", _day_of_week, IsoDayOfWeek(unexpected), because, because_args,
                             negated=True)

    def have_day_of_year(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day of year", _day_of_year, expected, because, because_args)

    def not_have_day_of_year(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day of year", _day_of_year, unexpected, because, because_args, negated=True)


# =============================================================================
# Time Fields
# =============================================================================

class TimeFieldsMixin:
    """Clock fields of a ``time`` or ``datetime`` subject."""

    def have_hour(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("hour", lambda s: s.hour, expected, because, because_args)

    def not_have_hour(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("hour", lambda s: s.hour, unexpected, because, because_args, negated=True)

    def have_clock_hour_of_half_day(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("clock hour of half day", clock_hour_of_half_day, expected, because, because_args)

    def not_have_clock_hour_of_half_day(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("clock hour of half day", clock_hour_of_half_day, unexpected, because,
                             because_args, negated=True)

    def have_minute(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("minute", lambda s: s.minute, expected, because, because_args)

    def not_have_minute(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("minute", lambda s: s.minute, unexpected, because, because_args, negated=True)

    def have_second(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("second", lambda s: s.second, expected, because, because_args)

    def not_have_second(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("second", lambda s: s.second, unexpected, because, because_args, negated=True)

    def have_millisecond(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("millisecond", lambda s: s.microsecond // 1000, expected, because, because_args)

    def not_have_millisecond(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("millisecond", lambda s: s.microsecond // 1000, unexpected, because,
                             because_args, negated=True)

    def have_microsecond(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        """Microsecond of the second (0-999999)."""
        return self._feature("microsecond", lambda s: s.microsecond, expected, because, because_args)

    def not_have_microsecond(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("microsecond", lambda s: s.microsecond, unexpected, because, because_args,
                             negated=True)

    def have_microsecond_of_day(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("microsecond of day", microsecond_of_day, expected, because, because_args)

    def not_have_microsecond_of_day(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("microsecond of day", microsecond_of_day, unexpected, because, because_args,
                             negated=True)


# =============================================================================
# Offset
# =============================================================================

class OffsetFieldMixin:
    """UTC offset of an aware subject. Expected offsets may be timedeltas."""

    @staticmethod
    def _offset(subject):
        return offset_of(subject)

    def have_offset(self, expected: OffsetLike, because: str = "", *because_args) -> AndWhichConstraint:
        expected = to_offset(expected)
        self._feature("offset", self._offset, expected, because, because_args)
        return AndWhichConstraint(self, self._offset(self._subject))

    def not_have_offset(self, unexpected: OffsetLike, because: str = "", *because_args) -> AndConstraint:
        return self._feature("offset", self._offset, to_offset(unexpected), because, because_args, negated=True)


# =============================================================================
# Local Parts
# =============================================================================

def _local_date_time(value):
    return value.replace(tzinfo=None)


class LocalPartsMixin:
    """Calendar date and wall-clock time of a ``datetime`` subject.

    For aware subjects both parts are read in the subject's own offset.
    """

    def have_date(self, expected: date, because: str = "", *because_args) -> AndWhichConstraint:
        self._feature("date", lambda s: s.date(), expected, because, because_args)
        return AndWhichConstraint(self, self._subject.date())

    def not_have_date(self, unexpected: date, because: str = "", *because_args) -> AndConstraint:
        return self._feature("date", lambda s: s.date(), unexpected, because, because_args, negated=True)

    def have_time_of_day(self, expected: time, because: str = "", *because_args) -> AndWhichConstraint:
        self._feature("time of day", lambda s: s.time(), expected, because, because_args)
        return AndWhichConstraint(self, self._subject.time())

    def not_have_time_of_day(self, unexpected: time, because: str = "", *because_args) -> AndConstraint:
        return self._feature("time of day", lambda s: s.time(), unexpected, because, because_args, negated=True)


class LocalDateTimeMixin:
    """Wall-clock ``datetime`` of an aware subject, with the zone dropped."""

    def have_local_date_time(self, expected: datetime, because: str = "", *because_args) -> AndWhichConstraint:
        self._feature("local date and time", _local_date_time, expected, because, because_args)
        return AndWhichConstraint(self, _local_date_time(self._subject))

    def not_have_local_date_time(self, unexpected: datetime, because: str = "", *because_args) -> AndConstraint:
        return self._feature("local date and time", _local_date_time, unexpected, because, because_args,
                             negated=True)


def same_local_value_and_offset(first, second) -> bool:
    """Equality of aware values on wall-clock value and offset, not on the instant."""
    return (
        first.replace(tzinfo=None) == second.replace(tzinfo=None)
        and first.utcoffset() == second.utcoffset()
    )
