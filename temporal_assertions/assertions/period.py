"""
Period assertions.

Periods are ``dateutil.relativedelta`` values holding relative fields only.
``relativedelta`` normalises on construction (25 hours become 1 day and
1 hour), and ``weeks`` is derived from ``days``; the field assertions read the
normalised fields.
"""

from datetime import timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from ..core import AndConstraint
from .base import TemporalAssertions

_DATE_FIELDS = ('years', 'months', 'days')
_TIME_FIELDS = ('hours', 'minutes', 'seconds', 'microseconds')


def as_duration(period: relativedelta) -> Optional[timedelta]:
    """Exact length of a period, or None when it has years or months."""
    if period.years or period.months:
        return None
    return timedelta(days=period.days, hours=period.hours, minutes=period.minutes,
                     seconds=period.seconds, microseconds=period.microseconds)


def same_period(actual: relativedelta, expected: Union[relativedelta, timedelta]) -> bool:
    """Field-wise equality; a duration only matches a period without years or months."""
    if isinstance(expected, timedelta):
        return as_duration(actual) == expected
    return actual == expected


def has_date_component(period: relativedelta) -> bool:
    return any(getattr(period, name) for name in _DATE_FIELDS)


def has_time_component(period: relativedelta) -> bool:
    return any(getattr(period, name) for name in _TIME_FIELDS)


class PeriodAssertions(TemporalAssertions):
    """Assertions for a ``relativedelta`` subject."""

    subject_type = "period"

    def be(self, expected: Optional[Union[relativedelta, timedelta]], because: str = "",
           *because_args) -> AndConstraint:
        return self._be(expected, because, because_args, equals=same_period)

    def not_be(self, unexpected: Optional[Union[relativedelta, timedelta]], because: str = "",
               *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args, equals=same_period)

    def be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: not s, because, because_args)

    def not_be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: not s, because, because_args, negated=True)

    def _field(self, name: str, expected: int, because: str, because_args, negated: bool = False):
        return self._feature(name, lambda s: getattr(s, name), expected, because, because_args, negated=negated)

    def have_years(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('years', expected, because, because_args)

    def not_have_years(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('years', unexpected, because, because_args, negated=True)

    def have_months(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('months', expected, because, because_args)

    def not_have_months(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('months', unexpected, because, because_args, negated=True)

    def have_weeks(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        """Whole weeks in the ``days`` field, truncated toward zero."""
        return self._field('weeks', expected, because, because_args)

    def not_have_weeks(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('weeks', unexpected, because, because_args, negated=True)

    def have_days(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('days', expected, because, because_args)

    def not_have_days(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('days', unexpected, because, because_args, negated=True)

    def have_hours(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('hours', expected, because, because_args)

    def not_have_hours(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('hours', unexpected, because, because_args, negated=True)

    def have_minutes(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('minutes', expected, because, because_args)

    def not_have_minutes(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('minutes', unexpected, because, because_args, negated=True)

    def have_seconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('seconds', expected, because, because_args)

    def not_have_seconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('seconds', unexpected, because, because_args, negated=True)

    def have_microseconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('microseconds', expected, because, because_args)

    def not_have_microseconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._field('microseconds', unexpected, because, because_args, negated=True)

    def have_date_component(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a date component", has_date_component, because, because_args)

    def not_have_date_component(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a date component", has_date_component, because, because_args, negated=True)

    def have_time_component(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a time component", has_time_component, because, because_args)

    def not_have_time_component(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a time component", has_time_component, because, because_args, negated=True)
