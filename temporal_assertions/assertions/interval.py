"""
Interval assertions.

An ``Interval`` is half-open and either end may be unbounded. Expected
instants are read the way ``InstantAssertions`` reads them: a naive value is
taken in the configured ``assumed_timezone`` and then converted to UTC.

``not_start_at`` and ``not_end_at`` pass without evaluating anything when the
interval has no such end.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional, Union

from ..core import AndConstraint
from ..models import Interval
from ..utils import ensure_timezone_aware, to_utc
from .base import TemporalAssertions

logger = logging.getLogger(__name__)


def _bounded_duration(interval: Interval) -> Optional[timedelta]:
    return interval.duration if interval.has_start and interval.has_end else None


def _missing_bound(interval: Interval) -> str:
    return "does not start" if not interval.has_start else "does not end"


def _present_and_equal(actual: Optional[datetime], expected: Optional[datetime]) -> bool:
    return actual is not None and actual == expected


class IntervalAssertions(TemporalAssertions):
    """Assertions for an ``Interval`` subject."""

    subject_type = "interval"

    def _as_instant(self, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(ensure_timezone_aware(value, self.reporter.config.assumed_timezone))

    def _describe(self, label: str, getter: Callable[[Interval], Any],
                  missing: Callable[[Interval], str]) -> Callable[[Interval], str]:
        def describe(interval: Interval) -> str:
            value = getter(interval)
            if value is None:
                return f"{self.identifier} {missing(interval)}"
            return f"found {label} {self.reporter.format(value)}"
        return describe

    def be(self, expected: Optional[Interval], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[Interval], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)

    def have_duration(self, expected: timedelta, because: str = "", *because_args) -> AndConstraint:
        """Assert the length of the interval. An unbounded interval never matches."""
        return self._feature("duration", _bounded_duration, expected, because, because_args,
                             compare=_present_and_equal,
                             describe_actual=self._describe("duration", _bounded_duration, _missing_bound))

    def not_have_duration(self, unexpected: timedelta, because: str = "", *because_args) -> AndConstraint:
        return self._feature("duration", _bounded_duration, unexpected, because, because_args, negated=True,
                             compare=_present_and_equal)

    def have_start(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a start", lambda s: s.has_start, because, because_args,
                             describe_actual=lambda s: f"{self.identifier} starts at StartOfTime")

    def not_have_start(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have a start", lambda s: s.has_start, because, because_args, negated=True,
                             describe_actual=lambda s: f"{self.identifier} starts at {self.reporter.format(s.start)}")

    def have_end(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have an end", lambda s: s.has_end, because, because_args,
                             describe_actual=lambda s: f"{self.identifier} ends at EndOfTime")

    def not_have_end(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("have an end", lambda s: s.has_end, because, because_args, negated=True,
                             describe_actual=lambda s: f"{self.identifier} ends at {self.reporter.format(s.end)}")

    def start_at(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        """Assert the inclusive start. An interval without a start never matches."""
        return self._feature("start", lambda s: s.start, self._as_instant(expected), because, because_args,
                             compare=_present_and_equal,
                             describe_actual=self._describe("start", lambda s: s.start, lambda s: "does not start"))

    def not_start_at(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        if self._subject is not None and not self._subject.has_start:
            logger.debug(f"Skipping not_start_at on {self._subject}: interval has no start")
            return AndConstraint(self)
        return self._feature("start", lambda s: s.start, self._as_instant(unexpected), because, because_args,
                             negated=True, compare=_present_and_equal)

    def end_at(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        """Assert the exclusive end. An interval without an end never matches."""
        return self._feature("end", lambda s: s.end, self._as_instant(expected), because, because_args,
                             compare=_present_and_equal,
                             describe_actual=self._describe("end", lambda s: s.end, lambda s: "does not end"))

    def not_end_at(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        if self._subject is not None and not self._subject.has_end:
            logger.debug(f"Skipping not_end_at on {self._subject}: interval has no end")
            return AndConstraint(self)
        return self._feature("end", lambda s: s.end, self._as_instant(unexpected), because, because_args,
                             negated=True, compare=_present_and_equal)

    def contain(self, value: Union[datetime, Interval], because: str = "", *because_args) -> AndConstraint:
        if not isinstance(value, Interval):
            value = self._as_instant(value)
        label = f"contain {self.reporter.format(value)}"
        return self._satisfy(label, lambda s: s.contains(value), because, because_args)

    def not_contain(self, value: Union[datetime, Interval], because: str = "", *because_args) -> AndConstraint:
        if not isinstance(value, Interval):
            value = self._as_instant(value)
        label = f"contain {self.reporter.format(value)}"
        return self._satisfy(label, lambda s: s.contains(value), because, because_args, negated=True)
