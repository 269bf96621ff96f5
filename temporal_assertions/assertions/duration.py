"""
Duration assertions.

Durations are ``timedelta`` values. Component checks (``have_hours`` and
friends) read sign-carrying components truncated toward zero, so minus ninety
minutes has hours -1 and minutes -30. Total checks compare a float total
within a precision that defaults to ``AssertionConfig.default_precision``.
"""

from datetime import timedelta
from typing import Optional

from ..core import AndConstraint
from ..core.matchers import is_negative
from ..exceptions import PrecisionOutOfRangeError
from ..utils import duration_components, duration_total, is_approximately_equal
from .base import OrderingMixin, TemporalAssertions

_ZERO = timedelta(0)


class DurationAssertions(OrderingMixin, TemporalAssertions):
    """Assertions for a ``timedelta`` subject."""

    subject_type = "duration"

    def be(self, expected: Optional[timedelta], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[timedelta], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)

    def be_positive(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be positive", lambda s: s > _ZERO, because, because_args)

    def be_negative(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be negative", lambda s: s < _ZERO, because, because_args)

    def be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: s == _ZERO, because, because_args)

    def not_be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: s == _ZERO, because, because_args, negated=True)

    def be_close_to(self, expected: timedelta, precision: timedelta, because: str = "",
                    *because_args) -> AndConstraint:
        """Assert that the subject lies within ``precision`` of ``expected`` (inclusive).

        Raises:
            PrecisionOutOfRangeError: If ``precision`` is negative
        """
        return self._close_to(expected, precision, because, because_args)

    def not_be_close_to(self, unexpected: timedelta, precision: timedelta, because: str = "",
                        *because_args) -> AndConstraint:
        return self._close_to(unexpected, precision, because, because_args, negated=True)

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def _component(self, unit: str, expected: int, because: str, because_args, negated: bool = False):
        return self._feature(unit, lambda s: duration_components(s)[unit], expected, because, because_args,
                             negated=negated)

    def have_days(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('days', expected, because, because_args)

    def not_have_days(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('days', unexpected, because, because_args, negated=True)

    def have_hours(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('hours', expected, because, because_args)

    def not_have_hours(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('hours', unexpected, because, because_args, negated=True)

    def have_minutes(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('minutes', expected, because, because_args)

    def not_have_minutes(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('minutes', unexpected, because, because_args, negated=True)

    def have_seconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('seconds', expected, because, because_args)

    def not_have_seconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('seconds', unexpected, because, because_args, negated=True)

    def have_milliseconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('milliseconds', expected, because, because_args)

    def not_have_milliseconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('milliseconds', unexpected, because, because_args, negated=True)

    def have_microseconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        """Sub-millisecond remainder (0-999, carrying the duration's sign)."""
        return self._component('microseconds', expected, because, because_args)

    def not_have_microseconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._component('microseconds', unexpected, because, because_args, negated=True)

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    def _total(self, unit: str, expected: float, precision: Optional[float], because: str, because_args,
               negated: bool = False) -> AndConstraint:
        if precision is None:
            precision = self.reporter.config.default_precision
        if is_negative(precision):
            raise PrecisionOutOfRangeError(precision)

        return self._feature(f"total {unit}", lambda s: duration_total(s, unit), expected, because, because_args,
                             negated=negated,
                             compare=lambda actual, target: is_approximately_equal(actual, target, precision))

    def have_total_days(self, expected: float, precision: Optional[float] = None, because: str = "",
                        *because_args) -> AndConstraint:
        return self._total('days', expected, precision, because, because_args)

    def not_have_total_days(self, unexpected: float, precision: Optional[float] = None, because: str = "",
                            *because_args) -> AndConstraint:
        return self._total('days', unexpected, precision, because, because_args, negated=True)

    def have_total_hours(self, expected: float, precision: Optional[float] = None, because: str = "",
                         *because_args) -> AndConstraint:
        return self._total('hours', expected, precision, because, because_args)

    def not_have_total_hours(self, unexpected: float, precision: Optional[float] = None, because: str = "",
                             *because_args) -> AndConstraint:
        return self._total('hours', unexpected, precision, because, because_args, negated=True)

    def have_total_minutes(self, expected: float, precision: Optional[float] = None, because: str = "",
                           *because_args) -> AndConstraint:
        return self._total('minutes', expected, precision, because, because_args)

    def not_have_total_minutes(self, unexpected: float, precision: Optional[float] = None, because: str = "",
                               *because_args) -> AndConstraint:
        return self._total('minutes', unexpected, precision, because, because_args, negated=True)

    def have_total_seconds(self, expected: float, precision: Optional[float] = None, because: str = "",
                           *because_args) -> AndConstraint:
        return self._total('seconds', expected, precision, because, because_args)

    def not_have_total_seconds(self, unexpected: float, precision: Optional[float] = None, because: str = "",
                               *because_args) -> AndConstraint:
        return self._total('seconds', unexpected, precision, because, because_args, negated=True)

    def have_total_milliseconds(self, expected: float, precision: Optional[float] = None, because: str = "",
                                *because_args) -> AndConstraint:
        return self._total('milliseconds', expected, precision, because, because_args)

    def not_have_total_milliseconds(self, unexpected: float, precision: Optional[float] = None,
                                    because: str = "", *because_args) -> AndConstraint:
        return self._total('milliseconds', unexpected, precision, because, because_args, negated=True)

    def have_total_microseconds(self, expected: float, precision: Optional[float] = None, because: str = "",
                                *because_args) -> AndConstraint:
        return self._total('microseconds', expected, precision, because, because_args)

    def not_have_total_microseconds(self, unexpected: float, precision: Optional[float] = None,
                                    because: str = "", *because_args) -> AndConstraint:
        return self._total('microseconds', unexpected, precision, because, because_args, negated=True)
