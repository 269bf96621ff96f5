from datetime import datetime, timedelta
from typing import Optional

from ..core import AndConstraint, TemporalMatcher
from ..utils import ensure_timezone_aware
from .base import OrderingMixin, TemporalAssertions


class InstantAssertions(OrderingMixin, TemporalAssertions):
    """Assertions for an instant, an aware ``datetime`` compared on the global timeline.

    Naive datetimes, as subject or expected value, are taken to be in the
    configured ``assumed_timezone`` (UTC unless configured otherwise). The
    timezone is read from the reporter when an assertion runs, so ``subject``
    keeps the value as given.
    """

    subject_type = "instant"

    def _evaluate(self, matcher: TemporalMatcher, because: str, because_args) -> AndConstraint:
        self.reporter.evaluate(self.identifier, self._as_instant(self._subject), matcher, because, because_args)
        return AndConstraint(self)

    def _as_instant(self, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_timezone_aware(value, self.reporter.config.assumed_timezone)

    def be(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._be(self._as_instant(expected), because, because_args)

    def not_be(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(self._as_instant(unexpected), because, because_args)

    def be_close_to(self, expected: datetime, precision: timedelta, because: str = "",
                    *because_args) -> AndConstraint:
        """Assert that the subject lies within ``precision`` of ``expected`` (inclusive).

        Raises:
            PrecisionOutOfRangeError: If ``precision`` is negative
        """
        return self._close_to(self._as_instant(expected), precision, because, because_args)

    def not_be_close_to(self, unexpected: datetime, precision: timedelta, because: str = "",
                        *because_args) -> AndConstraint:
        return self._close_to(self._as_instant(unexpected), precision, because, because_args, negated=True)

    def be_greater_than(self, expected: datetime, because: str = "", *because_args) -> AndConstraint:
        return super().be_greater_than(self._as_instant(expected), because, *because_args)

    def be_greater_than_or_equal_to(self, expected: datetime, because: str = "", *because_args) -> AndConstraint:
        return super().be_greater_than_or_equal_to(self._as_instant(expected), because, *because_args)

    def be_less_than(self, expected: datetime, because: str = "", *because_args) -> AndConstraint:
        return super().be_less_than(self._as_instant(expected), because, *because_args)

    def be_less_than_or_equal_to(self, expected: datetime, because: str = "", *because_args) -> AndConstraint:
        return super().be_less_than_or_equal_to(self._as_instant(expected), because, *because_args)
