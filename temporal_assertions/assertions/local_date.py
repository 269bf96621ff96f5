from datetime import date
from typing import Optional

from ..core import AndConstraint
from .base import DateFieldsMixin, OrderingMixin, TemporalAssertions


class LocalDateAssertions(DateFieldsMixin, OrderingMixin, TemporalAssertions):
    """Assertions for a calendar ``date``."""

    subject_type = "local date"

    def be(self, expected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)
