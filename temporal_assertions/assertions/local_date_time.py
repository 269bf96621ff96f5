from datetime import datetime
from typing import Optional

from ..core import AndConstraint
from .base import DateFieldsMixin, LocalPartsMixin, OrderingMixin, TemporalAssertions, TimeFieldsMixin


class LocalDateTimeAssertions(LocalPartsMixin, DateFieldsMixin, TimeFieldsMixin, OrderingMixin, TemporalAssertions):
    """Assertions for a naive ``datetime``."""

    subject_type = "local date and time"

    def be(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)
