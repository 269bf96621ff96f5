from datetime import time
from typing import Optional

from ..core import AndConstraint
from .base import OrderingMixin, TemporalAssertions, TimeFieldsMixin


class LocalTimeAssertions(TimeFieldsMixin, OrderingMixin, TemporalAssertions):
    """Assertions for a naive time of day."""

    subject_type = "local time"

    def be(self, expected: Optional[time], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[time], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)
