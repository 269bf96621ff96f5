from datetime import time
from typing import Optional

from ..core import AndConstraint
from .base import OffsetFieldMixin, TemporalAssertions, TimeFieldsMixin, same_local_value_and_offset


class OffsetTimeAssertions(OffsetFieldMixin, TimeFieldsMixin, TemporalAssertions):
    """Assertions for a ``time`` carrying a fixed UTC offset."""

    subject_type = "offset time"

    def be(self, expected: Optional[time], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args, equals=same_local_value_and_offset)

    def not_be(self, unexpected: Optional[time], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args, equals=same_local_value_and_offset)
