from datetime import datetime
from typing import Optional

from ..core import AndConstraint
from .base import (
    DateFieldsMixin,
    LocalDateTimeMixin,
    LocalPartsMixin,
    OffsetFieldMixin,
    TemporalAssertions,
    TimeFieldsMixin,
    same_local_value_and_offset,
)


class OffsetDateTimeAssertions(LocalPartsMixin, LocalDateTimeMixin, OffsetFieldMixin, DateFieldsMixin,
                               TimeFieldsMixin, TemporalAssertions):
    """Assertions for a ``datetime`` with a fixed UTC offset.

    Unlike ``datetime.__eq__``, ``be`` requires the same wall-clock value and
    the same offset: 12:00+01:00 is not 11:00+00:00 here.
    """

    subject_type = "offset date and time"

    def be(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args, equals=same_local_value_and_offset)

    def not_be(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args, equals=same_local_value_and_offset)
