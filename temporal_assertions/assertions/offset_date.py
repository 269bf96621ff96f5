from datetime import date
from typing import Optional

from ..core import AndConstraint, AndWhichConstraint
from ..models import OffsetDate
from .base import DateFieldsMixin, OffsetFieldMixin, TemporalAssertions


class OffsetDateAssertions(OffsetFieldMixin, DateFieldsMixin, TemporalAssertions):
    """Assertions for an ``OffsetDate``: equal only when date and offset both match."""

    subject_type = "offset date"

    @staticmethod
    def _offset(subject: OffsetDate):
        return subject.offset

    def be(self, expected: Optional[OffsetDate], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[OffsetDate], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)

    def have_date(self, expected: date, because: str = "", *because_args) -> AndWhichConstraint:
        self._feature("date", lambda s: s.local_date, expected, because, because_args)
        return AndWhichConstraint(self, self._subject.local_date)

    def not_have_date(self, unexpected: date, because: str = "", *because_args) -> AndConstraint:
        return self._feature("date", lambda s: s.local_date, unexpected, because, because_args, negated=True)
