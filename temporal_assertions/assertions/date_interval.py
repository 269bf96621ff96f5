from datetime import date
from typing import Optional, Union

from ..core import AndConstraint, AndWhichConstraint
from ..models import CalendarSystem, DateInterval
from .base import TemporalAssertions


class DateIntervalAssertions(TemporalAssertions):
    """Assertions for a ``DateInterval`` subject."""

    subject_type = "date interval"

    def be(self, expected: Optional[DateInterval], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[DateInterval], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)

    def start_at(self, expected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._feature("start", lambda s: s.start, expected, because, because_args)

    def not_start_at(self, unexpected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._feature("start", lambda s: s.start, unexpected, because, because_args, negated=True)

    def end_at(self, expected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._feature("end", lambda s: s.end, expected, because, because_args)

    def not_end_at(self, unexpected: Optional[date], because: str = "", *because_args) -> AndConstraint:
        return self._feature("end", lambda s: s.end, unexpected, because, because_args, negated=True)

    def contain(self, value: Union[date, DateInterval], because: str = "", *because_args) -> AndConstraint:
        """Assert that a date, or every date of a sub-interval, lies in the subject.

        Raises:
            ValueError: If a sub-interval uses a different calendar system
        """
        label = f"contain {self.reporter.format(value)}"
        return self._satisfy(label, lambda s: s.contains(value), because, because_args)

    def not_contain(self, value: Union[date, DateInterval], because: str = "", *because_args) -> AndConstraint:
        label = f"contain {self.reporter.format(value)}"
        return self._satisfy(label, lambda s: s.contains(value), because, because_args, negated=True)

    def be_in_calendar(self, expected: CalendarSystem, because: str = "", *because_args) -> AndWhichConstraint:
        self._feature("calendar", lambda s: s.calendar, CalendarSystem(expected), because, because_args)
        return AndWhichConstraint(self, self._subject.calendar)

    def not_be_in_calendar(self, unexpected: CalendarSystem, because: str = "", *because_args) -> AndConstraint:
        return self._feature("calendar", lambda s: s.calendar, CalendarSystem(unexpected), because, because_args,
                             negated=True)
