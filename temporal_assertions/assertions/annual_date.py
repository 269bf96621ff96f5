from typing import Optional

from ..core import AndConstraint
from ..models import AnnualDate
from .base import TemporalAssertions


class AnnualDateAssertions(TemporalAssertions):
    """Assertions for an ``AnnualDate`` subject."""

    subject_type = "annual date"

    def be(self, expected: Optional[AnnualDate], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args)

    def not_be(self, unexpected: Optional[AnnualDate], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args)

    def be_after(self, expected: AnnualDate, because: str = "", *because_args) -> AndConstraint:
        return self._compare('after', expected, because, because_args)

    def be_on_or_after(self, expected: AnnualDate, because: str = "", *because_args) -> AndConstraint:
        return self._compare('on_or_after', expected, because, because_args)

    def be_before(self, expected: AnnualDate, because: str = "", *because_args) -> AndConstraint:
        return self._compare('before', expected, because, because_args)

    def be_on_or_before(self, expected: AnnualDate, because: str = "", *because_args) -> AndConstraint:
        return self._compare('on_or_before', expected, because, because_args)

    def be_valid_in_year(self, year: int, because: str = "", *because_args) -> AndConstraint:
        """Assert that the annual date exists in ``year`` (29 February needs a leap year)."""
        return self._satisfy(f"be valid in year {year}", lambda s: s.is_valid_year(year), because, because_args,
                             describe_actual=lambda s: f"{s} is not")

    def not_be_valid_in_year(self, year: int, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy(f"be valid in year {year}", lambda s: s.is_valid_year(year), because, because_args,
                             negated=True, describe_actual=lambda s: f"{s} is")

    def have_day(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day", lambda s: s.day, expected, because, because_args)

    def not_have_day(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("day", lambda s: s.day, unexpected, because, because_args, negated=True)

    def have_month(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("month", lambda s: s.month, expected, because, because_args)

    def not_have_month(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("month", lambda s: s.month, unexpected, because, because_args, negated=True)
