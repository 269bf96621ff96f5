from datetime import timedelta, timezone
from typing import Optional

from ..core import AndConstraint
from ..utils import OffsetLike, distance, duration_total, offset_delta, to_offset
from .base import TemporalAssertions

_ZERO = timedelta(0)


def _offset_distance(first: timezone, second: timezone) -> timedelta:
    return distance(offset_delta(first), offset_delta(second))


def _total(unit: str):
    """Getter for the whole offset in ``unit``, truncated toward zero."""
    return lambda offset: int(duration_total(offset_delta(offset), unit))


class OffsetAssertions(TemporalAssertions):
    """Assertions for a UTC offset.

    The subject and every expected offset may be given as a ``timezone`` or as
    a ``timedelta``; both are normalised to a fixed-offset ``timezone``.
    """

    subject_type = "offset"

    def __init__(self, subject: Optional[OffsetLike], name: Optional[str] = None, reporter=None):
        super().__init__(to_offset(subject), name, reporter)

    def be(self, expected: Optional[OffsetLike], because: str = "", *because_args) -> AndConstraint:
        return self._be(to_offset(expected), because, because_args)

    def not_be(self, unexpected: Optional[OffsetLike], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(to_offset(unexpected), because, because_args)

    def be_positive(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be positive", lambda s: offset_delta(s) > _ZERO, because, because_args)

    def be_negative(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be negative", lambda s: offset_delta(s) < _ZERO, because, because_args)

    def be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: offset_delta(s) == _ZERO, because, because_args)

    def not_be_zero(self, because: str = "", *because_args) -> AndConstraint:
        return self._satisfy("be zero", lambda s: offset_delta(s) == _ZERO, because, because_args, negated=True)

    def be_close_to(self, expected: OffsetLike, precision: timedelta, because: str = "",
                    *because_args) -> AndConstraint:
        """Assert that the subject lies within ``precision`` of ``expected`` (inclusive).

        Raises:
            PrecisionOutOfRangeError: If ``precision`` is negative
        """
        return self._close_to(to_offset(expected), precision, because, because_args, distance=_offset_distance)

    def not_be_close_to(self, unexpected: OffsetLike, precision: timedelta, because: str = "",
                        *because_args) -> AndConstraint:
        return self._close_to(to_offset(unexpected), precision, because, because_args, negated=True,
                              distance=_offset_distance)

    def be_greater_than(self, expected: OffsetLike, because: str = "", *because_args) -> AndConstraint:
        return self._compare('greater_than', to_offset(expected), because, because_args, key=offset_delta)

    def be_greater_than_or_equal_to(self, expected: OffsetLike, because: str = "", *because_args) -> AndConstraint:
        return self._compare('greater_than_or_equal_to', to_offset(expected), because, because_args,
                             key=offset_delta)

    def be_less_than(self, expected: OffsetLike, because: str = "", *because_args) -> AndConstraint:
        return self._compare('less_than', to_offset(expected), because, because_args, key=offset_delta)

    def be_less_than_or_equal_to(self, expected: OffsetLike, because: str = "", *because_args) -> AndConstraint:
        return self._compare('less_than_or_equal_to', to_offset(expected), because, because_args,
                             key=offset_delta)

    # Totals of the whole offset, not components
    def have_seconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("seconds", _total("seconds"), expected,
                             because, because_args)

    def not_have_seconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("seconds", _total("seconds"), unexpected,
                             because, because_args, negated=True)

    def have_milliseconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("milliseconds", _total("milliseconds"), expected,
                             because, because_args)

    def not_have_milliseconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("milliseconds", _total("milliseconds"), unexpected,
                             because, because_args, negated=True)

    def have_microseconds(self, expected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("microseconds", _total("microseconds"), expected,
                             because, because_args)

    def not_have_microseconds(self, unexpected: int, because: str = "", *because_args) -> AndConstraint:
        return self._feature("microseconds", _total("microseconds"), unexpected,
                             because, because_args, negated=True)
