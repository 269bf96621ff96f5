from datetime import datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..core import AndConstraint, AndWhichConstraint
from ..utils import zone_key
from .base import (
    DateFieldsMixin,
    LocalDateTimeMixin,
    LocalPartsMixin,
    OffsetFieldMixin,
    TemporalAssertions,
    TimeFieldsMixin,
    same_local_value_and_offset,
)


def same_zoned_value(first: datetime, second: datetime) -> bool:
    """Same wall-clock value, same offset and same zone key."""
    return same_local_value_and_offset(first, second) and zone_key(first.tzinfo) == zone_key(second.tzinfo)


def _key(zone: Union[str, ZoneInfo]) -> str:
    return zone if isinstance(zone, str) else zone.key


class ZonedDateTimeAssertions(LocalPartsMixin, LocalDateTimeMixin, OffsetFieldMixin, DateFieldsMixin,
                              TimeFieldsMixin, TemporalAssertions):
    """Assertions for a ``datetime`` in an IANA time zone (``ZoneInfo`` tzinfo)."""

    subject_type = "zoned date and time"

    def be(self, expected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._be(expected, because, because_args, equals=same_zoned_value)

    def not_be(self, unexpected: Optional[datetime], because: str = "", *because_args) -> AndConstraint:
        return self._not_be(unexpected, because, because_args, equals=same_zoned_value)

    def have_zone(self, expected: Union[str, ZoneInfo], because: str = "", *because_args) -> AndWhichConstraint:
        """Assert the IANA key of the subject's zone, e.g. ``'Europe/London'``."""
        self._feature("zone", lambda s: zone_key(s.tzinfo), _key(expected), because, because_args)
        return AndWhichConstraint(self, self._subject.tzinfo)

    def not_have_zone(self, unexpected: Union[str, ZoneInfo], because: str = "", *because_args) -> AndConstraint:
        return self._feature("zone", lambda s: zone_key(s.tzinfo), _key(unexpected), because, because_args,
                             negated=True)
