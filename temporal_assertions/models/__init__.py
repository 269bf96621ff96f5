from .base import DateTimeMixin, OrderedValueMixin
from .domain_models import (
    AnnualDate,
    CalendarSystem,
    DateInterval,
    Interval,
    IsoDayOfWeek,
    OffsetDate,
)

__all__ = [
    # Mixins
    "DateTimeMixin",
    "OrderedValueMixin",

    # Value models
    "AnnualDate",
    "DateInterval",
    "Interval",
    "OffsetDate",

    # Enums
    "CalendarSystem",
    "IsoDayOfWeek",
]
