from .assertions import (
    AnnualDateAssertions,
    DateIntervalAssertions,
    DurationAssertions,
    InstantAssertions,
    IntervalAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDateAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    TemporalAssertions,
    ZonedDateTimeAssertions,
)
from .config import AssertionConfig
from .core import (
    # Execution
    AndConstraint,
    AndWhichConstraint,
    AssertionReporter,
    configure,
    get_reporter,
    # Formatting
    FormatterRegistry,
    create_default_registry,
    register_defaults,
)
from .exceptions import (
    FormatterRegistryFrozenError,
    PrecisionOutOfRangeError,
    TemporalAssertionsError,
    UnsupportedSubjectError,
)
from .extensions import adapter_for, should
from .models import (
    AnnualDate,
    CalendarSystem,
    DateInterval,
    Interval,
    IsoDayOfWeek,
    OffsetDate,
)

__version__ = "1.0.0"
__all__ = [
    # Entry point
    "should",
    "adapter_for",

    # Configuration
    "AssertionConfig",

    # Exceptions
    "FormatterRegistryFrozenError",
    "PrecisionOutOfRangeError",
    "TemporalAssertionsError",
    "UnsupportedSubjectError",

    # Value models
    "AnnualDate",
    "DateInterval",
    "Interval",
    "OffsetDate",

    # Enums
    "CalendarSystem",
    "IsoDayOfWeek",

    # Execution and formatting
    "AndConstraint",
    "AndWhichConstraint",
    "AssertionReporter",
    "configure",
    "get_reporter",
    "FormatterRegistry",
    "create_default_registry",
    "register_defaults",

    # Adapters
    "TemporalAssertions",
    "AnnualDateAssertions",
    "DateIntervalAssertions",
    "DurationAssertions",
    "InstantAssertions",
    "IntervalAssertions",
    "LocalDateAssertions",
    "LocalDateTimeAssertions",
    "LocalTimeAssertions",
    "OffsetAssertions",
    "OffsetDateAssertions",
    "OffsetDateTimeAssertions",
    "OffsetTimeAssertions",
    "PeriodAssertions",
    "ZonedDateTimeAssertions",
]
