# Base exception class
from .base import TemporalAssertionsError

from .domain_exceptions import (
    FormatterRegistryFrozenError,
    PrecisionOutOfRangeError,
    UnsupportedSubjectError,
)

__all__ = [
    # Base exception
    "TemporalAssertionsError",

    # Domain exceptions (alphabetically ordered)
    "FormatterRegistryFrozenError",
    "PrecisionOutOfRangeError",
    "UnsupportedSubjectError",
]
