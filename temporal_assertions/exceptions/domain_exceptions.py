"""
Domain-Specific Exceptions for Temporal Assertions

These exceptions represent misuse of the library (invalid arguments, values it
cannot handle, registry misuse). They are raised before any comparison runs and
are distinct from assertion failures.

Organized by category:
1. Argument Errors
2. Formatting Errors
"""

from typing import Any

from .base import TemporalAssertionsError


# =============================================================================
# Argument Errors
# =============================================================================

class PrecisionOutOfRangeError(TemporalAssertionsError, ValueError):
    """Raised when a closeness check receives a negative precision.

    Used for:
    - ``be_close_to`` / ``not_be_close_to`` on durations, instants and offsets
    - Approximate "total" checks with an explicit precision
    """

    def __init__(self, precision: Any, parameter: str = "precision"):
        """Initialize precision error.

        Args:
            precision: The rejected precision value
            parameter: Name of the offending parameter
        """
        self.precision = precision
        self.parameter = parameter
        super().__init__(f"The value of {parameter} must be non-negative.", parameter=parameter, value=precision)


class UnsupportedSubjectError(TemporalAssertionsError, TypeError):
    """Raised when ``should()`` cannot pick an adapter for a value.

    Used for:
    - Values that are not one of the supported temporal types
    - ``None``, which carries no type to dispatch on
    """

    def __init__(self, subject: Any):
        """Initialize unsupported subject error.

        Args:
            subject: The value that could not be dispatched
        """
        self.subject = subject
        subject_type = type(subject).__name__
        if subject is None:
            message = (
                "Cannot select assertions for None; construct the assertions "
                "class for the expected type directly"
            )
        else:
            message = f"No temporal assertions registered for type '{subject_type}'"
        super().__init__(message, subject_type=subject_type)


# =============================================================================
# Formatting Errors
# =============================================================================

class FormatterRegistryFrozenError(TemporalAssertionsError):
    """Raised when a formatter is registered after the registry was frozen."""

    def __init__(self, value_type: type):
        """Initialize frozen registry error.

        Args:
            value_type: The type whose formatter was rejected
        """
        self.value_type = value_type
        message = f"Cannot register a formatter for '{value_type.__name__}': registry is frozen"
        super().__init__(message, value_type=value_type.__name__)
