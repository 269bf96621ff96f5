"""
Value Formatting Registry

Renders temporal values for failure messages. A registry maps a type to a
formatter callable and is looked up along the value's MRO, so a formatter for
``date`` never shadows the one for ``datetime``.

Lifecycle:
- ``create_default_registry()`` registers a formatter for every supported
  temporal type and then freezes the registry
- the reporter owns the frozen registry; nothing registers into it afterwards
- a caller that needs a custom formatter builds its own registry (with
  ``register_defaults()``), registers, freezes and hands it to a reporter
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

from dateutil.relativedelta import relativedelta

from ..config import AssertionConfig
from ..exceptions import FormatterRegistryFrozenError
from ..models import AnnualDate, DateInterval, Interval, OffsetDate
from ..utils import MICROSECONDS_PER_SECOND, duration_components, format_offset, zone_key

logger = logging.getLogger(__name__)

Formatter = Callable[[Any], str]


class FormatterRegistry:
    """Type-keyed formatters for rendering values in failure messages."""

    def __init__(self, null_text: str = "<null>"):
        """Initialize an empty, writable registry.

        Args:
            null_text: Text rendered for ``None``
        """
        self.null_text = null_text
        self._formatters: Dict[type, Formatter] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, value_type: type, formatter: Formatter) -> bool:
        """Register a formatter for a type.

        Registration is idempotent per type: the first formatter registered for
        a type is kept and later registrations are ignored.

        Args:
            value_type: The type handled by the formatter
            formatter: Callable turning a value into display text

        Returns:
            True if the formatter was added, False if the type already had one

        Raises:
            FormatterRegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise FormatterRegistryFrozenError(value_type)

        if value_type in self._formatters:
            logger.debug(f"Formatter for {value_type.__name__} already registered, ignoring")
            return False

        self._formatters[value_type] = formatter
        logger.debug(f"Registered formatter for {value_type.__name__}")
        return True

    def freeze(self) -> 'FormatterRegistry':
        """Make the registry read-only and return it."""
        self._frozen = True
        logger.debug(f"Formatter registry frozen with {len(self._formatters)} formatters")
        return self

    def find(self, value_type: type) -> Optional[Formatter]:
        """Return the formatter for a type or its nearest registered base."""
        for klass in value_type.__mro__:
            formatter = self._formatters.get(klass)
            if formatter is not None:
                return formatter
        return None

    def handles(self, value_type: type) -> bool:
        return self.find(value_type) is not None

    def format(self, value: Any) -> str:
        """Render a value for display.

        Args:
            value: Any value, including None

        Returns:
            The registered rendering, the null text for None, or ``str(value)``
        """
        if value is None:
            return self.null_text

        formatter = self.find(type(value))
        if formatter is None:
            return str(value)
        return formatter(value)


# =============================================================================
# Default Formatters
# =============================================================================

def format_datetime(value: datetime) -> str:
    """ISO 8601 text, followed by the zone key for ``ZoneInfo`` datetimes."""
    text = value.isoformat()
    key = zone_key(value.tzinfo)
    return f"{text} {key}" if key else text


def format_duration(value: timedelta) -> str:
    """Render a duration as ``[-]D:HH:MM:SS[.ffffff]``.

    Unlike ``str(timedelta)`` the sign applies to the whole duration, so one
    hour in the past is ``-0:01:00:00`` rather than ``-1 day, 23:00:00``.
    """
    parts = duration_components(value)
    negative = any(v < 0 for v in parts.values())
    parts = {k: abs(v) for k, v in parts.items()}

    text = f"{parts['days']}:{parts['hours']:02d}:{parts['minutes']:02d}:{parts['seconds']:02d}"
    fraction = parts['milliseconds'] * 1000 + parts['microseconds']
    if fraction:
        text += f".{fraction:06d}".rstrip('0')
    return f"-{text}" if negative else text


def format_period(value: relativedelta) -> str:
    """Render a relative period in ISO 8601 form, e.g. ``P1Y2MT3H``."""
    date_part = ""
    for amount, designator in ((value.years, "Y"), (value.months, "M"), (value.days, "D")):
        if amount:
            date_part += f"{amount}{designator}"

    seconds = value.seconds + value.microseconds / MICROSECONDS_PER_SECOND
    time_part = ""
    for amount, designator in ((value.hours, "H"), (value.minutes, "M")):
        if amount:
            time_part += f"{amount}{designator}"
    if seconds:
        time_part += f"{seconds:g}S"

    text = "P" + date_part
    if time_part:
        text += "T" + time_part
    return text if text != "P" else "P0D"


def format_enum(value: Enum) -> str:
    return str(value)


def register_defaults(registry: FormatterRegistry) -> FormatterRegistry:
    """Register formatters for every supported temporal type."""
    registry.register(AnnualDate, str)
    registry.register(DateInterval, str)
    registry.register(Interval, str)
    registry.register(OffsetDate, str)
    registry.register(datetime, format_datetime)
    registry.register(date, lambda value: value.isoformat())
    registry.register(time, lambda value: value.isoformat())
    registry.register(timedelta, format_duration)
    registry.register(timezone, format_offset)
    registry.register(relativedelta, format_period)
    registry.register(Enum, format_enum)
    return registry


def create_default_registry(config: Optional[AssertionConfig] = None) -> FormatterRegistry:
    """Build the frozen registry used by the default reporter.

    Args:
        config: Configuration supplying the null text (defaults to environment)

    Returns:
        A frozen FormatterRegistry with all default formatters
    """
    config = config or AssertionConfig.from_env()
    return register_defaults(FormatterRegistry(null_text=config.null_text)).freeze()
