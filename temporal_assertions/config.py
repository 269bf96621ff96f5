import logging
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

PACKAGE_LOGGER = "temporal_assertions"


class AssertionConfig(BaseModel):
    """Configuration for assertion evaluation and failure rendering."""

    null_text: str = Field(
        default_factory=lambda: os.getenv("TEMPORAL_ASSERTIONS_NULL_TEXT", "<null>"),
        description="Text rendered in failure messages for an absent value"
    )

    default_precision: float = Field(
        default_factory=lambda: float(os.getenv("TEMPORAL_ASSERTIONS_PRECISION", "0.01")),
        description="Tolerance for approximate 'total' checks when none is given"
    )

    assumed_timezone: str = Field(
        default_factory=lambda: os.getenv("TEMPORAL_ASSERTIONS_ASSUMED_TIMEZONE", "UTC"),
        description="Timezone assumed for naive datetimes compared as instants"
    )

    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("TEMPORAL_ASSERTIONS_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for assertion evaluation"
    )

    @field_validator('null_text')
    @classmethod
    def validate_null_text(cls, v):
        """Validate the null placeholder."""
        if not v:
            raise ValueError("null_text must not be empty")
        return v

    @field_validator('default_precision')
    @classmethod
    def validate_precision(cls, v):
        """Validate the default tolerance."""
        if v < 0:
            raise ValueError(f"default_precision must be non-negative, got {v}")
        return v

    @field_validator('assumed_timezone')
    @classmethod
    def validate_timezone(cls, v):
        """Validate timezone string."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Invalid timezone: {v}. Please use a valid IANA timezone identifier.") from None
        return v

    def get_assumed_timezone(self) -> ZoneInfo:
        """Get the ZoneInfo used for naive datetimes."""
        return ZoneInfo(self.assumed_timezone)

    def apply_logging(self, logger: Optional[logging.Logger] = None) -> None:
        """Raise the package logger to DEBUG when debug logging is enabled.

        Args:
            logger: Logger to configure (defaults to the package logger)
        """
        if self.enable_debug_logging:
            (logger or logging.getLogger(PACKAGE_LOGGER)).setLevel(logging.DEBUG)

    @classmethod
    def from_env(cls) -> 'AssertionConfig':
        """Create configuration from environment variables.

        Returns:
            AssertionConfig instance
        """
        return cls()

    @classmethod
    def for_testing(cls) -> 'AssertionConfig':
        """Create a deterministic configuration that ignores the environment.

        Returns:
            AssertionConfig instance with library defaults
        """
        return cls(
            null_text="<null>",
            default_precision=0.01,
            assumed_timezone="UTC",
            enable_debug_logging=False
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
