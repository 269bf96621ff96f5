"""
Test configuration and fixtures for temporal assertions.

Every test runs against a reporter built from ``AssertionConfig.for_testing()``
so that environment variables and ``.env`` files cannot change the messages
under test.
"""

import sys
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

# Add parent directory to path so we can import temporal_assertions
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from temporal_assertions import AnnualDate, AssertionConfig, AssertionReporter, configure


@pytest.fixture
def assertion_config():
    """Deterministic configuration for testing."""
    return AssertionConfig.for_testing()


@pytest.fixture
def reporter(assertion_config):
    """Reporter with the default frozen registry."""
    return AssertionReporter(assertion_config)


@pytest.fixture(autouse=True)
def global_reporter(assertion_config):
    """Point the global reporter at the testing configuration."""
    return configure(assertion_config)


@pytest.fixture
def new_year():
    """An annual date early in the year."""
    return AnnualDate(month=1, day=1)


@pytest.fixture
def leap_day():
    """An annual date that only exists in leap years."""
    return AnnualDate(month=2, day=29)


@pytest.fixture
def sample_date():
    """A Wednesday in a leap year."""
    return date(2024, 3, 13)


@pytest.fixture
def sample_local_date_time():
    """A naive date and time with a sub-second part."""
    return datetime(2024, 3, 13, 14, 30, 15, 123456)


@pytest.fixture
def sample_local_time():
    """A naive afternoon time."""
    return time(14, 30, 15, 123456)


@pytest.fixture
def plus_two():
    """A fixed +02:00 offset."""
    return timezone(timedelta(hours=2))


@pytest.fixture
def new_york():
    """The America/New_York zone."""
    return ZoneInfo("America/New_York")
