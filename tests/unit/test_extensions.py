"""
Tests for adapter selection through should().
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

from temporal_assertions import (
    AnnualDate,
    AnnualDateAssertions,
    DateInterval,
    DateIntervalAssertions,
    DurationAssertions,
    InstantAssertions,
    Interval,
    IntervalAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDate,
    OffsetDateAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    UnsupportedSubjectError,
    ZonedDateTimeAssertions,
    adapter_for,
    should,
)
from tests.helpers import assert_fails_with, assert_passes

PLUS_TWO = timezone(timedelta(hours=2))


class TestAdapterSelection:
    """Test the type dispatch table."""

    @pytest.mark.parametrize("subject,adapter", [
        (AnnualDate(month=2, day=29), AnnualDateAssertions),
        (DateInterval(start=date(2024, 1, 1), end=date(2024, 1, 31)), DateIntervalAssertions),
        (Interval(start=datetime(2024, 1, 1, tzinfo=timezone.utc)), IntervalAssertions),
        (OffsetDate(local_date=date(2024, 1, 1), offset=PLUS_TWO), OffsetDateAssertions),
        (relativedelta(months=1), PeriodAssertions),
        (timedelta(seconds=5), DurationAssertions),
        (PLUS_TWO, OffsetAssertions),
        (timezone.utc, OffsetAssertions),
        (date(2024, 1, 1), LocalDateAssertions),
        (datetime(2024, 1, 1, 12), LocalDateTimeAssertions),
        (datetime(2024, 1, 1, 12, tzinfo=timezone.utc), InstantAssertions),
        (datetime(2024, 1, 1, 12, tzinfo=PLUS_TWO), OffsetDateTimeAssertions),
        (datetime(2024, 1, 1, 12, tzinfo=ZoneInfo("America/New_York")), ZonedDateTimeAssertions),
        (time(12, 30), LocalTimeAssertions),
        (time(12, 30, tzinfo=PLUS_TWO), OffsetTimeAssertions),
    ])
    def test_adapter_for(self, subject, adapter):
        """Test that each supported type selects its adapter."""
        assert adapter_for(subject) is adapter
        assert type(should(subject)) is adapter

    def test_none_is_rejected(self):
        """Test that None cannot be dispatched."""
        with pytest.raises(UnsupportedSubjectError, match="Cannot select assertions for None"):
            should(None)

    @pytest.mark.parametrize("subject", ["2024-01-01", 42, 1.5, [date(2024, 1, 1)]])
    def test_unsupported_type_is_rejected(self, subject):
        """Test that non-temporal values are rejected."""
        with pytest.raises(UnsupportedSubjectError) as exc_info:
            should(subject)
        assert exc_info.value.context['subject_type'] == type(subject).__name__

    def test_unsupported_subject_is_type_error(self):
        """Test that the error can be caught as a TypeError."""
        with pytest.raises(TypeError):
            should(object())


class TestShould:
    """Test the fluent entry point end to end."""

    def test_chained_assertions(self):
        """Test a chain of passing assertions."""
        result = should(date(2024, 2, 29)).have_year(2024).and_.have_month(2).and_.have_day(29)
        assert_passes(result)

    def test_which_continuation(self):
        """Test continuing on the value exposed by which."""
        zoned = datetime(2024, 7, 1, 9, tzinfo=ZoneInfo("Europe/Paris"))
        offset = should(zoned).have_offset(timedelta(hours=2)).which
        assert_passes(should(offset).be_positive())

    def test_name_override(self):
        """Test that a name replaces the type identifier."""
        assert_fails_with(
            lambda: should(timedelta(seconds=5), name="timeout").be(timedelta(seconds=7)),
            "Expected timeout to be equal to 0:00:00:07, but found 0:00:00:05.")

    def test_explicit_reporter(self, reporter):
        """Test that an explicit reporter is used."""
        adapter = should(date(2024, 1, 1), reporter=reporter)
        assert adapter.reporter is reporter
