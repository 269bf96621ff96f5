"""
Tests for DurationAssertions.

Durations are ``timedelta`` values; failure messages render them as
``[-]D:HH:MM:SS[.ffffff]``.
"""

from datetime import timedelta

import pytest

from temporal_assertions import DurationAssertions, PrecisionOutOfRangeError, should
from tests.helpers import assert_fails, assert_fails_with, assert_passes


class TestDurationEquality:
    """Test be / not_be and the sign checks."""

    def test_be(self):
        """Test equal and unequal durations."""
        assert_passes(should(timedelta(minutes=90)).be(timedelta(hours=1, minutes=30)))
        assert_fails_with(lambda: should(timedelta(seconds=5)).be(timedelta(seconds=7)),
                          "Expected duration to be equal to 0:00:00:07, but found 0:00:00:05.")

    def test_not_be(self):
        """Test not_be."""
        assert_passes(should(timedelta(seconds=5)).not_be(timedelta(seconds=7)))
        assert_fails(lambda: should(timedelta(seconds=5)).not_be(timedelta(seconds=5)))

    def test_negative_duration_is_rendered_with_leading_sign(self):
        """Test that negative durations are not shown as '-1 day, 23:00:00'."""
        assert_fails_with(lambda: should(timedelta(hours=-1)).be(timedelta(0)), "but found -0:01:00:00.")

    def test_sign_checks(self):
        """Test be_positive / be_negative / be_zero / not_be_zero."""
        assert_passes(should(timedelta(seconds=1)).be_positive().and_.not_be_zero())
        assert_passes(should(timedelta(seconds=-1)).be_negative())
        assert_passes(should(timedelta(0)).be_zero())
        assert_fails_with(lambda: should(timedelta(0)).be_positive(), "Expected duration to be positive")
        assert_fails_with(lambda: should(timedelta(0)).not_be_zero(), "not to be zero")

    @pytest.mark.parametrize("method", ["be_positive", "be_negative", "be_zero", "not_be_zero"])
    def test_sign_checks_fail_for_absent_subject(self, method):
        """Test sign checks on an absent subject."""
        assert_fails_with(lambda: getattr(DurationAssertions(None), method)(), "but was <null>.")


class TestDurationCloseTo:
    """Test be_close_to / not_be_close_to."""

    def test_within_precision(self):
        """Test a distance smaller than the precision."""
        subject = should(timedelta(seconds=5))
        assert_passes(subject.be_close_to(timedelta(seconds=7), timedelta(seconds=3)), subject)

    def test_not_be_close_to_within_precision_fails(self):
        """Test the negated form for a distance smaller than the precision."""
        assert_fails_with(
            lambda: should(timedelta(seconds=5)).not_be_close_to(timedelta(seconds=7), timedelta(seconds=3)),
            "not to be within 0:00:00:03 from 0:00:00:07",
        )

    def test_boundary_is_inclusive(self):
        """Test a distance exactly equal to the precision."""
        assert_passes(should(timedelta(seconds=10)).be_close_to(timedelta(seconds=7), timedelta(seconds=3)))
        assert_passes(should(timedelta(seconds=4)).be_close_to(timedelta(seconds=7), timedelta(seconds=3)))

    def test_just_outside_precision_fails(self):
        """Test a distance one microsecond above the precision."""
        subject = timedelta(seconds=10, microseconds=1)
        assert_fails_with(
            lambda: should(subject).be_close_to(timedelta(seconds=7), timedelta(seconds=3)),
            "but found 0:00:00:10.000001, which differs by 0:00:00:03.000001.",
        )
        assert_passes(should(subject).not_be_close_to(timedelta(seconds=7), timedelta(seconds=3)))

    def test_negative_precision_raises_before_comparison(self):
        """Test that a negative precision is a contract violation, not a failure."""
        with pytest.raises(PrecisionOutOfRangeError, match="must be non-negative"):
            DurationAssertions(None).be_close_to(timedelta(seconds=7), timedelta(seconds=-1))

    def test_negative_precision_is_a_value_error(self):
        """Test that the precision error can be caught as ValueError."""
        with pytest.raises(ValueError):
            should(timedelta(seconds=5)).not_be_close_to(timedelta(seconds=7), timedelta(microseconds=-1))

    @pytest.mark.parametrize("method", ["be_close_to", "not_be_close_to"])
    def test_absent_subject_fails(self, method):
        """Test closeness on an absent subject."""
        assert_fails_with(
            lambda: getattr(DurationAssertions(None), method)(timedelta(seconds=7), timedelta(seconds=3)),
            "but was <null>.",
        )

    @pytest.mark.parametrize("method", ["be_close_to", "not_be_close_to"])
    def test_absent_expected_fails(self, method):
        """Test that closeness to a missing value fails in both polarities."""
        assert_fails_with(
            lambda: getattr(should(timedelta(seconds=5)), method)(None, timedelta(seconds=1)),
            "within 0:00:00:01 from <null>, but found 0:00:00:05.",
        )


class TestDurationOrdering:
    """Test the ordering methods."""

    def test_ordering_is_exclusive_for_distinct_values(self):
        """Test that exactly one of greater/less holds for distinct values."""
        assert_passes(should(timedelta(seconds=2)).be_greater_than(timedelta(seconds=1)))
        assert_fails(lambda: should(timedelta(seconds=2)).be_less_than(timedelta(seconds=1)))

    def test_inclusive_ordering_at_equality(self):
        """Test the inclusive forms at equality."""
        value = timedelta(seconds=2)
        assert_passes(should(value).be_greater_than_or_equal_to(value).and_.be_less_than_or_equal_to(value))

    def test_ordering_failure_message(self):
        """Test the ordering failure message."""
        assert_fails_with(lambda: should(timedelta(seconds=1)).be_greater_than(timedelta(seconds=2)),
                          "Expected duration to be greater than 0:00:00:02, but found 0:00:00:01.")

    def test_absent_subject_fails(self):
        """Test ordering on an absent subject."""
        assert_fails_with(lambda: DurationAssertions(None).be_less_than(timedelta(seconds=2)), "was <null>")


class TestDurationComponents:
    """Test the component fields."""

    @pytest.fixture
    def duration(self):
        """1 day, 2 hours, 3 minutes, 4.005006 seconds."""
        return timedelta(days=1, hours=2, minutes=3, seconds=4, milliseconds=5, microseconds=6)

    def test_components(self, duration):
        """Test every component of a positive duration."""
        result = (should(duration)
                  .have_days(1).and_
                  .have_hours(2).and_
                  .have_minutes(3).and_
                  .have_seconds(4).and_
                  .have_milliseconds(5).and_
                  .have_microseconds(6))
        assert_passes(result)

    def test_negative_components_truncate_toward_zero(self):
        """Test that minus ninety minutes has hours -1 and minutes -30."""
        assert_passes(should(timedelta(minutes=-90)).have_days(0).and_.have_hours(-1).and_.have_minutes(-30))

    def test_component_failure(self, duration):
        """Test the component failure message."""
        assert_fails_with(lambda: should(duration).have_hours(3),
                          "Expected duration to have hours 3, but found hours 2.")

    def test_negated_components(self, duration):
        """Test the negated component forms."""
        assert_passes(should(duration).not_have_days(2).and_.not_have_seconds(5).and_.not_have_microseconds(0))
        assert_fails(lambda: should(duration).not_have_minutes(3))

    @pytest.mark.parametrize("method", ["have_days", "not_have_days", "have_hours", "not_have_milliseconds"])
    def test_absent_subject_fails(self, method):
        """Test component checks on an absent subject."""
        assert_fails_with(lambda: getattr(DurationAssertions(None), method)(1), "but was <null>.")


class TestDurationTotals:
    """Test the approximate total checks."""

    def test_totals(self):
        """Test every total of ninety minutes."""
        duration = timedelta(minutes=90)
        assert_passes(should(duration).have_total_hours(1.5))
        assert_passes(should(duration).have_total_minutes(90))
        assert_passes(should(duration).have_total_seconds(5400))
        assert_passes(should(duration).have_total_milliseconds(5_400_000))
        assert_passes(should(duration).have_total_microseconds(5_400_000_000))
        assert_passes(should(duration).have_total_days(0.0625))

    def test_default_precision_from_config(self):
        """Test that the configured precision (0.01) is used when none is given."""
        assert_passes(should(timedelta(hours=1)).have_total_hours(1.005))
        assert_fails_with(lambda: should(timedelta(hours=1)).have_total_hours(1.02),
                          "Expected duration to have total hours 1.02, but found total hours 1.0.")

    def test_explicit_precision(self):
        """Test an explicit precision."""
        assert_passes(should(timedelta(hours=1)).have_total_minutes(61, 1.0))
        assert_fails(lambda: should(timedelta(hours=1)).have_total_minutes(62, 1.0))

    def test_negated_totals(self):
        """Test the negated total forms."""
        assert_passes(should(timedelta(days=2)).not_have_total_days(1))
        assert_fails(lambda: should(timedelta(days=2)).not_have_total_hours(48))

    def test_negative_precision_raises(self):
        """Test that a negative precision is rejected."""
        with pytest.raises(PrecisionOutOfRangeError):
            should(timedelta(days=2)).have_total_days(2, -0.5)

    def test_absent_subject_fails(self):
        """Test totals on an absent subject."""
        assert_fails_with(lambda: DurationAssertions(None).have_total_seconds(1), "but was <null>.")
