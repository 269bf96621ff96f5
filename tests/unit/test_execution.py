"""
Tests for the matchers, the assertion reporter and the continuations.
"""

import dataclasses
import logging
from datetime import date, timedelta

import pytest
from hamcrest import assert_that

from temporal_assertions import (
    AndConstraint,
    AndWhichConstraint,
    AssertionConfig,
    AssertionReporter,
    FormatterRegistry,
    LocalDateAssertions,
    PrecisionOutOfRangeError,
    configure,
    get_reporter,
    register_defaults,
)
from temporal_assertions.core import HasFeature, IsCloseTo, IsEqualTo, IsOrdered, Satisfies, build_reason
from tests.helpers import assert_fails_with, assert_passes, failure_message


class TestBuildReason:
    """Test the reason fragment."""

    def test_empty(self):
        """Test that no reason gives an empty fragment."""
        assert build_reason() == ""

    def test_because_is_prepended(self):
        """Test that 'because' is added when missing."""
        assert build_reason("it matters") == " because it matters"

    def test_because_is_not_duplicated(self):
        """Test that an existing 'because' is kept."""
        assert build_reason("because it matters") == " because it matters"

    def test_arguments_are_formatted(self):
        """Test str.format placeholders."""
        assert build_reason("{0} needs {1} days", ("release", 3)) == " because release needs 3 days"


class TestMatchers:
    """Test the hamcrest matchers directly."""

    def test_equal_to_handles_absent_values(self):
        """Test null-aware equality in both polarities."""
        assert IsEqualTo(None).matches(None)
        assert not IsEqualTo(None, negated=True).matches(None)
        assert not IsEqualTo(1).matches(None)
        assert IsEqualTo(1, negated=True).matches(None)

    def test_ordered_rejects_absent_subject_in_both_polarities(self):
        """Test that ordering needs a subject."""
        assert not IsOrdered('less_than', 1).matches(None)
        assert not IsOrdered('less_than', 1, negated=True).matches(None)

    def test_ordered_unknown_relation(self):
        """Test that an unknown relation is rejected."""
        with pytest.raises(ValueError, match="Unknown order relation"):
            IsOrdered('sideways', 1)

    def test_ordered_key(self):
        """Test ordering through a key function."""
        assert IsOrdered('greater_than', "aa", key=len).matches("bbb")

    def test_close_to_negative_precision(self):
        """Test that a negative precision is rejected on construction."""
        with pytest.raises(PrecisionOutOfRangeError) as exc_info:
            IsCloseTo(timedelta(0), timedelta(seconds=-1))
        assert exc_info.value.context['parameter'] == "precision"

    def test_absent_expected_fails_in_both_polarities(self):
        """Test that ordering and closeness need an expected value."""
        assert not IsCloseTo(None, 1).matches(5)
        assert not IsCloseTo(None, 1, negated=True).matches(5)
        assert not IsOrdered('less_than', None).matches(5)
        assert not IsOrdered('less_than', None, negated=True).matches(5)

    def test_feature_custom_mismatch(self):
        """Test describe_actual on HasFeature."""
        matcher = HasFeature("day", lambda s: s.day, 1, describe_actual=lambda s: "it is not a day")
        with pytest.raises(AssertionError, match="but: it is not a day"):
            assert_that(date(2024, 1, 2), matcher)

    def test_close_to_boundary(self):
        """Test the inclusive boundary."""
        assert IsCloseTo(10, 2).matches(12)
        assert not IsCloseTo(10, 2).matches(13)
        assert IsCloseTo(10, 2, negated=True).matches(13)

    def test_feature_and_satisfies_need_subject(self):
        """Test that structural matchers fail for None in both polarities."""
        assert not HasFeature("day", lambda s: s.day, 1).matches(None)
        assert not HasFeature("day", lambda s: s.day, 1, negated=True).matches(None)
        assert not Satisfies("be true", bool).matches(None)
        assert not Satisfies("be true", bool, negated=True).matches(None)

    def test_hamcrest_message(self):
        """Test the description used by hamcrest.assert_that."""
        with pytest.raises(AssertionError) as exc_info:
            assert_that(date(2024, 1, 2), HasFeature("day", lambda s: s.day, 1))
        message = str(exc_info.value)
        assert "Expected: to have day 1" in message
        assert "but: found day 2" in message


class TestAssertionReporter:
    """Test the reporter."""

    def test_passing_assertion_returns_none(self, reporter):
        """Test a passing evaluation."""
        assert reporter.evaluate("value", 1, IsEqualTo(1)) is None

    def test_failure_message_layout(self, reporter):
        """Test the headline and the hamcrest description."""
        message = failure_message(
            lambda: reporter.evaluate("local date", date(2024, 1, 2), IsEqualTo(date(2024, 1, 1)),
                                      "it is {0}", ("new year",)))
        lines = message.splitlines()
        assert lines[0] == ("Expected local date to be equal to 2024-01-01 because it is new year, "
                            "but found 2024-01-02.")
        assert lines[1] == "Expected: to be equal to 2024-01-01"
        assert lines[2].strip() == "but: found 2024-01-02"

    def test_null_text_from_config(self):
        """Test the configured placeholder in failure messages."""
        reporter = AssertionReporter(AssertionConfig(null_text="(nothing)"))
        assert_fails_with(lambda: LocalDateAssertions(None, reporter=reporter).have_day(1), "but was (nothing).")

    def test_custom_registry(self, assertion_config):
        """Test a reporter with a custom formatter."""
        registry = FormatterRegistry()
        registry.register(date, lambda value: value.strftime("%d/%m/%Y"))
        reporter = AssertionReporter(assertion_config, register_defaults(registry).freeze())
        assert_fails_with(lambda: LocalDateAssertions(date(2024, 1, 2), reporter=reporter).be(date(2024, 1, 1)),
                          "to be equal to 01/01/2024, but found 02/01/2024.")

    def test_failure_is_logged(self, reporter, caplog):
        """Test that failures are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="temporal_assertions"):
            failure_message(lambda: reporter.evaluate("value", 1, IsEqualTo(2)))
        assert "Assertion failed: Expected value to be equal to 2" in caplog.text


class TestGlobalReporter:
    """Test the process-wide reporter."""

    def test_configure_replaces_reporter(self):
        """Test that configure installs a new reporter."""
        reporter = configure(AssertionConfig(null_text="<none>"))
        assert get_reporter() is reporter
        assert get_reporter().registry.null_text == "<none>"

    def test_adapter_uses_global_reporter(self):
        """Test that adapters default to the global reporter."""
        configure(AssertionConfig(null_text="<none>"))
        assert_fails_with(lambda: LocalDateAssertions(None).have_day(1), "but was <none>.")


class TestContinuations:
    """Test AndConstraint and AndWhichConstraint."""

    def test_and_constraint_refers_back(self, sample_date):
        """Test the back-reference."""
        adapter = LocalDateAssertions(sample_date)
        assert_passes(adapter.have_day(13), adapter)

    def test_and_which_exposes_value(self):
        """Test the validated value."""
        which = AndWhichConstraint("adapter", 42)
        assert which.and_ == "adapter"
        assert which.which == 42
        assert isinstance(which, AndConstraint)

    def test_continuations_are_frozen(self):
        """Test that continuations cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            AndConstraint("adapter").and_ = "other"
