"""
Assertion Execution and Continuations

The reporter is the single place where a matcher is evaluated and a failure is
raised. Adapters never raise ``AssertionError`` themselves.

Failure message layout (produced by ``hamcrest.assert_that``):

```
Expected duration to be equal to 0:00:00:07 because totals must agree, but found 0:00:00:05.
Expected: to be equal to 0:00:00:07
     but: found 0:00:00:05
```

The first line names the subject, the expectation, the optional reason and the
actual value; the last two are hamcrest's own description of the matcher.

Continuations:
- ``AndConstraint`` holds a back-reference to the adapter in ``and_``
- ``AndWhichConstraint`` additionally holds the validated value in ``which``
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar

from hamcrest import assert_that
from hamcrest.core.string_description import StringDescription

from ..config import AssertionConfig
from .formatting import FormatterRegistry, create_default_registry
from .matchers import TemporalMatcher

logger = logging.getLogger(__name__)

TAssertions = TypeVar('TAssertions')


@dataclass(frozen=True)
class AndConstraint(Generic[TAssertions]):
    """Continuation returned by every assertion method."""
    and_: TAssertions


@dataclass(frozen=True)
class AndWhichConstraint(AndConstraint[TAssertions]):
    """Continuation that also exposes the value an assertion just validated."""
    which: Any = None


def build_reason(because: str = "", because_args: Sequence[Any] = ()) -> str:
    """Build the reason fragment appended to a failure headline.

    Args:
        because: Reason text, optionally a ``str.format`` template
        because_args: Arguments for the template

    Returns:
        Empty string, or the reason starting with a space and the word "because"
    """
    if not because:
        return ""
    text = because.format(*because_args) if because_args else because
    text = text.strip()
    if not text.startswith("because"):
        text = f"because {text}"
    return f" {text}"


class AssertionReporter:
    """Evaluates matchers and raises assertion failures."""

    def __init__(self, config: Optional[AssertionConfig] = None, registry: Optional[FormatterRegistry] = None):
        """Initialize the reporter.

        Args:
            config: Assertion configuration (defaults to environment)
            registry: Frozen formatter registry (defaults to the built-in one)
        """
        self.config = config or AssertionConfig.from_env()
        self.registry = registry or create_default_registry(self.config)
        self.config.apply_logging()

    def format(self, value: Any) -> str:
        return self.registry.format(value)

    def headline(self, identifier: str, subject: Any, matcher: TemporalMatcher, reason: str = "") -> str:
        """Single-line failure summary naming subject, expectation and actual value."""
        expectation = StringDescription()
        matcher.describe_to(expectation)
        mismatch = StringDescription()
        matcher.describe_mismatch(subject, mismatch)
        return f"Expected {identifier} {expectation}{reason}, but {mismatch}."

    def evaluate(self, identifier: str, subject: Any, matcher: TemporalMatcher,
                 because: str = "", because_args: Sequence[Any] = ()) -> None:
        """Evaluate a matcher against the subject.

        Args:
            identifier: Name of the subject used in the failure message
            subject: The value under test (may be None)
            matcher: Matcher describing the expectation
            because: Optional reason template
            because_args: Arguments for the reason template

        Raises:
            AssertionError: If the matcher does not match the subject
        """
        matcher.bind(self.registry)
        if matcher.matches(subject):
            logger.debug(f"Assertion passed for {identifier}: {type(matcher).__name__}")
            return

        headline = self.headline(identifier, subject, matcher, build_reason(because, because_args))
        logger.debug(f"Assertion failed: {headline}")
        assert_that(subject, matcher, headline)


# Global reporter instance
_global_reporter: Optional[AssertionReporter] = None


def get_reporter() -> AssertionReporter:
    """Get the global reporter instance."""
    global _global_reporter
    if _global_reporter is None:
        _global_reporter = AssertionReporter(AssertionConfig.from_env())
    return _global_reporter


def configure(config: Optional[AssertionConfig] = None,
              registry: Optional[FormatterRegistry] = None) -> AssertionReporter:
    """Replace the global reporter.

    Intended to run once at process start, e.g. from a ``conftest.py``.

    Args:
        config: Assertion configuration (defaults to environment)
        registry: Frozen formatter registry (defaults to the built-in one)

    Returns:
        The new global reporter
    """
    global _global_reporter
    _global_reporter = AssertionReporter(config, registry)
    logger.debug("Global assertion reporter configured")
    return _global_reporter
