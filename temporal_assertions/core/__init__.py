"""
Core infrastructure shared by every assertion adapter.

This module contains the foundational components:
- FormatterRegistry: type-keyed rendering of values in failure messages
- Matchers: hamcrest matchers for equality, ordering, closeness and fields
- AssertionReporter: evaluates matchers and raises failures
- AndConstraint / AndWhichConstraint: continuation handles
"""

from .execution import (
    AndConstraint,
    AndWhichConstraint,
    AssertionReporter,
    build_reason,
    configure,
    get_reporter,
)
from .formatting import FormatterRegistry, create_default_registry, register_defaults
from .matchers import HasFeature, IsCloseTo, IsEqualTo, IsOrdered, Satisfies, TemporalMatcher

__all__ = [
    "AndConstraint",
    "AndWhichConstraint",
    "AssertionReporter",
    "build_reason",
    "configure",
    "get_reporter",
    "FormatterRegistry",
    "create_default_registry",
    "register_defaults",
    "HasFeature",
    "IsCloseTo",
    "IsEqualTo",
    "IsOrdered",
    "Satisfies",
    "TemporalMatcher",
]
