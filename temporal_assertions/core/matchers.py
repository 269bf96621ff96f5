"""
Hamcrest Matchers for Temporal Values

Each assertion method evaluates exactly one matcher. Matchers render values
through a ``FormatterRegistry`` bound by the reporter, so failure text uses the
same display form for every temporal type.

Polarity:
- every matcher takes a ``negated`` flag that inverts the condition
- ``IsEqualTo`` treats two absent values as equal, in either polarity
- every other matcher needs a subject and fails for ``None`` regardless of
  polarity, describing the mismatch as ``was <null>``
- ordering and tolerance matchers also need an expected value; a missing one
  fails in both polarities
"""

import operator
from datetime import timedelta
from typing import Any, Callable, Optional

from hamcrest.core.base_matcher import BaseMatcher

from ..exceptions import PrecisionOutOfRangeError
from ..utils import distance as default_distance
from .formatting import FormatterRegistry


class TemporalMatcher(BaseMatcher):
    """Base matcher with polarity and registry-backed rendering."""

    requires_subject = True
    requires_expected = False

    def __init__(self, negated: bool = False):
        self.negated = negated
        self.registry: Optional[FormatterRegistry] = None

    def bind(self, registry: FormatterRegistry) -> 'TemporalMatcher':
        """Attach the registry used to render values and return self."""
        self.registry = registry
        return self

    def format(self, value: Any) -> str:
        if self.registry is None:
            return "<null>" if value is None else str(value)
        return self.registry.format(value)

    def _holds(self, item: Any) -> bool:
        raise NotImplementedError("Subclasses must implement _holds()")

    def _expectation(self) -> str:
        raise NotImplementedError("Subclasses must implement _expectation()")

    def _actual(self, item: Any) -> str:
        return f"found {self.format(item)}"

    def _matches(self, item: Any) -> bool:
        if item is None and self.requires_subject:
            return False
        if self.requires_expected and self.expected is None:
            return False
        result = self._holds(item)
        return not result if self.negated else result

    def describe_to(self, description) -> None:
        prefix = "not to " if self.negated else "to "
        description.append_text(prefix + self._expectation())

    def describe_mismatch(self, item: Any, mismatch_description) -> None:
        if item is None:
            mismatch_description.append_text(f"was {self.format(None)}")
        else:
            mismatch_description.append_text(self._actual(item))


class IsEqualTo(TemporalMatcher):
    """Null-aware equality, optionally with a custom comparison."""

    requires_subject = False

    def __init__(self, expected: Any, equals: Optional[Callable[[Any, Any], bool]] = None, negated: bool = False):
        super().__init__(negated)
        self.expected = expected
        self.equals = equals or operator.eq

    def _holds(self, item: Any) -> bool:
        if item is None or self.expected is None:
            return item is None and self.expected is None
        return bool(self.equals(item, self.expected))

    def _expectation(self) -> str:
        return f"be equal to {self.format(self.expected)}"


ORDER_RELATIONS = {
    'greater_than': ("be greater than", operator.gt),
    'greater_than_or_equal_to': ("be greater than or equal to", operator.ge),
    'less_than': ("be less than", operator.lt),
    'less_than_or_equal_to': ("be less than or equal to", operator.le),
    'after': ("be after", operator.gt),
    'on_or_after': ("be on or after", operator.ge),
    'before': ("be before", operator.lt),
    'on_or_before': ("be on or before", operator.le),
}


class IsOrdered(TemporalMatcher):
    """Compares the subject with an expected value using the type's total order."""

    requires_expected = True

    def __init__(self, relation: str, expected: Any, key: Optional[Callable[[Any], Any]] = None,
                 negated: bool = False):
        if relation not in ORDER_RELATIONS:
            raise ValueError(f"Unknown order relation: {relation}")
        super().__init__(negated)
        self.relation = relation
        self.expected = expected
        self.key = key or (lambda value: value)
        self.phrase, self.compare = ORDER_RELATIONS[relation]

    def _holds(self, item: Any) -> bool:
        return bool(self.compare(self.key(item), self.key(self.expected)))

    def _expectation(self) -> str:
        return f"{self.phrase} {self.format(self.expected)}"


def is_negative(precision: Any) -> bool:
    """Whether a float or timedelta precision lies below zero."""
    if isinstance(precision, timedelta):
        return precision < timedelta(0)
    return precision < 0


class IsCloseTo(TemporalMatcher):
    """Matches when the subject lies within ``precision`` of ``expected``.

    The boundary is inclusive. A negative precision is rejected on
    construction, before any comparison takes place.
    """

    requires_expected = True

    def __init__(self, expected: Any, precision: Any, distance: Optional[Callable[[Any, Any], Any]] = None,
                 negated: bool = False, parameter: str = "precision"):
        if is_negative(precision):
            raise PrecisionOutOfRangeError(precision, parameter)
        super().__init__(negated)
        self.expected = expected
        self.precision = precision
        self.distance = distance or default_distance

    def _holds(self, item: Any) -> bool:
        return self.distance(item, self.expected) <= self.precision

    def _expectation(self) -> str:
        return f"be within {self.format(self.precision)} from {self.format(self.expected)}"

    def _actual(self, item: Any) -> str:
        if self.expected is None:
            return f"found {self.format(item)}"
        gap = self.distance(item, self.expected)
        return f"found {self.format(item)}, which differs by {self.format(gap)}"


class HasFeature(TemporalMatcher):
    """Compares a field or derived value of the subject."""

    def __init__(self, label: str, getter: Callable[[Any], Any], expected: Any,
                 compare: Optional[Callable[[Any, Any], bool]] = None, negated: bool = False,
                 describe_actual: Optional[Callable[[Any], str]] = None):
        super().__init__(negated)
        self.label = label
        self.getter = getter
        self.expected = expected
        self.compare = compare or operator.eq
        self.describe_actual = describe_actual

    def _holds(self, item: Any) -> bool:
        return bool(self.compare(self.getter(item), self.expected))

    def _expectation(self) -> str:
        return f"have {self.label} {self.format(self.expected)}"

    def _actual(self, item: Any) -> str:
        if self.describe_actual is not None:
            return self.describe_actual(item)
        return f"found {self.label} {self.format(self.getter(item))}"


class Satisfies(TemporalMatcher):
    """Boolean property of the subject, such as containment or validity."""

    def __init__(self, label: str, predicate: Callable[[Any], bool],
                 describe_actual: Optional[Callable[[Any], str]] = None, negated: bool = False):
        super().__init__(negated)
        self.label = label
        self.predicate = predicate
        self.describe_actual = describe_actual

    def _holds(self, item: Any) -> bool:
        return bool(self.predicate(item))

    def _expectation(self) -> str:
        return self.label

    def _actual(self, item: Any) -> str:
        if self.describe_actual is not None:
            return self.describe_actual(item)
        return super()._actual(item)
