"""
Base Model Components and Mixins

Common behaviour shared by the temporal value models.

## DateTimeMixin

Pydantic registers ``@field_validator`` methods from every class in the MRO,
so a model that inherits ``DateTimeMixin`` gets its datetime fields
normalised automatically:

```python
class Interval(DateTimeMixin, BaseModel):
    start: Optional[datetime] = None   # '2024-01-01T10:00:00Z' is accepted
```

- ISO strings are parsed, with ``Z`` treated as ``+00:00``
- naive datetimes are taken as UTC
- ``None`` passes through unchanged

## OrderedValueMixin

Models that have a natural order implement ``_sort_key()`` and inherit the
rich comparison operators. Comparing against an unrelated type returns
``NotImplemented`` so Python raises the usual ``TypeError``.

## Components

- DateTimeMixin: aware datetime validation for model fields
- OrderedValueMixin: ordering derived from a sort key
"""

import logging
from datetime import datetime, timezone
from typing import Any, Tuple

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


class DateTimeMixin(BaseModel):
    """
    Mixin providing consistent, timezone-aware datetime validation.

    Only fields annotated with ``datetime`` (or ``Optional[datetime]``) are
    touched; every other field is left to pydantic's own validation.
    """

    @field_validator('*', mode='before')
    @classmethod
    def validate_datetime_fields(cls, v, info):
        """
        Normalise datetime fields to aware datetimes.

        Args:
            v: Field value to validate
            info: Field information from Pydantic

        Returns:
            Aware datetime, or the original value for non-datetime fields

        Raises:
            ValueError: If datetime format is invalid or type is unsupported
        """
        from typing import get_args, get_origin

        field = cls.model_fields.get(info.field_name)
        field_annotation = getattr(field, 'annotation', None)

        if field_annotation is None:
            return v

        origin = get_origin(field_annotation)
        if origin is not None:
            args = get_args(field_annotation)
            if not any(arg is datetime for arg in args if arg is not type(None)):
                return v
        elif field_annotation is not datetime:
            return v

        if v is None:
            return v

        if isinstance(v, str):
            try:
                v = datetime.fromisoformat(v.replace('Z', '+00:00'))
            except ValueError as e:
                raise ValueError(f"Invalid datetime format: {v}. Expected ISO format.") from e

        if isinstance(v, datetime):
            if v.tzinfo is None:
                logger.debug(f"Treating naive datetime {v.isoformat()} as UTC in {cls.__name__}")
                return v.replace(tzinfo=timezone.utc)
            return v

        raise ValueError(f"Invalid datetime type: {type(v)}. Expected datetime object or ISO string.")


class OrderedValueMixin(BaseModel):
    """Mixin deriving ``<``, ``<=``, ``>`` and ``>=`` from ``_sort_key()``."""

    def _sort_key(self) -> Tuple[Any, ...]:
        raise NotImplementedError("Subclasses must implement _sort_key()")

    def _comparable(self, other) -> bool:
        return isinstance(other, type(self)) or isinstance(self, type(other))

    def __lt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other):
        if not self._comparable(other):
            return NotImplemented
        return self._sort_key() >= other._sort_key()
