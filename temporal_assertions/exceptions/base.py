from typing import Any


class TemporalAssertionsError(Exception):
    """Raised when the library is called in a way it cannot honour.

    These are caller mistakes detected before any comparison, such as a
    negative precision or a subject with no matching adapter. A failed
    assertion is never one of these; it is the ``AssertionError`` raised by
    hamcrest.

    Attributes:
        message: What was wrong with the call
        context: The rejected argument(s), keyed by name
    """

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        rejected = ", ".join(f"{name}={value!r}" for name, value in self.context.items())
        return f"{self.message} (got {rejected})"
