"""
Test helpers for temporal assertions.

Utilities for checking that an assertion fails, and with which message.
"""

from .failure_assertions import (
    assert_fails,
    assert_fails_with,
    assert_passes,
    failure_message,
)

__all__ = [
    'assert_fails',
    'assert_fails_with',
    'assert_passes',
    'failure_message',
]
