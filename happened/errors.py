"""
Error types raised by happened.

InvalidArgumentError covers every caller programming error (absent
configuration, negative magnitude, unknown comparison kind, ...).
ExpectationError is what an assertion entry point raises when an
observed call count does not satisfy its expectation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .expectations.models import Expectation


class InvalidArgumentError(ValueError):
    """A required argument was absent or outside its documented domain."""

    def __init__(self, argument_name: str, message: str):
        super().__init__(f"{argument_name}: {message}")
        self.argument_name = argument_name


class ExpectationError(AssertionError):
    """
    Raised when a call count does not satisfy an expectation.

    Attributes:
        call_description: Human-readable form of the asserted call
        expectation: The expectation that was evaluated
        actual_count: The observed number of matching calls
    """

    def __init__(
        self,
        message: str,
        call_description: str,
        expectation: Expectation,
        actual_count: int,
    ):
        super().__init__(message)
        self.call_description = call_description
        self.expectation = expectation
        self.actual_count = actual_count


def guard_against_none(value: Any, argument_name: str) -> None:
    """Raise InvalidArgumentError if value is None."""
    if value is None:
        raise InvalidArgumentError(argument_name, "Must not be None")
