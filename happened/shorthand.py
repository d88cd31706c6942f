"""
Named shorthand assertions.

Each function builds exactly one expectation and hands it to the
configuration's must_have_happened(). The configuration's return
value is passed back untouched.
"""

from __future__ import annotations

from typing import Any

from .assertions.models import AssertConfiguration
from .errors import guard_against_none
from .expectations import at_least, exactly, never, no_more_than


def must_have_happened(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened once or more."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(at_least().once())


def must_not_have_happened(configuration: AssertConfiguration) -> Any:
    """Asserts that the call has not happened."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(never())


def must_have_happened_once_exactly(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened once exactly."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(exactly().once())


def must_have_happened_once_or_more(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened once or more."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(at_least().once())


def must_have_happened_once_or_less(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened once or less."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(no_more_than().once())


def must_have_happened_twice_exactly(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened twice exactly."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(exactly().twice())


def must_have_happened_twice_or_more(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened twice or more."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(at_least().twice())


def must_have_happened_twice_or_less(configuration: AssertConfiguration) -> Any:
    """Asserts that the call must have happened twice or less."""
    guard_against_none(configuration, "configuration")
    return configuration.must_have_happened(no_more_than().twice())
