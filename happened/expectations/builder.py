"""
Builder grammar for expectations.

An expectation is built either in two steps, a comparison kind
followed by a magnitude, or by wrapping a raw predicate:

    comparison_of(ComparisonKind.AT_LEAST).twice()   # "at least twice"
    exactly().times(3)                               # "exactly 3 times"
    never()                                          # "never"
    from_predicate(lambda n: n % 2 == 0, "an even number of times")

Every function here is pure and returns a new immutable value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..errors import InvalidArgumentError
from .models import (
    ComparativeExpectation,
    ComparisonKind,
    NeverExpectation,
    PredicateExpectation,
    validate_magnitude,
)


@dataclass(frozen=True)
class MagnitudeStep:
    """Intermediate builder bound to one comparison kind."""
    kind: ComparisonKind

    def once(self) -> ComparativeExpectation:
        return self.times(1)

    def twice(self) -> ComparativeExpectation:
        return self.times(2)

    def times(self, n: int) -> ComparativeExpectation:
        """
        Bind magnitude n.

        Raises:
            InvalidArgumentError: If n is negative or not an integer
        """
        return ComparativeExpectation(kind=self.kind, magnitude=validate_magnitude(n))


def comparison_of(kind: ComparisonKind | str) -> MagnitudeStep:
    """
    Start an expectation for the given comparison kind.

    Args:
        kind: A ComparisonKind or its value ("exactly", "at_least", "no_more_than")

    Returns:
        MagnitudeStep waiting for once(), twice() or times(n)
    """
    try:
        return MagnitudeStep(ComparisonKind(kind))
    except ValueError:
        valid = ", ".join(k.value for k in ComparisonKind)
        raise InvalidArgumentError(
            "kind",
            f"Unknown comparison kind {kind!r} (valid kinds: {valid})",
        ) from None


def exactly() -> MagnitudeStep:
    """The call count must equal the magnitude given next."""
    return comparison_of(ComparisonKind.EXACTLY)


def at_least() -> MagnitudeStep:
    """The call count must be greater than or equal to the magnitude given next."""
    return comparison_of(ComparisonKind.AT_LEAST)


def no_more_than() -> MagnitudeStep:
    """The call count must be less than or equal to the magnitude given next."""
    return comparison_of(ComparisonKind.NO_MORE_THAN)


def never() -> NeverExpectation:
    """The call must not have happened at all."""
    return NeverExpectation()


def from_predicate(
    predicate: Callable[[int], bool],
    rendered_form: str,
) -> PredicateExpectation:
    """
    Wrap an arbitrary rule over the call count.

    The predicate should be pure and total over non-negative integers.
    It is evaluated lazily on whichever thread judges the count.

    Args:
        predicate: Function deciding whether a count is acceptable
        rendered_form: Text returned verbatim by describe()

    Raises:
        InvalidArgumentError: If predicate is not callable or
            rendered_form is not a string
    """
    if not callable(predicate):
        raise InvalidArgumentError(
            "predicate",
            f"Must be callable, got {type(predicate).__name__}",
        )
    if not isinstance(rendered_form, str):
        raise InvalidArgumentError(
            "rendered_form",
            f"Must be a string, got {type(rendered_form).__name__}",
        )
    return PredicateExpectation(predicate=predicate, rendered_form=rendered_form)
