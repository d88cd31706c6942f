"""
Typed expectation values.

This module contains the comparison-kind enum and the immutable
expectation dataclasses that judge an observed call count.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..errors import InvalidArgumentError


# ─────────────────────────────────────────────────────────────────────────────
# Comparison Kind
# ─────────────────────────────────────────────────────────────────────────────

class ComparisonKind(str, Enum):
    """How an actual call count is compared against the expected magnitude."""
    EXACTLY = "exactly"
    AT_LEAST = "at_least"
    NO_MORE_THAN = "no_more_than"

    @property
    def relation(self) -> Callable[[int, int], bool]:
        """Relation applied as relation(actual, expected)."""
        return _COMPARISONS[self][0]

    @property
    def word(self) -> str:
        """Wording used when describing an expectation of this kind."""
        return _COMPARISONS[self][1]


_COMPARISONS: dict[ComparisonKind, tuple[Callable[[int, int], bool], str]] = {
    ComparisonKind.EXACTLY: (operator.eq, "exactly"),
    ComparisonKind.AT_LEAST: (operator.ge, "at least"),
    ComparisonKind.NO_MORE_THAN: (operator.le, "no more than"),
}

if set(_COMPARISONS) != set(ComparisonKind):
    missing = ", ".join(k.value for k in set(ComparisonKind) - set(_COMPARISONS))
    raise RuntimeError(f"No relation or wording for comparison kind(s): {missing}")


def magnitude_word(magnitude: int) -> str:
    """Render a magnitude as "once", "twice" or "N times"."""
    if magnitude == 1:
        return "once"
    if magnitude == 2:
        return "twice"
    return f"{magnitude} times"


def validate_magnitude(magnitude: object) -> int:
    """Return magnitude if it is a non-negative int, else raise."""
    if isinstance(magnitude, bool) or not isinstance(magnitude, int):
        raise InvalidArgumentError(
            "magnitude",
            f"Must be an integer, got {type(magnitude).__name__}",
        )
    if magnitude < 0:
        raise InvalidArgumentError(
            "magnitude",
            f"Must be >= 0, got {magnitude}",
        )
    return magnitude


# ─────────────────────────────────────────────────────────────────────────────
# Expectations
# ─────────────────────────────────────────────────────────────────────────────

class Expectation(ABC):
    """
    Immutable specification of acceptable call counts.

    Subclasses judge a count with matches() and describe themselves
    for failure messages with describe().
    """

    @abstractmethod
    def matches(self, actual_count: int) -> bool:
        """Return True if actual_count satisfies this expectation."""

    @abstractmethod
    def describe(self) -> str:
        """Return the human-readable form used in failure messages."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class ComparativeExpectation(Expectation):
    """
    A comparison kind bound to a magnitude, e.g. "at least twice".

    Attributes:
        kind: Which relation is applied between actual and expected counts
        magnitude: The non-negative threshold
    """
    kind: ComparisonKind
    magnitude: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ComparisonKind):
            raise InvalidArgumentError(
                "kind",
                f"Must be a ComparisonKind, got {self.kind!r}",
            )
        validate_magnitude(self.magnitude)

    def matches(self, actual_count: int) -> bool:
        return self.kind.relation(actual_count, self.magnitude)

    def describe(self) -> str:
        return f"{self.kind.word} {magnitude_word(self.magnitude)}"


@dataclass(frozen=True)
class NeverExpectation(ComparativeExpectation):
    """Exactly zero calls, described as "never"."""
    kind: ComparisonKind = field(default=ComparisonKind.EXACTLY, init=False)
    magnitude: int = field(default=0, init=False)

    def describe(self) -> str:
        return "never"


@dataclass(frozen=True)
class PredicateExpectation(Expectation):
    """
    An arbitrary rule over the call count.

    The predicate is invoked once per matches() call, on the calling
    thread, and must be safe to run there. Errors it raises propagate
    unchanged; they are not treated as a failed match.

    Attributes:
        predicate: Function from call count to truthiness
        rendered_form: Description used verbatim by describe()
    """
    predicate: Callable[[int], bool]
    rendered_form: str

    def matches(self, actual_count: int) -> bool:
        return bool(self.predicate(actual_count))

    def describe(self) -> str:
        return self.rendered_form
