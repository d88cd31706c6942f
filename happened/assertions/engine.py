"""
Assertion engine for judging call counts.

This module provides the core logic that evaluates an observed call
count against an expectation, renders failure messages, and a
reference assertion entry point built on top of both.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Union

from ..errors import ExpectationError, InvalidArgumentError, guard_against_none
from ..expectations import (
    ComparisonKind,
    Expectation,
    comparison_of,
    from_predicate,
)
from .models import AssertionResult, UnorderedCallAssertion

logger = logging.getLogger(__name__)

CountSource = Union[int, Callable[[], int]]


class AssertionEngine:
    """
    Engine for judging call counts against expectations.

    Example:
        engine = AssertionEngine()
        result = engine.judge(3, at_least().once())
        result.passed      # True
        result.expected    # "at least once"
    """

    def judge(self, count: int, expectation: Expectation) -> AssertionResult:
        """
        Judge an observed call count.

        Args:
            count: Number of matching calls observed
            expectation: The expectation to evaluate

        Returns:
            AssertionResult indicating pass/fail

        Raises:
            InvalidArgumentError: If expectation is None or count is not
                a non-negative integer
        """
        guard_against_none(expectation, "expectation")
        _validate_count(count)

        description = expectation.describe()
        if expectation.matches(count):
            logger.debug(f"Count {count} satisfies '{description}'")
            return AssertionResult.passed_result(
                message=f"Happened {description}",
                expected=description,
                actual=count,
            )

        logger.debug(f"Count {count} does not satisfy '{description}'")
        return AssertionResult.failed_result(
            message=f"Expected to happen {description} but happened {_times(count)}",
            expected=description,
            actual=count,
        )


class CallCountAssertion:
    """
    Reference assertion entry point for a single call signature.

    The observed count is supplied by a call recorder, either as a
    fixed int or as a zero-argument callable evaluated at assertion
    time.

    Example:
        assertion = CallCountAssertion("Gateway.charge()", lambda: recorder.count("charge"))
        assertion.must_have_happened(exactly().twice())
    """

    def __init__(
        self,
        call_description: str,
        count: CountSource,
        recorded_calls: Sequence[str] = (),
        engine: AssertionEngine | None = None,
    ):
        guard_against_none(call_description, "call_description")
        guard_against_none(count, "count")
        self.call_description = call_description
        self._count = count
        self.recorded_calls = list(recorded_calls)
        self.engine = engine or AssertionEngine()

    def must_have_happened(self, expectation: Expectation) -> UnorderedCallAssertion:
        """
        Assert that the call happened as many times as the expectation allows.

        Returns:
            UnorderedCallAssertion handle for further (ordering) assertions

        Raises:
            ExpectationError: If the count does not satisfy the expectation
        """
        guard_against_none(expectation, "expectation")
        count = self.actual_count()
        result = self.engine.judge(count, expectation)

        if result.failed:
            logger.info(f"Assertion failed for {self.call_description}: {result.message}")
            raise ExpectationError(
                render_failure_message(
                    self.call_description, expectation, count, self.recorded_calls
                ),
                call_description=self.call_description,
                expectation=expectation,
                actual_count=count,
            )

        return UnorderedCallAssertion(
            call_description=self.call_description,
            expectation=expectation,
            actual_count=count,
        )

    def must_have_happened_times(
        self, n: int, kind: ComparisonKind | str
    ) -> UnorderedCallAssertion:
        """Assert against comparison_of(kind).times(n)."""
        return self.must_have_happened(comparison_of(kind).times(n))

    def must_have_happened_matching(
        self, predicate: Callable[[int], bool], description: str
    ) -> UnorderedCallAssertion:
        """Assert that the call count satisfies an arbitrary predicate."""
        return self.must_have_happened(from_predicate(predicate, description))

    def actual_count(self) -> int:
        """Resolve the observed call count."""
        count = self._count() if callable(self._count) else self._count
        _validate_count(count)
        return count


def render_failure_message(
    call_description: str,
    expectation: Expectation,
    actual_count: int,
    recorded_calls: Sequence[str] = (),
) -> str:
    """Render the message of a failed call-count assertion."""
    lines = [
        "",
        "  Assertion failed for the following call:",
        f"    {call_description}",
    ]
    expected = f"  Expected to find it {expectation.describe()} but"

    if recorded_calls:
        lines.append(f"{expected} found it #{actual_count} times among the calls:")
        width = len(str(len(recorded_calls)))
        for index, call in enumerate(recorded_calls, start=1):
            lines.append(f"    {index:>{width}}: {call}")
    elif actual_count == 0:
        lines.append(f"{expected} no calls were made to the fake object.")
    else:
        lines.append(f"{expected} found it #{actual_count} times.")

    return "\n".join(lines) + "\n"


def _validate_count(count: object) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(
            "count",
            f"Must be an integer, got {type(count).__name__}",
        )
    if count < 0:
        raise InvalidArgumentError("count", f"Must be >= 0, got {count}")


def _times(count: int) -> str:
    return "once" if count == 1 else f"{count} times"


# Convenience function for quick judgments
def judge_count(count: int, expectation: Expectation) -> AssertionResult:
    """Judge an observed call count against an expectation."""
    return AssertionEngine().judge(count, expectation)
