"""
happened - Repeat Expectations and Call-Count Assertions

This package judges how many times a faked call happened against an
expectation such as "never", "exactly once" or "at least twice".

Subpackages:
    - expectations: Expectation values and the builder grammar
    - assertions: Assertion engine and reference entry point
    - checks: YAML check files of recorded counts

Usage:
    from happened import CallCountAssertion, at_least, must_have_happened_twice_or_less

    assertion = CallCountAssertion("Gateway.charge()", recorder.count)
    assertion.must_have_happened(at_least().once())
    must_have_happened_twice_or_less(assertion)

    # Non-raising judgment
    result = judge_count(3, at_least().twice())
    print(result)
"""

__version__ = "0.1.0"

from .errors import ExpectationError, InvalidArgumentError

# Re-export expectations for convenience
from .expectations import (
    # Models
    ComparisonKind,
    Expectation,
    ComparativeExpectation,
    NeverExpectation,
    PredicateExpectation,
    # Builder
    MagnitudeStep,
    comparison_of,
    exactly,
    at_least,
    no_more_than,
    never,
    from_predicate,
    # Parsing
    parse_expectation,
)

# Re-export assertions for convenience
from .assertions import (
    AssertConfiguration,
    AssertionEngine,
    AssertionResult,
    AssertionStatus,
    CallCountAssertion,
    UnorderedCallAssertion,
    judge_count,
)

# Shorthands
from .shorthand import (
    must_have_happened,
    must_not_have_happened,
    must_have_happened_once_exactly,
    must_have_happened_once_or_more,
    must_have_happened_once_or_less,
    must_have_happened_twice_exactly,
    must_have_happened_twice_or_more,
    must_have_happened_twice_or_less,
)

__all__ = [
    # Package info
    "__version__",
    # Errors
    "InvalidArgumentError",
    "ExpectationError",
    # Expectations - Models
    "ComparisonKind",
    "Expectation",
    "ComparativeExpectation",
    "NeverExpectation",
    "PredicateExpectation",
    # Expectations - Builder
    "MagnitudeStep",
    "comparison_of",
    "exactly",
    "at_least",
    "no_more_than",
    "never",
    "from_predicate",
    "parse_expectation",
    # Assertions
    "AssertConfiguration",
    "AssertionEngine",
    "AssertionResult",
    "AssertionStatus",
    "CallCountAssertion",
    "UnorderedCallAssertion",
    "judge_count",
    # Shorthands
    "must_have_happened",
    "must_not_have_happened",
    "must_have_happened_once_exactly",
    "must_have_happened_once_or_more",
    "must_have_happened_once_or_less",
    "must_have_happened_twice_exactly",
    "must_have_happened_twice_or_more",
    "must_have_happened_twice_or_less",
]
