"""
Assertion Engine for Call Counts

This package judges an observed call count against an expectation
and provides a reference assertion entry point.

Usage:
    from happened.assertions import AssertionEngine, CallCountAssertion
    from happened.expectations import at_least

    # Non-raising judgment
    result = AssertionEngine().judge(3, at_least().once())
    if result.passed:
        print("✅ Assertion passed")
    else:
        print(result)  # Detailed failure message

    # Raising entry point
    assertion = CallCountAssertion("Gateway.charge()", 3)
    assertion.must_have_happened(at_least().twice())
"""

# Models
from .models import (
    AssertConfiguration,
    AssertionResult,
    AssertionStatus,
    UnorderedCallAssertion,
)

# Engine
from .engine import (
    AssertionEngine,
    CallCountAssertion,
    # Convenience functions
    judge_count,
    render_failure_message,
)

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    "AssertConfiguration",
    "UnorderedCallAssertion",
    # Engine
    "AssertionEngine",
    "CallCountAssertion",
    # Convenience functions
    "judge_count",
    "render_failure_message",
]
