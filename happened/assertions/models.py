"""
Assertion result models.

This module defines data structures for call-count verdicts and the
handle returned by a successful unordered assertion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..expectations import Expectation


class AssertionStatus(str, Enum):
    """Status of a call-count judgment."""
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class AssertionResult:
    """
    Result of judging a call count against an expectation.

    Attributes:
        status: Whether the count satisfied the expectation
        message: Human-readable description of the result
        expected: Description of the expectation, e.g. "at least twice"
        actual: The observed call count
        details: Additional context for debugging
    """
    status: AssertionStatus
    message: str
    expected: str | None = None
    actual: int | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.passed:
            return f"✅ PASS: {self.message}"

        lines = [f"❌ {self.status.value.upper()}: {self.message}"]
        if self.expected is not None:
            lines.append(f"   Expected: {self.expected}")
        if self.actual is not None:
            lines.append(f"   Actual:   {self.actual}")
        for key, value in self.details.items():
            lines.append(f"   {key}: {value}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "status": self.status.value,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
            "details": self.details,
        }

    @classmethod
    def passed_result(
        cls,
        message: str,
        expected: str | None = None,
        actual: int | None = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            message=message,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        expected: str | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            expected=expected,
            actual=actual,
            details=details or {},
        )


@dataclass(frozen=True)
class UnorderedCallAssertion:
    """
    Handle returned by a successful unordered assertion.

    Ordering constraints are layered on top of it by callers; this
    object only records what was asserted.
    """
    call_description: str
    expectation: Expectation
    actual_count: int


class AssertConfiguration(Protocol):
    """Anything that can assert a call against an expectation."""

    def must_have_happened(self, expectation: Expectation) -> Any:
        ...
