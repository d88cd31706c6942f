"""
Runs a check suite through the assertion engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..assertions import AssertionEngine, AssertionResult
from .models import CheckSuite, CountCheck

logger = logging.getLogger(__name__)


@dataclass
class CheckOutcome:
    """A check paired with its verdict."""
    check: CountCheck
    result: AssertionResult

    def to_dict(self) -> dict:
        return {
            "id": self.check.id,
            "call": self.check.call_description,
            **self.result.to_dict(),
        }


@dataclass
class SuiteRun:
    """Outcomes of every check in a suite."""
    suite: CheckSuite
    outcomes: list[CheckOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.result.passed for outcome in self.outcomes)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.result.failed)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.suite.name,
            "status": "passed" if self.passed else "failed",
            "total": len(self.outcomes),
            "failed": self.failed_count,
            "checks": [outcome.to_dict() for outcome in self.outcomes],
        }


def run_suite(suite: CheckSuite, engine: AssertionEngine | None = None) -> SuiteRun:
    """Judge every check in the suite, in file order."""
    engine = engine or AssertionEngine()
    run = SuiteRun(suite=suite)

    for check in suite.checks:
        result = engine.judge(check.count, check.expectation)
        run.outcomes.append(CheckOutcome(check=check, result=result))

    logger.info(
        f"Suite '{suite.name}': {len(run.outcomes) - run.failed_count}/{len(run.outcomes)} checks passed"
    )
    return run
