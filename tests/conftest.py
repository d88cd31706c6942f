"""Shared pytest fixtures for happened tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from happened.assertions import AssertionEngine
from happened.expectations import Expectation


class RecordingConfiguration:
    """Assert configuration that records every expectation it receives."""

    def __init__(self, result: Any = "handle"):
        self.result = result
        self.expectations: list[Expectation] = []

    def must_have_happened(self, expectation: Expectation) -> Any:
        self.expectations.append(expectation)
        return self.result


@pytest.fixture
def configuration() -> RecordingConfiguration:
    """A configuration double that captures expectations."""
    return RecordingConfiguration()


@pytest.fixture
def engine() -> AssertionEngine:
    return AssertionEngine()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


SAMPLE_CHECKS = """\
version: 1
name: Payment gateway
checks:
  - id: charge
    call: Gateway.charge(amount=100)
    count: 1
    expect: exactly once
  - id: refund
    count: 0
    expect: never
  - id: retries
    count: 3
    expect:
      kind: at_least
      times: 2
"""


@pytest.fixture
def checks_file(tmp_path: Path) -> Path:
    """A valid check file where every check passes."""
    path = tmp_path / "checks.yaml"
    path.write_text(SAMPLE_CHECKS)
    return path


@pytest.fixture
def failing_checks_file(tmp_path: Path) -> Path:
    """A valid check file with one failing check."""
    path = tmp_path / "failing.yaml"
    path.write_text(SAMPLE_CHECKS.replace("count: 0", "count: 2"))
    return path
