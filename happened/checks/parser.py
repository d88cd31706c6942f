"""
Schema parser for check files.

This module converts validated YAML data into typed CheckSuite structures.
"""

from __future__ import annotations

from typing import Any

from ..expectations import parse_expectation
from .models import CheckSuite, CountCheck


class SchemaParser:
    """Parses and converts validated YAML to typed CheckSuite structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> CheckSuite:
        """Convert validated data to typed CheckSuite."""
        return CheckSuite(
            version=self.data["version"],
            name=self.data["name"],
            checks=[self._parse_check(check) for check in self.data["checks"]],
        )

    def _parse_check(self, check: dict) -> CountCheck:
        return CountCheck(
            id=check["id"],
            count=check["count"],
            expectation=parse_expectation(check["expect"]),
            call=check.get("call") or "",
        )
