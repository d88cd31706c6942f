"""
Schema validation for check files.

This module checks raw parsed YAML against the check file schema and
reports every error with its path and a suggestion where one helps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import InvalidArgumentError
from ..expectations import parse_expectation
from ..expectations.parser import PHRASE_SUGGESTION


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].expect"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the check file schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "checks"}
    REQUIRED_CHECK = {"id", "count", "expect"}
    OPTIONAL_CHECK = {"call"}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.check_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your check file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if isinstance(version, bool) or not isinstance(version, int):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your check file"
            )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error(
                "checks",
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                "checks",
                "Must contain at least one check",
                suggestion="Add a check with 'id', 'count' and 'expect'"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(i, check)

    def _validate_check(self, index: int, check: Any) -> None:
        path = f"checks[{index}]"

        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        keys = set(check.keys())
        for key in sorted(self.REQUIRED_CHECK - keys):
            self.result.add_error(f"{path}.{key}", "Required field is missing")
        for key in sorted(keys - self.REQUIRED_CHECK - self.OPTIONAL_CHECK, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_CHECK | self.OPTIONAL_CHECK))}"
            )

        check_id = check.get("id")
        if "id" in check:
            if not isinstance(check_id, str) or not check_id.strip():
                self.result.add_error(
                    f"{path}.id",
                    "Must be a non-empty string",
                    value=check_id
                )
            elif check_id in self.check_ids:
                self.result.add_error(
                    f"{path}.id",
                    f"Duplicate check id '{check_id}'",
                    suggestion="Each check needs a unique id"
                )
            else:
                self.check_ids.add(check_id)

        call = check.get("call")
        if call is not None and not isinstance(call, str):
            self.result.add_error(
                f"{path}.call",
                "Must be a string",
                value=call
            )

        count = check.get("count")
        if "count" in check:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                self.result.add_error(
                    f"{path}.count",
                    "Must be a non-negative integer",
                    value=count
                )

        if "expect" in check:
            self._validate_expect(f"{path}.expect", check["expect"])

    def _validate_expect(self, path: str, expect: Any) -> None:
        if not isinstance(expect, (str, dict)):
            self.result.add_error(
                path,
                "Must be a phrase or an object with 'kind' and 'times'",
                value=expect,
                suggestion=PHRASE_SUGGESTION
            )
            return

        try:
            parse_expectation(expect)
        except InvalidArgumentError as e:
            self.result.add_error(
                path,
                str(e),
                value=expect
            )
