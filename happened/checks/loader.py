"""
Check file loader.

This module provides the public API for loading and validating
check files from disk or YAML strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import CheckSuite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult


def load_suite(path: str | Path) -> tuple[CheckSuite | None, ValidationResult]:
    """
    Load and validate a check file.

    Args:
        path: Path to the YAML check file

    Returns:
        Tuple of (CheckSuite or None, ValidationResult)
        If validation fails, CheckSuite will be None.

    Example:
        suite, result = load_suite("checks/gateway.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    if not path.is_file():
        result = ValidationResult()
        result.add_error(
            str(path),
            "Not a file",
            suggestion="Pass the path of a YAML check file, not a directory"
        )
        return None, result

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    return _validate_and_parse(str(path), data)


def validate_suite_yaml(yaml_string: str) -> tuple[CheckSuite | None, ValidationResult]:
    """
    Validate a check file from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (CheckSuite or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate_and_parse("yaml", data)


def _validate_and_parse(
    source: str, data: Any
) -> tuple[CheckSuite | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    parser = SchemaParser(data)
    return parser.parse(), result
