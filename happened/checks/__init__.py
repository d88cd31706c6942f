"""
Check files: recorded call counts paired with expectations

Usage:
    from happened.checks import load_suite, run_suite

    suite, result = load_suite("checks/gateway.yaml")
    if not result.is_valid:
        print(result)

    run = run_suite(suite)
    print(run.passed)
"""

# Public API
from .loader import load_suite, validate_suite_yaml
from .runner import CheckOutcome, SuiteRun, run_suite

# Models
from .models import CheckSuite, CountCheck

# Validation
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "validate_suite_yaml",
    # Runner
    "run_suite",
    "SuiteRun",
    "CheckOutcome",
    # Models
    "CheckSuite",
    "CountCheck",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
