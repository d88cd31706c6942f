"""
Repeat expectations for call-count assertions

This package provides the expectation values that judge an observed
call count, and the builder grammar that produces them.

Usage:
    from happened.expectations import ComparisonKind, comparison_of, never

    expectation = comparison_of(ComparisonKind.AT_LEAST).twice()
    expectation.matches(3)      # True
    expectation.describe()      # "at least twice"

    never().describe()          # "never"
"""

# Models
from .models import (
    ComparativeExpectation,
    ComparisonKind,
    Expectation,
    NeverExpectation,
    PredicateExpectation,
    magnitude_word,
)

# Builder
from .builder import (
    MagnitudeStep,
    at_least,
    comparison_of,
    exactly,
    from_predicate,
    never,
    no_more_than,
)

# Phrase parsing
from .parser import parse_expectation, parse_mapping, parse_phrase

__all__ = [
    # Models
    "ComparisonKind",
    "Expectation",
    "ComparativeExpectation",
    "NeverExpectation",
    "PredicateExpectation",
    "magnitude_word",
    # Builder
    "MagnitudeStep",
    "comparison_of",
    "exactly",
    "at_least",
    "no_more_than",
    "never",
    "from_predicate",
    # Phrase parsing
    "parse_expectation",
    "parse_phrase",
    "parse_mapping",
]
