"""
Parser for expectation phrases.

Converts the text produced by Expectation.describe() ("never",
"at least twice", "no more than 3 times") and mapping forms such as
{"kind": "at_least", "times": 2} back into expectations. Used by
check files and the CLI.
"""

from __future__ import annotations

import re
from typing import Any

from ..errors import InvalidArgumentError
from .builder import comparison_of, never
from .models import ComparativeExpectation, ComparisonKind

PHRASE_PATTERN = re.compile(
    r"^(?P<kind>exactly|at\s+least|no\s+more\s+than)\s+"
    r"(?P<magnitude>once|twice|(?P<n>\d+)\s+times?)$"
)

MAPPING_KEYS = {"kind", "times"}

_KINDS_BY_WORD ={kind.word: kind for kind in ComparisonKind}

PHRASE_SUGGESTION = (
    "Use 'never' or '<exactly|at least|no more than> <once|twice|N times>'"
)


def parse_phrase(text: str) -> ComparativeExpectation:
    """
    Parse an expectation phrase.

    Args:
        text: e.g. "exactly once", "At Least 3 times", "never"

    Returns:
        The expectation the phrase describes

    Raises:
        InvalidArgumentError: If the phrase is not recognised
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "expectation",
            f"Must be a string, got {type(text).__name__}",
        )

    normalized = " ".join(text.lower().split())
    if normalized == "never":
        return never()

    match = PHRASE_PATTERN.match(normalized)
    if match is None:
        raise InvalidArgumentError(
            "expectation",
            f"Unrecognised expectation {text!r}. {PHRASE_SUGGESTION}",
        )

    step = comparison_of(_KINDS_BY_WORD[" ".join(match.group("kind").split())])
    magnitude = match.group("magnitude")
    if magnitude == "once":
        return step.once()
    if magnitude == "twice":
        return step.twice()
    return step.times(int(match.group("n")))


def parse_mapping(data: dict[str, Any]) -> ComparativeExpectation:
    """
    Parse a mapping of the form {"kind": <ComparisonKind value>, "times": N}.

    A mapping of {"kind": "never"} is accepted as the never expectation.
    Keys other than "kind" and "times" are rejected.
    """
    unknown = set(data) - MAPPING_KEYS
    if unknown:
        raise InvalidArgumentError(
            "expectation",
            f"Unknown key(s) {', '.join(sorted(map(str, unknown)))} "
            f"(valid keys: {', '.join(sorted(MAPPING_KEYS))})",
        )

    kind = data.get("kind")
    if kind == "never":
        return never()
    if "times" not in data:
        raise InvalidArgumentError("times", "Required when kind is not 'never'")
    return comparison_of(kind).times(data["times"])


def parse_expectation(value: Any) -> ComparativeExpectation:
    """Parse either a phrase string or a mapping."""
    if isinstance(value, dict):
        return parse_mapping(value)
    return parse_phrase(value)
