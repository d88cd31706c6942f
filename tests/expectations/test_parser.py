"""Tests for expectation phrase parsing."""

import pytest

from happened.errors import InvalidArgumentError
from happened.expectations import (
    ComparativeExpectation,
    ComparisonKind,
    NeverExpectation,
    comparison_of,
    never,
    parse_expectation,
    parse_mapping,
    parse_phrase,
)


@pytest.mark.parametrize(
    "expectation",
    [
        never(),
        comparison_of(ComparisonKind.EXACTLY).once(),
        comparison_of(ComparisonKind.AT_LEAST).twice(),
        comparison_of(ComparisonKind.NO_MORE_THAN).times(3),
        comparison_of(ComparisonKind.EXACTLY).times(0),
    ],
    ids=str,
)
def test_parses_own_descriptions(expectation: ComparativeExpectation) -> None:
    assert parse_phrase(expectation.describe()) == expectation


class TestParsePhrase:
    def test_case_and_whitespace_tolerant(self) -> None:
        assert parse_phrase("  At   LEAST\t3 Times ") == ComparativeExpectation(
            ComparisonKind.AT_LEAST, 3
        )

    def test_singular_time(self) -> None:
        assert parse_phrase("exactly 1 time").describe() == "exactly once"

    def test_never(self) -> None:
        assert isinstance(parse_phrase("Never"), NeverExpectation)

    @pytest.mark.parametrize(
        "text",
        ["", "sometimes", "at least", "more than once", "exactly -1 times", "at least thrice"],
    )
    def test_unrecognised(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_phrase(text)
        assert exc_info.value.argument_name == "expectation"

    def test_non_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_phrase(2)  # type: ignore[arg-type]


class TestParseMapping:
    def test_kind_and_times(self) -> None:
        assert parse_mapping({"kind": "no_more_than", "times": 2}) == ComparativeExpectation(
            ComparisonKind.NO_MORE_THAN, 2
        )

    def test_never_kind(self) -> None:
        assert parse_mapping({"kind": "never"}) == never()

    def test_missing_times(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_mapping({"kind": "exactly"})
        assert exc_info.value.argument_name == "times"

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_mapping({"kind": "roughly", "times": 2})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="tims") as exc_info:
            parse_mapping({"kind": "exactly", "times": 2, "tims": 3})
        assert exc_info.value.argument_name == "expectation"

    def test_negative_times(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_mapping({"kind": "at_least", "times": -2})


def test_parse_expectation_accepts_phrase_or_mapping() -> None:
    assert parse_expectation("at least once") == parse_expectation(
        {"kind": "at_least", "times": 1}
    )
