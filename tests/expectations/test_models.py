"""Tests for expectation values and comparison semantics."""

import dataclasses

import pytest

from happened.errors import InvalidArgumentError
from happened.expectations import (
    ComparativeExpectation,
    ComparisonKind,
    NeverExpectation,
    PredicateExpectation,
    magnitude_word,
)

COUNTS = range(0, 8)


class TestComparisonKind:
    def test_members_and_values(self) -> None:
        assert {k.value for k in ComparisonKind} == {"exactly", "at_least", "no_more_than"}
        for kind in ComparisonKind:
            assert kind == kind.value

    @pytest.mark.parametrize(
        "kind,word",
        [
            (ComparisonKind.EXACTLY, "exactly"),
            (ComparisonKind.AT_LEAST, "at least"),
            (ComparisonKind.NO_MORE_THAN, "no more than"),
        ],
    )
    def test_words(self, kind: ComparisonKind, word: str) -> None:
        assert kind.word == word

    @pytest.mark.parametrize("kind", list(ComparisonKind))
    def test_every_kind_has_relation_and_word(self, kind: ComparisonKind) -> None:
        assert callable(kind.relation)
        assert isinstance(kind.word, str) and kind.word

    def test_relations_take_actual_then_expected(self) -> None:
        assert ComparisonKind.AT_LEAST.relation(3, 2) is True
        assert ComparisonKind.AT_LEAST.relation(2, 3) is False
        assert ComparisonKind.NO_MORE_THAN.relation(2, 3) is True
        assert ComparisonKind.NO_MORE_THAN.relation(3, 2) is False
        assert ComparisonKind.EXACTLY.relation(2, 2) is True


class TestComparativeExpectation:
    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_exactly(self, n: int) -> None:
        expectation = ComparativeExpectation(ComparisonKind.EXACTLY, n)
        for a in COUNTS:
            assert expectation.matches(a) == (a == n)

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_at_least(self, n: int) -> None:
        expectation = ComparativeExpectation(ComparisonKind.AT_LEAST, n)
        for a in COUNTS:
            assert expectation.matches(a) == (a >= n)

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_no_more_than(self, n: int) -> None:
        expectation = ComparativeExpectation(ComparisonKind.NO_MORE_THAN, n)
        for a in COUNTS:
            assert expectation.matches(a) == (a <= n)

    def test_zero_magnitudes(self) -> None:
        assert ComparativeExpectation(ComparisonKind.AT_LEAST, 0).matches(0)
        assert ComparativeExpectation(ComparisonKind.NO_MORE_THAN, 0).matches(0)
        assert not ComparativeExpectation(ComparisonKind.NO_MORE_THAN, 0).matches(1)

    @pytest.mark.parametrize(
        "kind,magnitude,description",
        [
            (ComparisonKind.EXACTLY, 1, "exactly once"),
            (ComparisonKind.AT_LEAST, 2, "at least twice"),
            (ComparisonKind.NO_MORE_THAN, 3, "no more than 3 times"),
            (ComparisonKind.NO_MORE_THAN, 0, "no more than 0 times"),
            (ComparisonKind.EXACTLY, 10, "exactly 10 times"),
        ],
    )
    def test_describe(self, kind: ComparisonKind, magnitude: int, description: str) -> None:
        expectation = ComparativeExpectation(kind, magnitude)
        assert expectation.describe() == description
        assert str(expectation) == description

    @pytest.mark.parametrize("magnitude", [-1, -100])
    def test_negative_magnitude_rejected(self, magnitude: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            ComparativeExpectation(ComparisonKind.AT_LEAST, magnitude)
        assert exc_info.value.argument_name == "magnitude"

    @pytest.mark.parametrize("magnitude", [1.5, "2", True, None])
    def test_non_integer_magnitude_rejected(self, magnitude: object) -> None:
        with pytest.raises(InvalidArgumentError):
            ComparativeExpectation(ComparisonKind.EXACTLY, magnitude)  # type: ignore[arg-type]

    def test_kind_must_be_enum_member(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ComparativeExpectation("sometimes", 1)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        expectation = ComparativeExpectation(ComparisonKind.EXACTLY, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            expectation.magnitude = 2  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert ComparativeExpectation(ComparisonKind.EXACTLY, 2) == ComparativeExpectation(
            ComparisonKind.EXACTLY, 2
        )


class TestNeverExpectation:
    def test_matches_only_zero(self) -> None:
        expectation = NeverExpectation()
        assert expectation.matches(0) is True
        for a in range(1, 8):
            assert expectation.matches(a) is False

    def test_describe(self) -> None:
        assert NeverExpectation().describe() == "never"
        assert str(NeverExpectation()) == "never"

    def test_is_exactly_zero(self) -> None:
        expectation = NeverExpectation()
        assert isinstance(expectation, ComparativeExpectation)
        assert expectation.kind is ComparisonKind.EXACTLY
        assert expectation.magnitude == 0

    def test_not_equal_to_generic_exactly_zero(self) -> None:
        assert NeverExpectation() != ComparativeExpectation(ComparisonKind.EXACTLY, 0)
        assert NeverExpectation() == NeverExpectation()


class TestPredicateExpectation:
    def test_matches_delegates_to_predicate(self) -> None:
        expectation = PredicateExpectation(lambda n: n % 2 == 0, "an even number of times")
        for a in COUNTS:
            assert expectation.matches(a) == (a % 2 == 0)

    def test_describe_is_verbatim(self) -> None:
        expectation = PredicateExpectation(lambda n: True, "  any number of times ")
        assert expectation.describe() == "  any number of times "

    def test_truthy_result_coerced(self) -> None:
        expectation = PredicateExpectation(lambda n: n, "a non-zero number of times")
        assert expectation.matches(3) is True
        assert expectation.matches(0) is False

    def test_evaluated_on_every_call(self) -> None:
        seen = []

        def predicate(n: int) -> bool:
            seen.append(n)
            return n > 1

        expectation = PredicateExpectation(predicate, "more than once")
        assert expectation.matches(2) is True
        assert expectation.matches(2) is True
        assert expectation.matches(1) is False
        assert seen == [2, 2, 1]

    def test_predicate_errors_propagate(self) -> None:
        def predicate(n: int) -> bool:
            raise RuntimeError("boom")

        expectation = PredicateExpectation(predicate, "exploding")
        with pytest.raises(RuntimeError, match="boom"):
            expectation.matches(1)


class TestIdempotence:
    @pytest.mark.parametrize(
        "expectation",
        [
            ComparativeExpectation(ComparisonKind.AT_LEAST, 1),
            NeverExpectation(),
            PredicateExpectation(lambda n: n == 3, "three times"),
        ],
        ids=["comparative", "never", "predicate"],
    )
    def test_repeated_calls_agree(self, expectation) -> None:
        for a in COUNTS:
            assert expectation.matches(a) == expectation.matches(a)
        assert expectation.describe() == expectation.describe()


@pytest.mark.parametrize(
    "magnitude,word",
    [(0, "0 times"), (1, "once"), (2, "twice"), (3, "3 times"), (42, "42 times")],
)
def test_magnitude_word(magnitude: int, word: str) -> None:
    assert magnitude_word(magnitude) == word
