"""Tests for syntax.parser.combinators: repetition, separators, chaining, lookahead."""

from __future__ import annotations

import operator

import pytest

from backparse.diagnostics import DiagnosticCode, InfiniteRepetitionError
from backparse.syntax.parser.combinators import (
    chainl,
    chainl1,
    look_ahead,
    many,
    many1,
    many_n,
    many_till,
    many_till1,
    sep_by,
    sep_by1,
)
from backparse.syntax.parser.core import char, fmap, item, mplus, parse, pure, string
from backparse.syntax.parser.primitives import any_char, digit, letter, number_int
from backparse.syntax.parser.whitespace import spaces, symb

PLUS = fmap(symb("+"), lambda _: operator.add)
MINUS = fmap(symb("-"), lambda _: operator.sub)


# ============================================================================
# MANY / MANY1
# ============================================================================


class TestMany:
    """Test zero-or-more repetition."""

    def test_repeats_greedily(self) -> None:
        """many consumes as many matches as possible."""
        assert parse(many(digit), "123a") == [(["1", "2", "3"], "a")]

    def test_zero_matches(self) -> None:
        """many succeeds with an empty list when nothing matches."""
        assert parse(many(digit), "abc") == [([], "abc")]
        assert parse(many(digit), "") == [([], "")]

    def test_single_result_for_ambiguous_parser(self) -> None:
        """Each step keeps only the first derivation."""
        p = many(mplus(string("a"), string("aa")))

        assert parse(p, "aaa") == [(["a", "a", "a"], "")]

    def test_long_input(self) -> None:
        """Repetition does not grow the stack with input length."""
        [(values, rest)] = parse(many(item), "a" * 20_000)

        assert len(values) == 20_000
        assert rest == ""

    def test_nullable_parser_raises(self) -> None:
        """A repeated parser that consumes nothing is a grammar error."""
        with pytest.raises(InfiniteRepetitionError) as exc_info:
            parse(many(spaces), "x")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INFINITE_REPETITION
        assert "spaces" in str(exc_info.value)

    def test_nullable_parser_raises_mid_input(self) -> None:
        """The check fires at whichever position the parser stops consuming."""
        with pytest.raises(InfiniteRepetitionError):
            parse(many(mplus(digit, pure("0"))), "12")


class TestMany1:
    """Test one-or-more repetition."""

    def test_repeats(self) -> None:
        """many1 collects every match."""
        assert parse(many1(digit), "12x") == [(["1", "2"], "x")]

    def test_requires_one(self) -> None:
        """many1 fails without a first match."""
        assert parse(many1(digit), "x") == []
        assert parse(many1(digit), "") == []

    def test_enumerates_first_step(self) -> None:
        """Every derivation of the first match is tried, each followed by many."""
        p = many1(mplus(string("a"), string("aa")))

        assert parse(p, "aa") == [(["a", "a"], ""), (["aa"], "")]

    def test_nullable_parser_raises(self) -> None:
        """many1 inherits the nullable check from many."""
        with pytest.raises(InfiniteRepetitionError):
            parse(many1(string("")), "abc")


# ============================================================================
# SEPARATORS
# ============================================================================


class TestSepBy:
    """Test separated lists."""

    def test_separated_ints(self) -> None:
        """Separator values are discarded."""
        assert parse(sep_by(number_int, char(",")), "1,2,3") == [([1, 2, 3], "")]

    def test_empty_input(self) -> None:
        """sep_by succeeds with [] on empty input."""
        assert parse(sep_by(number_int, char(",")), "") == [([], "")]

    def test_trailing_separator_left_over(self) -> None:
        """A separator without a following item is not consumed."""
        assert parse(sep_by(number_int, char(",")), "1,2,") == [([1, 2], ",")]

    def test_fresh_list_each_run(self) -> None:
        """Mutating a result does not leak into later parses."""
        p = sep_by(digit, char(","))
        [(first, _)] = parse(p, "")
        first.append("9")

        assert parse(p, "") == [([], "")]

    def test_sep_by1_requires_one(self) -> None:
        """sep_by1 fails on empty input."""
        assert parse(sep_by1(number_int, char(",")), "") == []

    def test_sep_by1_with_tokens(self) -> None:
        """Token separators absorb surrounding whitespace."""
        assert parse(sep_by1(letter, symb(";")), "a ; b") == [(["a", "b"], "")]


# ============================================================================
# CHAINING
# ============================================================================


class TestChainl:
    """Test left-associative operator chains."""

    def test_sum(self) -> None:
        """1+2+3 folds to 6."""
        assert parse(chainl1(number_int, PLUS), "1+2+3") == [(6, "")]

    def test_left_associative(self) -> None:
        """10-2-3 is (10-2)-3, not 10-(2-3)."""
        assert parse(chainl1(number_int, MINUS), "10-2-3") == [(5, "")]

    def test_fold_structure(self) -> None:
        """The fold nests to the left."""
        show = fmap(symb("+"), lambda _: lambda a, b: f"({a}+{b})")

        assert parse(chainl1(digit, show), "1+2+3") == [("((1+2)+3)", "")]

    def test_single_operand(self) -> None:
        """A lone operand is returned as is."""
        assert parse(chainl1(number_int, PLUS), "7") == [(7, "")]

    def test_dangling_operator_left_over(self) -> None:
        """An operator without a right operand is not consumed."""
        assert parse(chainl1(number_int, PLUS), "1+2+") == [(3, "+")]

    def test_requires_operand(self) -> None:
        """chainl1 fails without an initial operand."""
        assert parse(chainl1(number_int, PLUS), "") == []

    def test_chainl_default(self) -> None:
        """chainl yields the default without consuming when no operand matches."""
        assert parse(chainl(number_int, PLUS, 0), "x") == [(0, "x")]

    def test_chainl_delegates(self) -> None:
        """chainl behaves like chainl1 when an operand matches."""
        assert parse(chainl(number_int, PLUS, 0), "2+2") == [(4, "")]

    def test_nullable_step_raises(self) -> None:
        """An operator and operand that both consume nothing is a grammar error."""
        nothing = fmap(string(""), lambda _: operator.add)

        with pytest.raises(InfiniteRepetitionError):
            parse(chainl1(pure(1), nothing), "x")


# ============================================================================
# COUNTED AND BOUNDED REPETITION
# ============================================================================


class TestManyN:
    """Test exact repetition counts."""

    def test_exact_count(self) -> None:
        """many_n stops after n matches."""
        assert parse(many_n(digit, 3), "12345") == [(["1", "2", "3"], "45")]

    def test_too_few(self) -> None:
        """many_n fails with fewer than n matches."""
        assert parse(many_n(digit, 3), "12") == []

    def test_one(self) -> None:
        """many_n with n=1 wraps a single match."""
        assert parse(many_n(digit, 1), "9") == [(["9"], "")]

    def test_long_input(self) -> None:
        """Counted repetition does not grow the stack with n."""
        [(values, rest)] = parse(many_n(item, 5_000), "a" * 5_000)

        assert len(values) == 5_000
        assert rest == ""

    def test_enumerates_every_combination(self) -> None:
        """Ambiguous steps yield every combination, earlier steps varying slowest."""
        p = many_n(mplus(string("a"), string("aa")), 2)

        assert parse(p, "aaa") == [
            (["a", "a"], "a"),
            (["a", "aa"], ""),
            (["aa", "a"], ""),
        ]

    def test_results_do_not_share_lists(self) -> None:
        """Each derivation gets its own list."""
        p = many_n(mplus(string("a"), string("aa")), 2)
        [(first, _), (second, _), _] = parse(p, "aaa")
        first.append("x")

        assert second == ["a", "aa"]

    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_count(self, count: int) -> None:
        """n < 1 is rejected at construction time."""
        with pytest.raises(ValueError, match="must be >= 1"):
            many_n(digit, count)


class TestManyTill:
    """Test repetition bounded by a lookahead terminator."""

    def test_stops_before_end(self) -> None:
        """The terminator is left in the remainder."""
        assert parse(many_till(any_char, string("END")), "abcEND") == [
            (["a", "b", "c"], "END"),
        ]

    def test_missing_end_consumes_everything(self) -> None:
        """Without a terminator, repetition runs until p fails."""
        assert parse(many_till(any_char, string("END")), "abc") == [(["a", "b", "c"], "")]

    def test_empty_input(self) -> None:
        """many_till succeeds with [] when p does not match."""
        assert parse(many_till(any_char, string("END")), "") == [([], "")]

    def test_end_probed_after_each_match(self) -> None:
        """The terminator is only checked after a p match, never before the first."""
        assert parse(many_till(any_char, string("END")), "END") == [(["E", "N", "D"], "")]

    def test_many_till1_requires_one(self) -> None:
        """many_till1 fails if p does not match at all."""
        assert parse(many_till1(digit, char(";")), ";") == []

    def test_many_till1(self) -> None:
        """many_till1 collects matches up to the terminator."""
        assert parse(many_till1(digit, char(";")), "12;") == [(["1", "2"], ";")]
        assert parse(many_till1(letter, digit), "ab1") == [(["a", "b"], "1")]

    def test_nullable_parser_with_end_terminates(self) -> None:
        """A non-consuming p is fine when the terminator follows it."""
        assert parse(many_till(pure("x"), char("a")), "a") == [(["x"], "a")]

    def test_nullable_parser_without_end_raises(self) -> None:
        """A non-consuming p with no terminator ahead is a grammar error."""
        with pytest.raises(InfiniteRepetitionError):
            parse(many_till(pure("x"), char("z")), "a")


class TestLookAhead:
    """Test the zero-width probe."""

    def test_true_without_consuming(self) -> None:
        """look_ahead reports success and keeps the input."""
        assert parse(look_ahead(string("ab")), "abc") == [(True, "abc")]

    def test_false_without_failing(self) -> None:
        """look_ahead itself never fails."""
        assert parse(look_ahead(string("x")), "abc") == [(False, "abc")]

    def test_empty_input(self) -> None:
        """look_ahead succeeds on empty input."""
        assert parse(look_ahead(item), "") == [(False, "")]
