"""Calculator Example - A Recursive Grammar with Precedence.

Demonstrates building a complete grammar from backparse combinators:

1. Left-associative operators with chainl1
2. Precedence levels by layering chainl1
3. Parenthesized sub-expressions via forward_decl
4. Whole-input parsing with parse_full
5. Ambiguity: mplus keeps every derivation, option commits to the first
6. Grammar errors: a repeated parser that consumes nothing

Grammar:
    expr   = term   (("+" | "-") term)*
    term   = factor (("*" | "/") factor)*
    factor = number | "(" expr ")"

Python 3.13+.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from backparse import (
    InfiniteRepetitionError,
    ParseFailedError,
    Parser,
    chainl1,
    fmap,
    forward_decl,
    many,
    mplus,
    number_double,
    option,
    parse,
    parse_full,
    skip,
    spaces,
    string,
    symb,
    then,
    token,
)


def _binary(
    symbol: str, func: Callable[[float, float], float]
) -> Parser[Callable[[float, float], float]]:
    return fmap(symb(symbol), lambda _: func)


def build_calculator() -> Parser[float]:
    """Build the expression grammar shown in the module docstring."""
    expr = forward_decl("expr")

    add_op = _binary("+", operator.add) | _binary("-", operator.sub)
    mul_op = _binary("*", operator.mul) | _binary("/", operator.truediv)

    group = then(symb("("), skip(expr, symb(")")))
    factor = token(number_double) | group
    term = chainl1(factor, mul_op)
    expr.define(chainl1(term, add_op))

    return then(spaces, expr)


def example_1_evaluate() -> None:
    """Evaluate a handful of expressions."""
    print("=" * 60)
    print("Example 1: Evaluation")
    print("=" * 60)

    calculator = build_calculator()
    for source in ["1 + 2 * 3", "(1 + 2) * 3", "10 - 4 - 3", "  2.5 * (4 - 1.5) "]:
        print(f"{source!r:24} = {parse_full(calculator, source)}")
    print()


def example_2_partial_input() -> None:
    """parse() reports leftovers; parse_full() rejects them."""
    print("=" * 60)
    print("Example 2: Partial Input")
    print("=" * 60)

    calculator = build_calculator()
    print(f"parse('1 + 2 )')  -> {parse(calculator, '1 + 2 )')}")

    try:
        parse_full(calculator, "1 + 2 )")
    except ParseFailedError as e:
        print(f"parse_full failed, remainder {e.remainder!r}:")
        print(e)
    print()


def example_3_ambiguity() -> None:
    """mplus enumerates every derivation; option keeps the first."""
    print("=" * 60)
    print("Example 3: Ambiguity")
    print("=" * 60)

    short_or_long = mplus(string("a"), string("ab"))
    print(f"mplus:  {parse(short_or_long, 'abc')}")
    print(f"option: {parse(option(string('a'), string('ab')), 'abc')}")
    print(f"option (longest first): {parse(option(string('ab'), string('a')), 'abc')}")
    print()


def example_4_grammar_error() -> None:
    """Repeating a parser that can match nothing is a grammar bug."""
    print("=" * 60)
    print("Example 4: Grammar Errors")
    print("=" * 60)

    try:
        parse(many(spaces), "x")
    except InfiniteRepetitionError as e:
        print(e)
    print()


def main() -> None:
    """Run all calculator examples."""
    print()
    print("backparse Calculator Examples")
    print()

    example_1_evaluate()
    example_2_partial_input()
    example_3_ambiguity()
    example_4_grammar_error()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
