"""Repetition, separator, chaining and lookahead combinators.

Repetition is written as a loop with an accumulator rather than as the
textbook mutual recursion (``many p = many1 p <|> pure []``). The results
are identical, since committed choice keeps only the first derivation of
each step, but long inputs no longer grow the Python stack.

A repeated parser that succeeds without consuming input would repeat
forever. The loops detect that state and raise InfiniteRepetitionError.
"""

from collections.abc import Callable, Iterator
from typing import Any

from backparse.diagnostics import ErrorTemplate, InfiniteRepetitionError
from backparse.syntax.cursor import Cursor, ParseResult
from backparse.syntax.parser.core import Parser, bind, fmap, option, pure, then

__all__ = [
    "chainl",
    "chainl1",
    "look_ahead",
    "many",
    "many1",
    "many_n",
    "many_till",
    "many_till1",
    "sep_by",
    "sep_by1",
]


def _nil() -> Parser[list[Any]]:
    # Fresh list per run; pure([]) would share one list across results.
    def run(cursor: Cursor) -> Iterator[ParseResult[list[Any]]]:
        yield ParseResult([], cursor)

    return Parser(run, "nil")


def _cons[T](parser: Parser[T], rest: Parser[list[T]]) -> Parser[list[T]]:
    return bind(parser, lambda head: fmap(rest, lambda tail: [head, *tail]))


def _stalled(before: Cursor, after: Cursor) -> bool:
    return after.pos == before.pos


def _repeat[T](
    parser: Parser[T], cursor: Cursor, combinator: str
) -> tuple[list[T], Cursor]:
    """Apply parser greedily, keeping its first derivation at each step."""
    values: list[T] = []
    while (result := parser.first(cursor)) is not None:
        if _stalled(cursor, result.cursor):
            raise InfiniteRepetitionError(
                ErrorTemplate.infinite_repetition(parser.name, combinator)
            )
        values.append(result.value)
        cursor = result.cursor
    return values, cursor


def _repeat_till[T](
    parser: Parser[T], end: Parser[Any], cursor: Cursor, combinator: str
) -> tuple[list[T], Cursor]:
    """Like _repeat, but stop as soon as ``end`` would match after a step."""
    values: list[T] = []
    while (result := parser.first(cursor)) is not None:
        values.append(result.value)
        if end.first(result.cursor) is not None:
            return values, result.cursor
        if _stalled(cursor, result.cursor):
            raise InfiniteRepetitionError(
                ErrorTemplate.infinite_repetition(parser.name, combinator)
            )
        cursor = result.cursor
    return values, cursor


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more repetitions; always succeeds with exactly one result.

    Same result as ``option(many1(parser), pure([]))``.

    Raises:
        InfiniteRepetitionError: At parse time, if ``parser`` succeeds
            without consuming input
    """
    name = f"many({parser.name})"

    def run(cursor: Cursor) -> Iterator[ParseResult[list[T]]]:
        values, end = _repeat(parser, cursor, "many")
        yield ParseResult(values, end)

    return Parser(run, name)


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more repetitions.

    Every derivation of the first ``parser`` is tried, each followed by
    :func:`many`. Fails if ``parser`` does not match at least once.
    """
    return _cons(parser, many(parser)).named(f"many1({parser.name})")


def sep_by1[T](parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    """One or more ``parser`` separated by ``sep``; separator values are dropped."""
    return _cons(parser, many(then(sep, parser))).named(f"sep_by1({parser.name})")


def sep_by[T](parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``parser`` separated by ``sep``.

    Example:
        >>> from backparse.syntax.parser.core import char
        >>> from backparse.syntax.parser.primitives import number_int
        >>> sep_by(number_int, char(",")).parse("1,2,3")
        [([1, 2, 3], '')]
    """
    return option(sep_by1(parser, sep), _nil()).named(f"sep_by({parser.name})")


def chainl1[T](
    parser: Parser[T], op: Parser[Callable[[T, T], T]]
) -> Parser[T]:
    """Left-associative chain of ``parser`` joined by ``op``.

    Parses one ``parser``, then repeatedly an ``op`` followed by another
    ``parser``, folding from the left: ``1-2-3`` is ``(1-2)-3``. Stops at
    the first position where ``op`` then ``parser`` does not match, leaving
    that input unconsumed.

    Args:
        parser: Operand parser
        op: Parser yielding the two-argument function to combine operands

    Returns:
        Parser yielding the folded value
    """
    step = bind(op, lambda f: fmap(parser, lambda right: (f, right)))
    name = f"chainl1({parser.name})"

    def fold(left: T) -> Parser[T]:
        def run(cursor: Cursor) -> Iterator[ParseResult[T]]:
            acc = left
            while (result := step.first(cursor)) is not None:
                if _stalled(cursor, result.cursor):
                    raise InfiniteRepetitionError(
                        ErrorTemplate.infinite_repetition(name, "chainl1")
                    )
                f, right = result.value
                acc = f(acc, right)
                cursor = result.cursor
            yield ParseResult(acc, cursor)

        return Parser(run, name)

    return bind(parser, fold).named(name)


def chainl[T](
    parser: Parser[T], op: Parser[Callable[[T, T], T]], default: T
) -> Parser[T]:
    """Like :func:`chainl1`, but yields ``default`` if no operand matches."""
    return option(chainl1(parser, op), pure(default)).named(f"chainl({parser.name})")


def many_n[T](parser: Parser[T], n: int) -> Parser[list[T]]:
    """Exactly ``n`` repetitions of ``parser``.

    Every combination of ``parser`` derivations is produced, in the same
    order as ``n`` nested :func:`bind` calls, without nesting generators.

    Raises:
        ValueError: If n < 1
    """
    if n < 1:
        msg = f"many_n() count must be >= 1, got {n}"
        raise ValueError(msg)

    def run(cursor: Cursor) -> Iterator[ParseResult[list[T]]]:
        # Depth-first over derivations; stack[d] yields candidates for values[d].
        values: list[T] = []
        stack = [parser.run(cursor)]
        while stack:
            result = next(stack[-1], None)
            if result is None:
                stack.pop()
                continue
            del values[len(stack) - 1 :]
            values.append(result.value)
            if len(stack) == n:
                yield ParseResult(list(values), result.cursor)
            else:
                stack.append(parser.run(result.cursor))

    return Parser(run, f"many_n({parser.name}, {n})")


def many_till1[T](parser: Parser[T], end: Parser[Any]) -> Parser[list[T]]:
    """One or more ``parser`` until ``end`` would match; ``end`` is not consumed.

    ``end`` is probed only after each ``parser`` match, so at least one
    ``parser`` is always consumed.
    """
    name = f"many_till1({parser.name})"

    def run(cursor: Cursor) -> Iterator[ParseResult[list[T]]]:
        for result in parser.run(cursor):
            if end.first(result.cursor) is not None:
                yield ParseResult([result.value], result.cursor)
                continue
            values, stop = _repeat_till(parser, end, result.cursor, "many_till1")
            yield ParseResult([result.value, *values], stop)

    return Parser(run, name)


def many_till[T](parser: Parser[T], end: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``parser`` until ``end`` would match; always succeeds.

    Same result as ``option(many_till1(parser, end), pure([]))``.

    Example:
        >>> from backparse.syntax.parser.core import string
        >>> from backparse.syntax.parser.primitives import any_char
        >>> many_till(any_char, string("END")).parse("abcEND")
        [(['a', 'b', 'c'], 'END')]
    """
    name = f"many_till({parser.name})"

    def run(cursor: Cursor) -> Iterator[ParseResult[list[T]]]:
        values, stop = _repeat_till(parser, end, cursor, "many_till")
        yield ParseResult(values, stop)

    return Parser(run, name)


def look_ahead(parser: Parser[Any]) -> Parser[bool]:
    """Zero-width probe: True if ``parser`` would match here, else False.

    Always succeeds and never consumes input, whatever ``parser`` does.
    """

    def run(cursor: Cursor) -> Iterator[ParseResult[bool]]:
        yield ParseResult(parser.first(cursor) is not None, cursor)

    return Parser(run, f"look_ahead({parser.name})")
