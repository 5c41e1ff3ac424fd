"""Core parser type, monadic combinators, alternation and entry points.

Architecture:
    A :class:`Parser` wraps a run function ``Cursor -> Iterator[ParseResult[T]]``.
    The iterator lists every way the parser can succeed at that position,
    in the order the alternatives were tried. An empty iterator is failure;
    no exception is involved.

    Results are produced lazily (generators), so committed choice
    (:func:`option`) stops after the first success and never runs the
    alternatives it does not need.

Layers:
    - Monad: :data:`item`, :func:`pure`, :func:`bind`, :func:`fmap`,
      :func:`then`, :func:`skip`, :func:`sequence`
    - Alternation: :data:`mzero`, :func:`mplus`, :func:`option`,
      :func:`satisfies`, :func:`char`, :func:`string`
    - Recursion: :func:`forward_decl`
    - Entry points: :func:`parse`, :func:`iterparse`, :func:`parse_full`

See Also:
    - :mod:`backparse.syntax.parser.combinators` - Repetition and lookahead
    - :mod:`backparse.syntax.parser.primitives` - Lexical parsers
    - :mod:`backparse.syntax.parser.whitespace` - Whitespace and tokens
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from backparse.constants import MAX_SOURCE_SIZE
from backparse.diagnostics import (
    ErrorTemplate,
    ParseFailedError,
    RecursionDepthError,
    UndefinedParserError,
)
from backparse.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ForwardParser",
    "Parser",
    "bind",
    "char",
    "fmap",
    "forward_decl",
    "item",
    "iterparse",
    "mplus",
    "mzero",
    "option",
    "parse",
    "parse_full",
    "pure",
    "satisfies",
    "sequence",
    "skip",
    "string",
    "then",
]

logger = logging.getLogger(__name__)

type RunFunction[T] = Callable[[Cursor], Iterable[ParseResult[T]]]


class Parser[T]:
    """Composable, re-invocable parser.

    Design:
    - Holds only its run function and a display name (no mutable state)
    - Running twice on the same cursor yields identical results
    - Composition builds new Parser values; existing ones never change

    Prefer the module-level combinators to build parsers; the methods
    below are shorthands for them.

    Example:
        >>> p = char("a") | char("b")
        >>> p.parse("bc")
        [('b', 'c')]
    """

    __slots__ = ("_run", "name")

    def __init__(self, run: RunFunction[T], name: str = "parser") -> None:
        """Wrap a run function.

        Args:
            run: Function from cursor to an iterable of results
            name: Display name used in repr() and diagnostics
        """
        self._run = run
        self.name = name

    def run(self, cursor: Cursor) -> Iterator[ParseResult[T]]:
        """Return an iterator over every derivation at ``cursor``."""
        return iter(self._run(cursor))

    def first(self, cursor: Cursor) -> ParseResult[T] | None:
        """Return the first derivation at ``cursor``, or None on failure."""
        return next(self.run(cursor), None)

    def named(self, name: str) -> "Parser[T]":
        """Return the same parser under a new display name."""
        return Parser(self._run, name)

    def parse(
        self, source: str, *, max_source_size: int | None = None
    ) -> list[tuple[T, str]]:
        """Method form of :func:`parse`."""
        return parse(self, source, max_source_size=max_source_size)

    def bind[U](self, f: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Method form of :func:`bind`."""
        return bind(self, f)

    def map[U](self, f: Callable[[T], U]) -> "Parser[U]":
        """Method form of :func:`fmap`."""
        return fmap(self, f)

    def then[U](self, other: "Parser[U]") -> "Parser[U]":
        """Method form of :func:`then`."""
        return then(self, other)

    def skip(self, other: "Parser[Any]") -> "Parser[T]":
        """Method form of :func:`skip`."""
        return skip(self, other)

    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        """``p | q`` is :func:`option`."""
        return option(self, other)

    def __repr__(self) -> str:
        return f"Parser({self.name!r})"


class ForwardParser[T](Parser[T]):
    """Placeholder for a parser defined after it is referenced.

    Python evaluates combinator arguments eagerly, so a rule that refers
    to itself needs an indirection:

        >>> expr = forward_decl("expr")
        >>> group = then(char("("), skip(expr, char(")")))
        >>> expr.define(group | string("x"))
        >>> expr.parse("((x))")
        [('x', '')]
    """

    __slots__ = ("_definition",)

    def __init__(self, name: str = "forward") -> None:
        super().__init__(self._run_definition, name)
        self._definition: Parser[T] | None = None

    def define(self, parser: Parser[T]) -> None:
        """Bind this declaration to the real parser."""
        self._definition = parser
        logger.debug("Defined forward parser %s as %s", self.name, parser.name)

    def _run_definition(self, cursor: Cursor) -> Iterator[ParseResult[T]]:
        if self._definition is None:
            raise UndefinedParserError(ErrorTemplate.undefined_parser(self.name))
        return self._definition.run(cursor)


def forward_decl[T](name: str = "forward") -> ForwardParser[T]:
    """Create a forward declaration; call ``define()`` on it before parsing."""
    return ForwardParser(name)


# ============================================================================
# MONAD
# ============================================================================


def _item(cursor: Cursor) -> Iterator[ParseResult[str]]:
    if not cursor.is_eof:
        yield ParseResult(cursor.current, cursor.advance())


item: Parser[str] = Parser(_item, "item")
"""Consume exactly one character; fail on empty input."""


def pure[T](value: T) -> Parser[T]:
    """Succeed with ``value`` without consuming input.

    Example:
        >>> pure(42).parse("abc")
        [(42, 'abc')]
    """

    def run(cursor: Cursor) -> Iterator[ParseResult[T]]:
        yield ParseResult(value, cursor)

    return Parser(run, "pure")


def bind[A, B](parser: Parser[A], f: Callable[[A], Parser[B]]) -> Parser[B]:
    """Sequence ``parser`` with a parser computed from its value.

    For every ``(a, rest)`` that ``parser`` produces, runs ``f(a)`` on
    ``rest``. Results are concatenated in order: the alternatives of
    ``parser`` first, then within each, the alternatives of ``f(a)``.
    Committed choice relies on this ordering.

    Args:
        parser: First parser
        f: Continuation building the second parser from the first value

    Returns:
        Parser yielding every combined derivation
    """

    def run(cursor: Cursor) -> Iterator[ParseResult[B]]:
        for result in parser.run(cursor):
            yield from f(result.value).run(result.cursor)

    return Parser(run, parser.name)


def fmap[A, B](parser: Parser[A], f: Callable[[A], B]) -> Parser[B]:
    """Apply ``f`` to every value ``parser`` produces."""
    return bind(parser, lambda value: pure(f(value)))


def then[B](first: Parser[Any], second: Parser[B]) -> Parser[B]:
    """Run ``first``, discard its value, then run ``second``."""
    return bind(first, lambda _: second).named(second.name)


def skip[A](first: Parser[A], second: Parser[Any]) -> Parser[A]:
    """Run ``first``, then ``second``, keeping the value of ``first``."""
    return bind(first, lambda value: fmap(second, lambda _: value))


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers one after another, collecting their values in a tuple.

    Equivalent to nested :func:`bind` calls; every combination of
    alternatives is produced, in order.

    Example:
        >>> sequence(char("a"), char("b")).parse("abc")
        [(('a', 'b'), 'c')]
    """
    result: Parser[tuple[Any, ...]] = pure(())
    for parser in parsers:
        result = bind(
            result,
            lambda values, p=parser: fmap(p, lambda value: (*values, value)),
        )
    return result.named("sequence")


# ============================================================================
# ALTERNATION
# ============================================================================


def _zero(cursor: Cursor) -> Iterator[ParseResult[Any]]:
    return iter(())


mzero: Parser[Any] = Parser(_zero, "mzero")
"""Always fail, consuming nothing."""


def mplus[T](p: Parser[T], q: Parser[T]) -> Parser[T]:
    """All results of ``p``, followed by all results of ``q``.

    Both run against the same input: ``q`` does not see anything ``p``
    consumed. This is the backtracking union.
    """

    def run(cursor: Cursor) -> Iterator[ParseResult[T]]:
        yield from p.run(cursor)
        yield from q.run(cursor)

    return Parser(run, f"{p.name} + {q.name}")


def option[T](p: Parser[T], q: Parser[T]) -> Parser[T]:
    """Committed choice: the first result of ``mplus(p, q)``, if any.

    If ``p`` succeeds at all, its first result wins and ``q`` is never run,
    even if ``q`` would consume more. Order alternatives so that a shorter
    match listed first cannot shadow a longer one.

    Example:
        >>> option(string("ab"), string("abc")).parse("abc")
        [('ab', 'c')]
    """
    both = mplus(p, q)

    def run(cursor: Cursor) -> Iterator[ParseResult[T]]:
        result = both.first(cursor)
        if result is not None:
            yield result

    return Parser(run, f"{p.name} | {q.name}")


def satisfies(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume one character for which ``predicate`` holds.

    Built as ``bind(item, check)``: fails via :data:`mzero` when the
    predicate is false or the input is empty.
    """
    return bind(item, lambda c: pure(c) if predicate(c) else mzero).named("satisfies")


def char(expected: str) -> Parser[str]:
    """Match one specific character."""
    return satisfies(lambda c: c == expected).named(repr(expected))


def string(expected: str) -> Parser[str]:
    """Match a literal string, returning it.

    ``string("")`` always succeeds without consuming.

    Example:
        >>> string("let").parse("let x")
        [('let', ' x')]
        >>> string("let").parse("lex")
        []
    """
    size = len(expected)

    def run(cursor: Cursor) -> Iterator[ParseResult[str]]:
        if cursor.slice_ahead(size) == expected:
            yield ParseResult(expected, cursor.advance(size))

    return Parser(run, repr(expected))


# ============================================================================
# ENTRY POINTS
# ============================================================================


def _check_source_size(source: str, max_source_size: int | None) -> None:
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if limit > 0 and len(source) > limit:
        msg = (
            f"Source size ({len(source):,} characters) exceeds maximum "
            f"({limit:,} characters). "
            "Pass max_source_size to parse() to increase the limit."
        )
        raise ValueError(msg)


def _iterate[T](parser: Parser[T], source: str) -> Iterator[tuple[T, str]]:
    try:
        for result in parser.run(Cursor(source, 0)):
            yield result.as_pair()
    except RecursionError as e:
        raise RecursionDepthError(
            ErrorTemplate.recursion_depth_exceeded(len(source))
        ) from e


def iterparse[T](
    parser: Parser[T], source: str, *, max_source_size: int | None = None
) -> Iterator[tuple[T, str]]:
    """Lazily yield ``(value, remainder)`` pairs for ``source``.

    Useful with ambiguous grammars where realizing every derivation
    would be wasteful. The size limit is checked immediately.

    Raises:
        ValueError: If source exceeds max_source_size
        RecursionDepthError: If grammar recursion exhausts the stack
    """
    _check_source_size(source, max_source_size)
    return _iterate(parser, source)


def parse[T](
    parser: Parser[T], source: str, *, max_source_size: int | None = None
) -> list[tuple[T, str]]:
    """Run ``parser`` on ``source`` and return every derivation.

    Args:
        parser: Parser to run
        source: Input string
        max_source_size: Maximum input length (default: MAX_SOURCE_SIZE).
            Set to 0 to disable the limit.

    Returns:
        Ordered ``(value, remainder)`` pairs; an empty list means failure.
        Each remainder is a suffix of ``source``. Checking that the whole
        input was consumed is up to the caller (see :func:`parse_full`).

    Raises:
        ValueError: If source exceeds max_source_size
        RecursionDepthError: If grammar recursion exhausts the stack

    Example:
        >>> parse(string("ab"), "abc")
        [('ab', 'c')]
    """
    results = list(iterparse(parser, source, max_source_size=max_source_size))
    logger.debug(
        "Parser %s produced %d result(s) for input of length %d",
        parser.name,
        len(results),
        len(source),
    )
    return results


def parse_full[T](
    parser: Parser[T], source: str, *, max_source_size: int | None = None
) -> T:
    """Return the value of the first derivation that consumes all of ``source``.

    Raises:
        ParseFailedError: If nothing parsed, or every derivation left
            input unconsumed. Carries no position information.
        ValueError: If source exceeds max_source_size
        RecursionDepthError: If grammar recursion exhausts the stack
    """
    shortest: str | None = None
    for value, remainder in iterparse(parser, source, max_source_size=max_source_size):
        if not remainder:
            return value
        if shortest is None or len(remainder) < len(shortest):
            shortest = remainder

    if shortest is None:
        logger.debug("Parser %s found no parse", parser.name)
        raise ParseFailedError(ErrorTemplate.no_parse(len(source)), source=source)
    logger.debug("Parser %s left %d character(s) unconsumed", parser.name, len(shortest))
    raise ParseFailedError(
        ErrorTemplate.incomplete_parse(len(shortest)),
        source=source,
        remainder=shortest,
    )
