"""Whitespace handling and tokenization.

Whitespace is space, newline, carriage return and tab
(see :data:`backparse.constants.WHITESPACE_CHARS`).
"""

from collections.abc import Iterator

from backparse.syntax.cursor import Cursor, ParseResult
from backparse.syntax.parser.core import Parser, skip, string, then

__all__ = ["spaces", "symb", "token"]


def _spaces(cursor: Cursor) -> Iterator[ParseResult[None]]:
    # Greedy and always successful; matching zero characters is fine.
    yield ParseResult(None, cursor.skip_whitespace())


spaces: Parser[None] = Parser(_spaces, "spaces")
"""Skip zero or more whitespace characters. Never fails."""


def token[T](parser: Parser[T]) -> Parser[T]:
    """Run ``parser`` with whitespace skipped before and after it.

    Example:
        >>> token(string("x")).parse("  x  y")
        [('x', 'y')]
    """
    return skip(then(spaces, parser), spaces).named(parser.name)


def symb(text: str) -> Parser[str]:
    """Match the literal ``text`` as a whitespace-delimited token."""
    return token(string(text))
