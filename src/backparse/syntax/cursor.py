"""Immutable cursor infrastructure for backtracking parsing.

Implements the immutable cursor pattern: a parser never mutates its input,
it only produces new positions into the same source string.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Backtracking is free: keep the old cursor, try the next alternative
    - EOF is a state (is_eof), not a return value
    - The source is never copied while parsing; the remainder string is
      materialized only at the API boundary

Pattern Reference:
    - Haskell Parsec
    - Hutton & Meijer, "Monadic Parser Combinators"
"""

from dataclasses import dataclass

from backparse.constants import WHITESPACE_CHARS
from backparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (a cursor exists per derivation step)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remainder(self) -> str:
        """Unconsumed suffix of the source.

        Always a suffix of ``source``; the empty string at EOF.

        Example:
            >>> Cursor("hello", 2).remainder
            'llo'
        """
        return self.slice_to(len(self.source))

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged).
            Never moves past the end of the source.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor, parse, then slice up to the new position:

            >>> start = Cursor("hello world", 0)
            >>> end = start.advance(5)
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def skip_whitespace(self) -> "Cursor":
        """Skip whitespace characters (space, newline, carriage return, tab).

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> Cursor(" \\t\\n\\r hello", 0).skip_whitespace().pos
            5
            >>> Cursor("hello", 0).skip_whitespace().pos
            0
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE_CHARS:
            c = c.advance()
        return c


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """One successful derivation: parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser run has signature:
            def run(cursor: Cursor) -> Iterator[ParseResult[T]]
        An empty iterator means the parser failed at this position.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.remainder
        'ello'
        >>> result.as_pair()
        ('h', 'ello')
    """

    value: T
    cursor: Cursor

    @property
    def remainder(self) -> str:
        """Unconsumed input after this derivation."""
        return self.cursor.remainder

    def as_pair(self) -> tuple[T, str]:
        """Return the ``(value, remainder)`` pair exposed by parse()."""
        return (self.value, self.cursor.remainder)
