"""Lexical parsers: character classes, numbers and quoted strings.

Character classes are ASCII only: digits are 0-9 and letters are a-z/A-Z,
regardless of what str.isdigit()/str.isalpha() would accept.

Quoted strings support exactly one escape, a backslash immediately
followed by a newline, which stands for the newline. Any other backslash
(including ``\\"``) ends the string body, so the closing quote is not
found and the parse fails.
"""

from backparse.constants import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    ESCAPE_CHAR,
    FIRST_LETTER_SYMBOLS,
    QUOTE_CHAR,
)
from backparse.syntax.parser.combinators import look_ahead, many, many1
from backparse.syntax.parser.core import (
    Parser,
    bind,
    char,
    fmap,
    mzero,
    satisfies,
    sequence,
    skip,
    string,
    then,
)
from backparse.syntax.parser.whitespace import spaces

__all__ = [
    "any_char",
    "crlf",
    "digit",
    "empty_quot",
    "end_of_line",
    "escape_new_line",
    "first_letter",
    "letter",
    "newline",
    "non_escape",
    "none_of",
    "number_double",
    "number_int",
    "one_of",
    "quoted_string",
    "word_letter",
]


def one_of(chars: str) -> Parser[str]:
    """Match one character contained in ``chars``."""
    return satisfies(lambda c: c in chars).named(f"one_of({chars!r})")


def none_of(chars: str) -> Parser[str]:
    """Match one character not contained in ``chars``."""
    return satisfies(lambda c: c not in chars).named(f"none_of({chars!r})")


# ============================================================================
# CHARACTER CLASSES
# ============================================================================

any_char: Parser[str] = satisfies(lambda _: True).named("any_char")

digit: Parser[str] = one_of(ASCII_DIGITS).named("digit")

letter: Parser[str] = one_of(ASCII_LETTERS).named("letter")

# Identifier start for a symbolic-identifier language.
first_letter: Parser[str] = (letter | one_of(FIRST_LETTER_SYMBOLS)).named("first_letter")

# Identifier continuation.
word_letter: Parser[str] = (first_letter | digit).named("word_letter")

newline: Parser[str] = char("\n").named("newline")

# Yields "\n", not "\r\n".
crlf: Parser[str] = then(char("\r"), char("\n")).named("crlf")

end_of_line: Parser[str] = (newline | crlf).named("end_of_line")

empty_quot: Parser[str] = string("[]").named("empty_quot")


# ============================================================================
# NUMBERS
# ============================================================================

# Committed choice: once "-" matched, a missing digit fails the whole number
# instead of retrying with the empty sign.
_sign: Parser[str] = string("-") | string("")

_decimal_point: Parser[str] = string(".") | string("")


def _to_int(parts: tuple[str, list[str]]) -> int:
    sign, digits = parts
    return int(sign + "".join(digits))


def _to_float(parts: tuple[str, list[str], str, list[str], None]) -> float:
    sign, digits, _point, fraction, _blank = parts
    return float(f"{sign}{''.join(digits)}.{''.join(fraction) or '0'}")


number_int: Parser[int] = fmap(sequence(_sign, many1(digit)), _to_int).named("number_int")
"""Optional ``-`` and one or more digits, as int.

Examples:
    42 → 42
    -7 → -7
    - → no parse
"""

number_double: Parser[float] = fmap(
    sequence(_sign, many1(digit), _decimal_point, many(digit), spaces), _to_float
).named("number_double")
"""Optional ``-``, digits, optional ``.`` and fraction, then trailing whitespace.

The fraction defaults to ``0`` when absent or empty, and there is no
exponent syntax.

Examples:
    3 → 3.0
    3. → 3.0
    -3.5 → -3.5
    - → no parse
"""


# ============================================================================
# QUOTED STRINGS
# ============================================================================

_escaped_newline: Parser[str] = string(ESCAPE_CHAR + "\n")

escape_new_line: Parser[str] = bind(
    look_ahead(_escaped_newline),
    lambda found: then(char(ESCAPE_CHAR), char("\n")) if found else mzero,
).named("escape_new_line")
"""Backslash followed by newline, yielding the newline."""

non_escape: Parser[str] = none_of(ESCAPE_CHAR + QUOTE_CHAR).named("non_escape")
"""Any character except backslash and double quote."""

quoted_string: Parser[str] = fmap(
    then(char(QUOTE_CHAR), skip(many(escape_new_line | non_escape), char(QUOTE_CHAR))),
    "".join,
).named("quoted_string")
"""Double-quoted string; value is the unquoted contents.

Example:
    >>> quoted_string.parse('"a\\\\\\nb"')
    [('a\\nb', '')]
"""
