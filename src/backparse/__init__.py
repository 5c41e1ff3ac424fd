"""backparse - backtracking parser combinators.

Build recursive-descent parsers by combining small parsers with sequencing,
choice, repetition and lookahead. A parser maps an input string to every
(value, remainder) pair it can derive; an empty list means failure.

Public API:
    Parser - Composable parser value
    parse - Run a parser, returning every (value, remainder) pair
    iterparse - Same results, lazily
    parse_full - First value that consumes the whole input, or raise
    forward_decl - Placeholder for recursive rules

Exceptions:
    BackparseError - Base exception class
    GrammarError - Parser built or wired incorrectly
    InfiniteRepetitionError - Repeated parser did not consume input
    UndefinedParserError - Forward declaration never defined
    RecursionDepthError - Grammar recursion exhausted the stack
    ParseFailedError - parse_full found no complete parse

Submodules:
    backparse.syntax.cursor - Cursor and ParseResult
    backparse.syntax.parser - All combinators and lexical parsers
    backparse.diagnostics - Error types, codes and templates
    backparse.constants - Character sets and input limits

Example:
    >>> from backparse import chainl1, fmap, number_int, parse, symb
    >>> plus = fmap(symb("+"), lambda _: lambda a, b: a + b)
    >>> parse(chainl1(number_int, plus), "1+2+3")
    [(6, '')]
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    BackparseError,
    GrammarError,
    InfiniteRepetitionError,
    ParseFailedError,
    RecursionDepthError,
    UndefinedParserError,
)
from .syntax.cursor import Cursor, ParseResult
from .syntax.parser import (
    ForwardParser,
    Parser,
    any_char,
    bind,
    chainl,
    chainl1,
    char,
    crlf,
    digit,
    empty_quot,
    end_of_line,
    escape_new_line,
    first_letter,
    fmap,
    forward_decl,
    item,
    iterparse,
    letter,
    look_ahead,
    many,
    many1,
    many_n,
    many_till,
    many_till1,
    mplus,
    mzero,
    newline,
    non_escape,
    none_of,
    number_double,
    number_int,
    one_of,
    option,
    parse,
    parse_full,
    pure,
    quoted_string,
    satisfies,
    sep_by,
    sep_by1,
    sequence,
    skip,
    spaces,
    string,
    symb,
    then,
    token,
    word_letter,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("backparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BackparseError",
    "Cursor",
    "ForwardParser",
    "GrammarError",
    "InfiniteRepetitionError",
    "ParseFailedError",
    "ParseResult",
    "Parser",
    "RecursionDepthError",
    "UndefinedParserError",
    "__version__",
    "any_char",
    "bind",
    "chainl",
    "chainl1",
    "char",
    "crlf",
    "digit",
    "empty_quot",
    "end_of_line",
    "escape_new_line",
    "first_letter",
    "fmap",
    "forward_decl",
    "item",
    "iterparse",
    "letter",
    "look_ahead",
    "many",
    "many1",
    "many_n",
    "many_till",
    "many_till1",
    "mplus",
    "mzero",
    "newline",
    "non_escape",
    "none_of",
    "number_double",
    "number_int",
    "one_of",
    "option",
    "parse",
    "parse_full",
    "pure",
    "quoted_string",
    "satisfies",
    "sep_by",
    "sep_by1",
    "sequence",
    "skip",
    "spaces",
    "string",
    "symb",
    "then",
    "token",
    "word_letter",
]
