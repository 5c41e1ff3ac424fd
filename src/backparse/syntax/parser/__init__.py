"""Backtracking parser-combinator engine.

This module re-exports the combinators from focused submodules.

Module Organization:
- core.py: Parser type, monadic combinators, alternation, parse() entry points
- combinators.py: Repetition, separators, left-chaining, lookahead
- whitespace.py: Whitespace skipping and tokenization
- primitives.py: Character classes, numbers, quoted strings

Public API:
    Parser: Composable parser value
    parse: Run a parser, returning every (value, remainder) pair
"""

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
from backparse.syntax.parser.core import (
    ForwardParser,
    Parser,
    bind,
    char,
    fmap,
    forward_decl,
    item,
    iterparse,
    mplus,
    mzero,
    option,
    parse,
    parse_full,
    pure,
    satisfies,
    sequence,
    skip,
    string,
    then,
)
from backparse.syntax.parser.primitives import (
    any_char,
    crlf,
    digit,
    empty_quot,
    end_of_line,
    escape_new_line,
    first_letter,
    letter,
    newline,
    non_escape,
    none_of,
    number_double,
    number_int,
    one_of,
    quoted_string,
    word_letter,
)
from backparse.syntax.parser.whitespace import spaces, symb, token

__all__ = [
    "ForwardParser",
    "Parser",
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
