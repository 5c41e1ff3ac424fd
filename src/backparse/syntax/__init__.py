"""Syntax package: input cursor and parser combinators.

Combinators live in :mod:`backparse.syntax.parser`.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import Parser, parse

__all__ = ["Cursor", "ParseResult", "Parser", "parse"]
