"""Diagnostic system for backparse errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BackparseError,
    GrammarError,
    InfiniteRepetitionError,
    ParseFailedError,
    RecursionDepthError,
    UndefinedParserError,
)
from .templates import ErrorTemplate

__all__ = [
    "BackparseError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GrammarError",
    "InfiniteRepetitionError",
    "ParseFailedError",
    "RecursionDepthError",
    "UndefinedParserError",
]
