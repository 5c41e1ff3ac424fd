"""Shared constants for backparse.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Character sets: Classifiers used by the lexical parsers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Character sets
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "FIRST_LETTER_SYMBOLS",
    "QUOTE_CHAR",
    "ESCAPE_CHAR",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length accepted by parse() (characters, not bytes).
# Per-call override: parse(p, source, max_source_size=...). 0 disables.
MAX_SOURCE_SIZE: int = 10_000_000

# ============================================================================
# CHARACTER SETS
# ============================================================================

# Skipped by `spaces` and `token`. Form feed and vertical tab are NOT included.
WHITESPACE_CHARS: str = " \n\r\t"

# ASCII only - str.isdigit() accepts Unicode digits like ² which int() rejects.
ASCII_DIGITS: str = "0123456789"

# ASCII only - str.isalpha() accepts every Unicode letter.
ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Symbols allowed at the start of a symbolic identifier, alongside letters.
FIRST_LETTER_SYMBOLS: str = "+-*/<>=!?§$%&@~´',:._"

# Quoted string delimiters.
QUOTE_CHAR: str = '"'
ESCAPE_CHAR: str = "\\"
