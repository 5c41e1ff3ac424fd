"""Hypothesis strategies for backparse property-based testing.

Usage:
    from tests.strategies import grammar_inputs, int_lists, sample_parsers
"""

from .grammar import (
    GRAMMAR_ALPHABET,
    arithmetic_expressions,
    grammar_inputs,
    int_lists,
    quoted_bodies,
    sample_parsers,
    whitespace_runs,
)

__all__ = [
    "GRAMMAR_ALPHABET",
    "arithmetic_expressions",
    "grammar_inputs",
    "int_lists",
    "quoted_bodies",
    "sample_parsers",
    "whitespace_runs",
]
