"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Cursor errors (misuse of the input position API)
        2000-2999: Grammar errors (parsers built or wired incorrectly)
        3000-3999: Parse errors (raised only by parse_full)
    """

    # Cursor errors (1000-1999)
    UNEXPECTED_EOF = 1001

    # Grammar errors (2000-2999)
    INFINITE_REPETITION = 2001
    UNDEFINED_PARSER = 2002
    RECURSION_DEPTH_EXCEEDED = 2003

    # Parse errors (3000-3999)
    NO_PARSE = 3001
    INCOMPLETE_PARSE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries no source span: the
    engine only knows success or failure, never where a grammar went wrong.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INFINITE_REPETITION]: Parser 'spaces' succeeded without consuming input inside many()
              = help: Parsers repeated by many() must consume at least one character

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
