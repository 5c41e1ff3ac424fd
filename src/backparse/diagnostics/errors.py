"""backparse exception hierarchy with structured diagnostics.

Parse failure is never an exception: a parser that does not match yields
no results. These exceptions report grammar bugs and resource limits.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class BackparseError(Exception):
    """Base exception for all backparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BackparseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(BackparseError):
    """A parser was built or wired incorrectly.

    Unlike an empty result, this is a bug in the grammar, not in the input.
    """


class InfiniteRepetitionError(GrammarError):
    """A repeated parser succeeded without consuming input.

    Example:
        many(spaces)  ← spaces always succeeds, so many() would never stop
    """


class UndefinedParserError(GrammarError):
    """A forward declaration was run before define() was called."""


class RecursionDepthError(BackparseError):
    """Grammar recursion exhausted the interpreter stack.

    Usually a left-recursive rule (expr = expr "+" term) or input nested
    deeper than the interpreter recursion limit allows.
    """


class ParseFailedError(BackparseError):
    """No derivation consumed the whole input (raised by parse_full only).

    Attributes:
        source: The input that was parsed
        remainder: Shortest unconsumed suffix among all derivations,
            or None if nothing parsed at all
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        source: str = "",
        remainder: str | None = None,
    ) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            source: The input that was parsed
            remainder: Shortest unconsumed suffix, None if nothing parsed
        """
        super().__init__(message)
        self.source = source
        self.remainder = remainder
