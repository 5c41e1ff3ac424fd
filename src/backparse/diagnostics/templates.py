"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before reading cursor.current",
        )

    @staticmethod
    def infinite_repetition(parser_name: str, combinator: str) -> Diagnostic:
        """Repeated parser succeeded without consuming input.

        Args:
            parser_name: Name of the parser being repeated
            combinator: Name of the repetition combinator (many, many_till, ...)

        Returns:
            Diagnostic for INFINITE_REPETITION
        """
        msg = (
            f"Parser '{parser_name}' succeeded without consuming input "
            f"inside {combinator}()"
        )
        return Diagnostic(
            code=DiagnosticCode.INFINITE_REPETITION,
            message=msg,
            hint=f"Parsers repeated by {combinator}() must consume at least one character",
        )

    @staticmethod
    def undefined_parser(parser_name: str) -> Diagnostic:
        """Forward declaration used before definition.

        Args:
            parser_name: Name of the forward declaration

        Returns:
            Diagnostic for UNDEFINED_PARSER
        """
        msg = f"Forward declaration '{parser_name}' was run before define() was called"
        return Diagnostic(
            code=DiagnosticCode.UNDEFINED_PARSER,
            message=msg,
            hint="Call define() on every forward_decl() before parsing",
        )

    @staticmethod
    def recursion_depth_exceeded(source_length: int) -> Diagnostic:
        """Grammar recursion exhausted the interpreter stack.

        Args:
            source_length: Length of the input being parsed

        Returns:
            Diagnostic for RECURSION_DEPTH_EXCEEDED
        """
        msg = f"Recursion depth exceeded while parsing input of length {source_length}"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_DEPTH_EXCEEDED,
            message=msg,
            hint="Rewrite left-recursive rules with chainl1() or many()",
        )

    @staticmethod
    def no_parse(source_length: int) -> Diagnostic:
        """Grammar produced no results at all.

        Args:
            source_length: Length of the input being parsed

        Returns:
            Diagnostic for NO_PARSE
        """
        msg = f"No parse for input of length {source_length}"
        return Diagnostic(code=DiagnosticCode.NO_PARSE, message=msg)

    @staticmethod
    def incomplete_parse(remaining: int) -> Diagnostic:
        """Every derivation left input unconsumed.

        Args:
            remaining: Length of the shortest unconsumed remainder

        Returns:
            Diagnostic for INCOMPLETE_PARSE
        """
        msg = f"Input not fully consumed: {remaining} character(s) remain"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_PARSE,
            message=msg,
            hint="Wrap the grammar in token() if trailing whitespace is expected",
        )
