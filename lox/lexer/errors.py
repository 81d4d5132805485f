"""
Error handling for the Lox lexer.

The scanner never raises on bad input. It hands ``(line, message)`` pairs
to an error sink and keeps going; ``ErrorReporter`` is the stock sink.
``LexerError`` exists for callers that want a hard failure instead.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    line: int
    severity: str = "error"  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"[line {self.line}] {self.severity.capitalize()}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Exception raised when a caller asks for strict lexing and the
    scanner reported a problem.

    Contains the diagnostic that triggered it.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "LexerError":
        return cls(
            diagnostic.message,
            diagnostic.line,
            code=diagnostic.code,
            help_text=diagnostic.help_text,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Unterminated block comment",
}

UNTERMINATED_STRING = "Unterminated string."
UNTERMINATED_COMMENT = "Unterminated comment."

_HELP_TEXT = {
    "L002": "String literals must be closed with a matching '\"'.",
    "L003": "Every '/*' needs a matching '*/', including nested ones.",
}


def unexpected_character_message(char: str) -> str:
    """Message for a character that starts no token."""
    return f"Unexpected character: '{char}'."


def classify_message(message: str) -> Optional[str]:
    """Map a scanner message back to its error code."""
    if message.startswith("Unexpected character"):
        return "L001"
    if message == UNTERMINATED_STRING:
        return "L002"
    if message == UNTERMINATED_COMMENT:
        return "L003"
    return None


class ErrorReporter:
    """
    Error sink that records every lexical error it is handed.

    Instances are callable with ``(line, message)`` so they can be passed
    straight to ``scan``. ``had_error`` stays set until ``reset``.
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def __call__(self, line: int, message: str) -> None:
        self.report(line, message)

    def report(self, line: int, message: str) -> None:
        code = classify_message(message)
        diagnostic = Diagnostic(
            message=message,
            line=line,
            code=code,
            help_text=_HELP_TEXT.get(code),
        )
        self.diagnostics.append(diagnostic)
        logger.error("[line %d] Error: %s", line, message)

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "error"]

    def reset(self) -> None:
        """Forget everything reported so far."""
        self.diagnostics.clear()

    def format(self) -> str:
        return "\n".join(f"[line {d.line}] Error: {d.message}" for d in self.diagnostics)
