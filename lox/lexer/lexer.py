"""
Lox Lexer - turns source text into tokens

Each call to ``scan`` walks the source once with its own cursor. The
character under the cursor picks an action out of ``_DISPATCH``; the
action consumes as much as it needs (maximal munch) and appends at most
one token. Bad input is reported to the error sink and skipped, the scan
itself never stops early.
"""

import logging
import string
from typing import Callable, Dict, List, Optional

from .tokens import (
    Token, TokenKind, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIXED_TOKENS,
    is_keyword as _is_keyword,
)
from .errors import (
    Diagnostic, ErrorReporter, LexerError, UNTERMINATED_COMMENT,
    UNTERMINATED_STRING, unexpected_character_message,
)

logger = logging.getLogger(__name__)

ErrorSink = Callable[[int, str], None]

DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CONTINUE = IDENTIFIER_START | DIGITS


class _Cursor:
    """Per-scan state. Never outlives the ``scan`` call that made it."""

    __slots__ = ("source", "start", "current", "line", "start_line", "tokens", "on_error")

    def __init__(self, source: str, on_error: ErrorSink):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.tokens: List[Token] = []
        self.on_error = on_error

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def add_token(self, kind: TokenKind, literal=None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(kind, lexeme, literal, self.start_line, self.start))

    def error(self, message: str) -> None:
        self.on_error(self.line, message)


# ============================================================================
# Actions
# ============================================================================

def _single(kind: TokenKind) -> Callable[[_Cursor, str], None]:
    def action(cursor: _Cursor, char: str) -> None:
        cursor.add_token(kind)
    return action


def _equal_suffixed(plain: TokenKind, with_equal: TokenKind) -> Callable[[_Cursor, str], None]:
    def action(cursor: _Cursor, char: str) -> None:
        cursor.add_token(with_equal if cursor.match("=") else plain)
    return action


def _slash(cursor: _Cursor, char: str) -> None:
    if cursor.match("/"):
        _line_comment(cursor)
    elif cursor.match("*"):
        _block_comment(cursor)
    else:
        cursor.add_token(TokenKind.SLASH)


def _line_comment(cursor: _Cursor) -> None:
    # Stops before the newline so the main loop still counts it
    while cursor.peek() != "\n" and not cursor.is_at_end():
        cursor.advance()


def _block_comment(cursor: _Cursor) -> None:
    depth = 1
    while depth > 0:
        if cursor.is_at_end():
            cursor.error(UNTERMINATED_COMMENT)
            return

        if cursor.peek() == "/" and cursor.peek_next() == "*":
            cursor.advance()
            cursor.advance()
            depth += 1
        elif cursor.peek() == "*" and cursor.peek_next() == "/":
            cursor.advance()
            cursor.advance()
            depth -= 1
        elif cursor.advance() == "\n":
            cursor.line += 1


def _whitespace(cursor: _Cursor, char: str) -> None:
    pass


def _newline(cursor: _Cursor, char: str) -> None:
    cursor.line += 1


def _string(cursor: _Cursor, char: str) -> None:
    while cursor.peek() != '"' and not cursor.is_at_end():
        if cursor.peek() == "\n":
            cursor.line += 1
        cursor.advance()

    if cursor.is_at_end():
        cursor.error(UNTERMINATED_STRING)
        return

    cursor.advance()  # closing quote

    # Trim the surrounding quotes, no escape processing
    value = cursor.source[cursor.start + 1:cursor.current - 1]
    cursor.add_token(TokenKind.STRING, value)


def _number(cursor: _Cursor, char: str) -> None:
    while cursor.peek() in DIGITS:
        cursor.advance()

    # A trailing '.' only belongs to the number if a digit follows it
    if cursor.peek() == "." and cursor.peek_next() in DIGITS:
        cursor.advance()
        while cursor.peek() in DIGITS:
            cursor.advance()

    text = cursor.source[cursor.start:cursor.current]
    cursor.add_token(TokenKind.NUMBER, float(text))


def _identifier(cursor: _Cursor, char: str) -> None:
    while cursor.peek() in IDENTIFIER_CONTINUE:
        cursor.advance()

    text = cursor.source[cursor.start:cursor.current]
    cursor.add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))


def _unexpected(cursor: _Cursor, char: str) -> None:
    cursor.error(unexpected_character_message(char))


def _build_dispatch() -> Dict[str, Callable[[_Cursor, str], None]]:
    table: Dict[str, Callable[[_Cursor, str], None]] = {}
    for char, kind in SINGLE_CHAR_TOKENS.items():
        table[char] = _single(kind)
    for char, (plain, with_equal) in EQUAL_SUFFIXED_TOKENS.items():
        table[char] = _equal_suffixed(plain, with_equal)
    table["/"] = _slash
    for char in " \r\t":
        table[char] = _whitespace
    table["\n"] = _newline
    table['"'] = _string
    for char in DIGITS:
        table[char] = _number
    for char in IDENTIFIER_START:
        table[char] = _identifier
    return table


_DISPATCH = _build_dispatch()


# ============================================================================
# Public API
# ============================================================================

def scan(source: str, on_error: Optional[ErrorSink] = None) -> List[Token]:
    """
    Scan ``source`` into a list of tokens ending with ``EOF``.

    Args:
        source: Complete source text
        on_error: Called as ``on_error(line, message)`` for every lexical
            error. Defaults to a throwaway ``ErrorReporter``.

    Returns:
        List of tokens including the EOF token
    """
    if on_error is None:
        on_error = ErrorReporter()

    cursor = _Cursor(source, on_error)
    logger.debug("Scanning %d characters", len(source))

    while not cursor.is_at_end():
        cursor.start = cursor.current
        cursor.start_line = cursor.line
        char = cursor.advance()
        _DISPATCH.get(char, _unexpected)(cursor, char)

    cursor.tokens.append(Token(TokenKind.EOF, "", None, cursor.line, cursor.current))
    logger.debug("Scan finished: %d tokens, %d lines", len(cursor.tokens), cursor.line)
    return cursor.tokens


class Lexer:
    """
    Lox lexical analyzer.

    Thin stateful wrapper around ``scan`` that keeps the diagnostics of
    its most recent run around for the caller.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.reporter = ErrorReporter()
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.reporter.reset()
        self.tokens = scan(self.source, self.reporter)
        if self.reporter.had_error:
            logger.debug("%s: %d lexical error(s)", self.filename, len(self.reporter.errors))
        return self.tokens

    @staticmethod
    def is_keyword(lexeme: str) -> bool:
        return _is_keyword(lexeme)

    @property
    def errors(self) -> List[Diagnostic]:
        return self.reporter.errors

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return self.reporter.had_error

    def get_diagnostics(self) -> List[Diagnostic]:
        return list(self.reporter.diagnostics)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing reported any error
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise LexerError.from_diagnostic(lexer.errors[0])

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing reported any error
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
