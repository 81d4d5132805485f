"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.

Key Features:
- Maximal-munch recognition of one and two character operators
- Arbitrarily nested /* block comments */
- Multi-line string literals with accurate line tracking
- Error reporting through a pluggable sink, scanning never stops early
"""

from .tokens import Token, TokenKind, KEYWORDS, is_keyword
from .lexer import Lexer, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorReporter, LexerError

__all__ = [
    "Lexer",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "is_keyword",
    "Diagnostic",
    "ErrorReporter",
    "LexerError",
]
