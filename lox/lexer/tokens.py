"""
Token definitions for the Lox lexer.

This module defines every token kind the scanner can produce:
- Single-character punctuation and operators
- One or two character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The end-of-input sentinel

The keyword table is built once at import time and published read-only,
so any number of scans can share it.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


class TokenKind(Enum):
    """
    Enumeration of all lexical categories in Lox.

    Organized by category for clarity.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *
    PERCENT = auto()                # %
    COLON = auto()                  # :
    QUESTION = auto()               # ? (conditional operator)

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    BREAK = auto()
    CONTINUE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token kind, the lexeme (raw text), the parsed literal
    value and the line on which the lexeme starts. The start offset is
    carried for tooling but does not take part in equality.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, inner text for STRING
    line: int
    offset: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.kind.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, line={self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_KINDS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.kind in KEYWORD_KINDS

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF


# Reserved words, exact and case-sensitive
_KEYWORDS = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
}

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(_KEYWORDS)

KEYWORD_KINDS = frozenset(KEYWORDS.values())

LITERAL_KINDS = frozenset({
    TokenKind.STRING, TokenKind.NUMBER,
    TokenKind.TRUE, TokenKind.FALSE, TokenKind.NIL,
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenKind] = MappingProxyType({
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    "%": TokenKind.PERCENT,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
})

# First character -> (kind without '=', kind with trailing '=')
EQUAL_SUFFIXED_TOKENS: Mapping[str, tuple] = MappingProxyType({
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
})


def is_keyword(lexeme: str) -> bool:
    """Return True if ``lexeme`` is exactly a reserved word."""
    return lexeme in KEYWORDS
