"""
pylox

A Lox front end: a scanner that turns Lox source into tokens, plus the
node contracts the parser builds on.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # AST node contracts
    └── cli.py           # `lox` command line tool
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, scan, is_keyword, Token, TokenKind

__all__ = [
    "Lexer",
    "scan",
    "is_keyword",
    "Token",
    "TokenKind",

    # Version info
    "__version__",
    "__license__",
]
