"""
Abstract Syntax Tree node contracts for Lox.

The parser is not part of this package yet, but later stages already
depend on how function-like nodes look. A named ``fun`` declaration and an
anonymous lambda share one shape: ordered parameter tokens, ordered body
statements and a name that is only absent for the anonymous form.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..lexer.tokens import Token, TokenKind


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Stmt(ASTNode):
    """Base class for statements."""
    pass


class Expr(ASTNode):
    """Base class for expressions."""
    pass


class FunctionDeclaration(ABC):
    """
    Shape shared by every function-like node.

    Later pipeline stages (resolver, interpreter) work against this
    interface so named and anonymous functions go through the same code.
    """

    @property
    @abstractmethod
    def params(self) -> List[Token]:
        """Parameter name tokens, in declaration order."""

    @property
    @abstractmethod
    def body(self) -> List[Stmt]:
        """Body statements, in source order."""

    @property
    @abstractmethod
    def name(self) -> Optional[Token]:
        """Name token, or None for an anonymous function."""

    @property
    def is_anonymous(self) -> bool:
        return self.name is None

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def display_name(self) -> str:
        if self.name is None:
            return "<lambda>"
        return f"<fn {self.name.lexeme}>"


def _check_params(params: List[Token]) -> List[Token]:
    for param in params:
        if param.kind is not TokenKind.IDENTIFIER:
            raise ValueError(f"Parameter must be an identifier, got {param.kind.name}")
    return list(params)


class FunctionStmt(Stmt, FunctionDeclaration):
    """Named function declaration: ``fun name(a, b) { ... }``."""

    def __init__(self, name: Token, params: List[Token], body: List[Stmt]):
        if name is None:
            raise ValueError("FunctionStmt requires a name; use LambdaExpr for anonymous functions")
        self._name = name
        self._params = _check_params(params)
        self._body = list(body)

    @property
    def name(self) -> Token:
        return self._name

    @property
    def params(self) -> List[Token]:
        return self._params

    @property
    def body(self) -> List[Stmt]:
        return self._body

    def children(self) -> List[ASTNode]:
        return list(self._body)

    def __repr__(self) -> str:
        params = ", ".join(p.lexeme for p in self._params)
        return f"FunctionStmt({self._name.lexeme}({params}))"


class LambdaExpr(Expr, FunctionDeclaration):
    """Anonymous function expression: ``fun (a, b) { ... }``."""

    def __init__(self, params: List[Token], body: List[Stmt]):
        self._params = _check_params(params)
        self._body = list(body)

    @property
    def name(self) -> None:
        return None

    @property
    def params(self) -> List[Token]:
        return self._params

    @property
    def body(self) -> List[Stmt]:
        return self._body

    def children(self) -> List[ASTNode]:
        return list(self._body)

    def __repr__(self) -> str:
        params = ", ".join(p.lexeme for p in self._params)
        return f"LambdaExpr(({params}))"
