"""
Lox Parser Package

Only the node shapes the rest of the pipeline relies on live here so far.
"""

from .ast_nodes import Stmt, Expr, FunctionDeclaration, FunctionStmt, LambdaExpr

__all__ = [
    "Stmt",
    "Expr",
    "FunctionDeclaration",
    "FunctionStmt",
    "LambdaExpr",
]
