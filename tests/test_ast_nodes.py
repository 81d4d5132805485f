"""
Tests for the function declaration node contract.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer import scan
from lox.lexer.tokens import TokenKind
from lox.parser import Stmt, FunctionDeclaration, FunctionStmt, LambdaExpr


class ReturnStmt(Stmt):
    def children(self):
        return []


def _identifiers(source):
    return [t for t in scan(source) if t.kind is TokenKind.IDENTIFIER]


class TestFunctionDeclaration(unittest.TestCase):

    def test_named_function(self):
        name, a, b = _identifiers("add a b")
        body = [ReturnStmt()]
        fn = FunctionStmt(name, [a, b], body)

        self.assertIsInstance(fn, FunctionDeclaration)
        self.assertIsInstance(fn, Stmt)
        self.assertFalse(fn.is_anonymous)
        self.assertEqual(fn.name.lexeme, "add")
        self.assertEqual([p.lexeme for p in fn.params], ["a", "b"])
        self.assertEqual(fn.body, body)
        self.assertEqual(fn.arity, 2)
        self.assertEqual(fn.display_name, "<fn add>")

    def test_lambda(self):
        (x,) = _identifiers("x")
        fn = LambdaExpr([x], [])

        self.assertIsInstance(fn, FunctionDeclaration)
        self.assertTrue(fn.is_anonymous)
        self.assertIsNone(fn.name)
        self.assertEqual(fn.arity, 1)
        self.assertEqual(fn.display_name, "<lambda>")

    def test_shared_shape(self):
        name, p = _identifiers("f p")
        declarations = [FunctionStmt(name, [p], []), LambdaExpr([p], [])]
        self.assertEqual([d.params for d in declarations], [[p], [p]])
        self.assertEqual([d.is_anonymous for d in declarations], [False, True])

    def test_named_function_requires_name(self):
        with self.assertRaises(ValueError):
            FunctionStmt(None, [], [])

    def test_params_must_be_identifiers(self):
        keyword = scan("class")[0]
        with self.assertRaises(ValueError):
            LambdaExpr([keyword], [])

    def test_params_are_copied(self):
        params = _identifiers("a")
        fn = LambdaExpr(params, [])
        params.append(params[0])
        self.assertEqual(fn.arity, 1)

    def test_contract_is_abstract(self):
        with self.assertRaises(TypeError):
            FunctionDeclaration()


if __name__ == '__main__':
    unittest.main()
