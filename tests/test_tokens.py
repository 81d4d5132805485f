"""
Tests for token definitions and the keyword table.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from dataclasses import FrozenInstanceError

from lox.lexer import is_keyword, KEYWORDS
from lox.lexer.tokens import Token, TokenKind


class TestKeywordTable(unittest.TestCase):

    def test_is_keyword(self):
        self.assertTrue(is_keyword("class"))
        self.assertTrue(is_keyword("continue"))
        self.assertFalse(is_keyword("classy"))
        self.assertFalse(is_keyword("CLASS"))
        self.assertFalse(is_keyword(""))

    def test_table_contents(self):
        self.assertEqual(len(KEYWORDS), 18)
        self.assertIs(KEYWORDS["fun"], TokenKind.FUN)
        self.assertIs(KEYWORDS["nil"], TokenKind.NIL)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = TokenKind.VAR
        self.assertFalse(is_keyword("let"))


class TestToken(unittest.TestCase):

    def test_token_is_immutable(self):
        token = Token(TokenKind.NUMBER, "1", 1.0, 1)
        with self.assertRaises(FrozenInstanceError):
            token.line = 2

    def test_offset_not_part_of_equality(self):
        self.assertEqual(
            Token(TokenKind.IDENTIFIER, "x", None, 1, 0),
            Token(TokenKind.IDENTIFIER, "x", None, 1, 10),
        )

    def test_properties(self):
        self.assertTrue(Token(TokenKind.STRING, '"a"', "a", 1).is_literal)
        self.assertTrue(Token(TokenKind.WHILE, "while", None, 1).is_keyword)
        self.assertFalse(Token(TokenKind.IDENTIFIER, "w", None, 1).is_keyword)
        self.assertTrue(Token(TokenKind.EOF, "", None, 3).is_eof)

    def test_str(self):
        self.assertEqual(str(Token(TokenKind.NUMBER, "2", 2.0, 1)), "NUMBER('2' -> 2.0)")
        self.assertEqual(str(Token(TokenKind.PLUS, "+", None, 1)), "PLUS('+')")


if __name__ == '__main__':
    unittest.main()
