import dataclasses
import unittest

from rpnexpr import ROUND, SQUARE, Token, TokenKind, bracket_family
from rpnexpr import get_precedence, is_left_associative


class TestToken(unittest.TestCase):
    def test_str_is_text(self):
        self.assertEqual(str(Token(TokenKind.NUMBER, "42")), "42")

    def test_immutable(self):
        token = Token(TokenKind.OPERATOR, "+")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.text = "-"

    def test_equality(self):
        self.assertEqual(Token(TokenKind.NUMBER, "1"), Token(TokenKind.NUMBER, "1"))
        self.assertNotEqual(Token(TokenKind.NUMBER, "1"), Token(TokenKind.INVALID, "1"))

    def test_from_text(self):
        cases = {
            "42": TokenKind.NUMBER,
            "-3.5": TokenKind.NUMBER,
            ".5": TokenKind.NUMBER,
            "^": TokenKind.OPERATOR,
            "-": TokenKind.OPERATOR,
            "(": TokenKind.LEFT_PAREN_ROUND,
            ")": TokenKind.RIGHT_PAREN_ROUND,
            "[": TokenKind.LEFT_PAREN_SQUARE,
            "]": TokenKind.RIGHT_PAREN_SQUARE,
            "x": TokenKind.INVALID,
            "1e5": TokenKind.INVALID,
            "--1": TokenKind.INVALID,
        }
        for text, kind in cases.items():
            with self.subTest(text=text):
                token = Token.from_text(text)
                self.assertEqual(token.kind, kind)
                self.assertEqual(token.text, text)

    def test_bracket_predicates(self):
        self.assertTrue(Token.from_text("[").is_left_bracket)
        self.assertTrue(Token.from_text(")").is_right_bracket)
        self.assertFalse(Token.from_text("+").is_left_bracket)


class TestOperatorTable(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(get_precedence("+"), 1)
        self.assertEqual(get_precedence("-"), 1)
        self.assertEqual(get_precedence("*"), 2)
        self.assertEqual(get_precedence("/"), 2)
        self.assertEqual(get_precedence("^"), 3)
        self.assertEqual(get_precedence("%"), 0)

    def test_associativity(self):
        self.assertFalse(is_left_associative("^"))
        for op in "+-*/":
            self.assertTrue(is_left_associative(op))

    def test_table_is_read_only(self):
        from rpnexpr import PRECEDENCE

        with self.assertRaises(TypeError):
            PRECEDENCE["%"] = 2


class TestBracketFamily(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(bracket_family(TokenKind.LEFT_PAREN_ROUND), ROUND)
        self.assertIs(bracket_family(TokenKind.RIGHT_PAREN_ROUND), ROUND)
        self.assertIs(bracket_family(TokenKind.LEFT_PAREN_SQUARE), SQUARE)
        self.assertIs(bracket_family(TokenKind.RIGHT_PAREN_SQUARE), SQUARE)
        self.assertIsNone(bracket_family(TokenKind.NUMBER))

    def test_characters(self):
        self.assertEqual((ROUND.open, ROUND.close), ("(", ")"))
        self.assertEqual((SQUARE.open, SQUARE.close), ("[", "]"))


if __name__ == "__main__":
    unittest.main()
