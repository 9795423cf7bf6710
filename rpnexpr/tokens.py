from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from .utils import OPERATORS, is_token_numeric


class TokenKind(StrEnum):
    """
    Kind of a lexical token.

    Attributes:
        NUMBER: Decimal literal, optionally signed (`42`, `-3.5`).
        OPERATOR: One of `+ - * / ^`.
        LEFT_PAREN_ROUND: `(`
        LEFT_PAREN_SQUARE: `[`
        RIGHT_PAREN_ROUND: `)`
        RIGHT_PAREN_SQUARE: `]`
        INVALID: Lexical anomaly. The text holds a diagnostic instead of source text.
    """

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN_ROUND = "left_paren_round"
    LEFT_PAREN_SQUARE = "left_paren_square"
    RIGHT_PAREN_ROUND = "right_paren_round"
    RIGHT_PAREN_SQUARE = "right_paren_square"
    INVALID = "invalid"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text

    @property
    def is_left_bracket(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN_ROUND, TokenKind.LEFT_PAREN_SQUARE)

    @property
    def is_right_bracket(self) -> bool:
        return self.kind in (TokenKind.RIGHT_PAREN_ROUND, TokenKind.RIGHT_PAREN_SQUARE)

    @classmethod
    def from_text(cls, text: str) -> "Token":
        """
        Classify a bare token string.

        Args:
            text: A single token, e.g. `"-3.5"`, `"*"` or `"["`.

        Returns:
            The matching token. Anything unrecognised becomes an `INVALID` token keeping `text` as is.
        """
        if is_token_numeric(text):
            return cls(TokenKind.NUMBER, text)
        if text in OPERATORS:
            return cls(TokenKind.OPERATOR, text)
        bracket = bracket_token(text)
        if bracket is not None:
            return bracket
        return cls(TokenKind.INVALID, text)


@dataclass(frozen=True)
class BracketFamily:
    """One pair of matching brackets and the token kinds of its two halves."""

    name: str
    open: str
    close: str
    left: TokenKind
    right: TokenKind


ROUND = BracketFamily(
    "round", "(", ")", TokenKind.LEFT_PAREN_ROUND, TokenKind.RIGHT_PAREN_ROUND
)
SQUARE = BracketFamily(
    "square", "[", "]", TokenKind.LEFT_PAREN_SQUARE, TokenKind.RIGHT_PAREN_SQUARE
)
BRACKET_FAMILIES = (ROUND, SQUARE)

_FAMILY_BY_KIND = {
    kind: family for family in BRACKET_FAMILIES for kind in (family.left, family.right)
}
_FAMILY_BY_CHAR = {
    char: family for family in BRACKET_FAMILIES for char in (family.open, family.close)
}


def bracket_family(kind: TokenKind) -> Optional[BracketFamily]:
    """Family of a bracket kind, `None` for non-bracket kinds."""
    return _FAMILY_BY_KIND.get(kind)


def bracket_token(char: str) -> Optional[Token]:
    """Token for a single bracket character, `None` if `char` is not a bracket."""
    family = _FAMILY_BY_CHAR.get(char)
    if family is None:
        return None
    return Token(family.left if char == family.open else family.right, char)
