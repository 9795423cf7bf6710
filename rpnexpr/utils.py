import regex as re
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable

PRECEDENCE = MappingProxyType(
    {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "^": 3,
    }
)

OPERATORS = frozenset(PRECEDENCE)
RIGHT_ASSOCIATIVE = frozenset({"^"})

_NUMBER_PATTERN = re.compile(r"^-?([0-9]+\.?[0-9]*|\.[0-9]+)$")
_WHITESPACE_PATTERN = re.compile(r"\s")


def get_precedence(operator: str) -> int:
    """Binding strength of an operator symbol, 0 if the symbol is unknown."""
    return PRECEDENCE.get(operator, 0)


def is_left_associative(operator: str) -> bool:
    return operator not in RIGHT_ASSOCIATIVE


@lru_cache
def is_token_numeric(text: str) -> bool:
    """Check if a string is a decimal literal with an optional leading '-'."""
    return _NUMBER_PATTERN.match(text) is not None


def is_whitespace(char: str) -> bool:
    return _WHITESPACE_PATTERN.match(char) is not None


def format_tokens(tokens: Iterable) -> str:
    """Join token texts with single spaces, e.g. `3 4 2 * +`."""
    return " ".join(str(token) for token in tokens)
