from .tokens import Token, TokenKind, bracket_token
from .utils import OPERATORS, is_token_numeric, is_whitespace

_INVALID_NUMBER = "Invalid number"
_DIGITS = frozenset("0123456789")


def tokenize(expression: str) -> list[Token]:
    """
    Split an infix expression into tokens.

    A `-` is read as the sign of a number when it starts the expression or follows an operator or an opening bracket.
    Anywhere else it is the subtraction operator.

    Args:
        expression: Infix expression, e.g. `"3 + 4 * 2 / ( 1 - 5 )"`.

    Returns:
        Tokens in input order. Malformed numbers and unknown characters are returned as `INVALID` tokens
        so that scanning can go on to the end of the input.
    """
    tokens: list[Token] = []
    length = len(expression)
    i = 0

    while i < length:
        char = expression[i]

        if is_whitespace(char):
            i += 1
            continue

        if char in _DIGITS or char == "." or (char == "-" and _sign_allowed(tokens)):
            start = i
            if char == "-":
                i += 1
                if i >= length:
                    tokens.append(Token(TokenKind.INVALID, _INVALID_NUMBER))
                    break

            has_decimal = False
            while i < length:
                current = expression[i]
                if current in _DIGITS:
                    i += 1
                elif current == "." and not has_decimal:
                    has_decimal = True
                    i += 1
                else:
                    break

            literal = expression[start:i]
            if is_token_numeric(literal):
                tokens.append(Token(TokenKind.NUMBER, literal))
            else:
                tokens.append(Token(TokenKind.INVALID, _INVALID_NUMBER))
            continue

        if char in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, char))
        else:
            bracket = bracket_token(char)
            if bracket is not None:
                tokens.append(bracket)
            else:
                tokens.append(Token(TokenKind.INVALID, f"Invalid char: {char}"))
        i += 1

    return tokens


def _sign_allowed(tokens: list[Token]) -> bool:
    if not tokens:
        return True
    previous = tokens[-1]
    return previous.kind == TokenKind.OPERATOR or previous.is_left_bracket
