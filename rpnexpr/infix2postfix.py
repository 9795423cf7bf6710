from typing import Iterable

from .errors import InternalInvariantError, SyntaxError
from .lexer import tokenize
from .stack import Stack
from .tokens import BracketFamily, Token, TokenKind, bracket_family
from .utils import format_tokens, get_precedence, is_left_associative


def convert_to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """
    Convert infix tokens to postfix (RPN) order with the shunting-yard algorithm.

    `(...)` and `[...]` may be nested in any combination, but each closing bracket must match the most recent
    unclosed bracket of its own family.

    Args:
        tokens: Infix tokens, usually from `tokenize`.

    Returns:
        The `NUMBER` and `OPERATOR` tokens of the input in postfix order. Brackets are consumed.

    Raises:
        SyntaxError: On an unmatched or mismatched bracket, or on an `INVALID` token.
        InternalInvariantError: If a closing bracket ends up on the operator stack.
    """
    output: list[Token] = []
    operator_stack: Stack[Token] = Stack()

    for token in tokens:
        kind = token.kind

        if kind == TokenKind.NUMBER:
            output.append(token)

        elif kind == TokenKind.OPERATOR:
            o1 = token.text
            while not operator_stack.is_empty():
                top = operator_stack.peek()
                if top.kind != TokenKind.OPERATOR:
                    break
                p1 = get_precedence(o1)
                p2 = get_precedence(top.text)
                if p2 > p1 or (p2 == p1 and is_left_associative(o1)):
                    output.append(operator_stack.pop())
                else:
                    break
            operator_stack.push(token)

        elif kind in (TokenKind.LEFT_PAREN_ROUND, TokenKind.LEFT_PAREN_SQUARE):
            operator_stack.push(token)

        elif kind in (TokenKind.RIGHT_PAREN_ROUND, TokenKind.RIGHT_PAREN_SQUARE):
            _close_bracket(token, bracket_family(kind), operator_stack, output)

        elif kind == TokenKind.INVALID:
            raise SyntaxError(f"Invalid token encountered: {token.text}", token)

        else:
            raise InternalInvariantError(f"Unhandled token kind: {kind}")

    while not operator_stack.is_empty():
        token = operator_stack.pop()
        if token.is_left_bracket:
            family = bracket_family(token.kind)
            raise SyntaxError(
                f"Mismatched parentheses: Missing '{family.close}'", token
            )
        if token.is_right_bracket:
            raise InternalInvariantError(
                f"Closing bracket '{token.text}' found on the operator stack"
            )
        output.append(token)

    return output


def _close_bracket(
    token: Token,
    family: BracketFamily,
    operator_stack: Stack[Token],
    output: list[Token],
) -> None:
    while not operator_stack.is_empty() and not operator_stack.peek().is_left_bracket:
        output.append(operator_stack.pop())

    if operator_stack.is_empty():
        raise SyntaxError(f"Mismatched parentheses: Missing '{family.open}'", token)

    opener = bracket_family(operator_stack.peek().kind)
    if opener != family:
        raise SyntaxError(
            f"Mismatched parentheses: Expected '{opener.close}', found '{family.close}'",
            token,
        )
    operator_stack.pop()


def infix2postfix(expression: str) -> str:
    """
    Convert an infix expression string to a postfix expression string.

    Args:
        expression: Input infix expression.

    Returns:
        Postfix tokens separated by single spaces, e.g. `"3 4 2 * +"` for `"3 + 4 * 2"`.

    Raises:
        SyntaxError: If the expression failed to convert.
    """
    return format_tokens(convert_to_postfix(tokenize(expression)))
