import math
import operator
from typing import Callable, Iterable, Union

from .errors import EvaluationError, InternalInvariantError
from .stack import Stack
from .tokens import Token, TokenKind
from .utils import is_token_numeric

_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "^": math.pow,
}


def evaluate(tokens: Iterable[Union[Token, str]]) -> float:
    """
    Evaluate a postfix (RPN) token sequence.

    Args:
        tokens: Postfix tokens, e.g. the output of `convert_to_postfix`. Plain strings such as
            `["3", "4", "+"]` are accepted and classified with `Token.from_text`.

    Returns:
        The value left on the stack.

    Raises:
        EvaluationError: On a malformed literal or unexpected token, an operator with fewer than two operands,
            division by zero, a math domain error in `^`, or when anything but exactly one value remains.
    """
    stack: Stack[float] = Stack()

    for item in tokens:
        token = item if isinstance(item, Token) else Token.from_text(item)
        kind = token.kind

        if kind == TokenKind.NUMBER:
            if not is_token_numeric(token.text):
                raise EvaluationError(f"Invalid token in expression: {token.text}", token)
            stack.push(float(token.text))

        elif kind == TokenKind.OPERATOR:
            op = token.text
            if op not in _ARITHMETIC:
                raise EvaluationError(f"Invalid token in expression: {op}", token)
            if stack.size() < 2:
                raise EvaluationError(f"Too few operands for operator: {op}", token)

            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.push(_apply(token, operand1, operand2))

        elif kind in (
            TokenKind.LEFT_PAREN_ROUND,
            TokenKind.LEFT_PAREN_SQUARE,
            TokenKind.RIGHT_PAREN_ROUND,
            TokenKind.RIGHT_PAREN_SQUARE,
            TokenKind.INVALID,
        ):
            raise EvaluationError(f"Invalid token in expression: {token.text}", token)

        else:
            raise InternalInvariantError(f"Unhandled token kind: {kind}")

    if stack.size() != 1:
        raise EvaluationError(
            f"Invalid expression: {stack.size()} elements remain on the stack, expected 1"
        )
    return stack.pop()


def _apply(token: Token, operand1: float, operand2: float) -> float:
    op = token.text
    if op == "/" and operand2 == 0:
        raise EvaluationError("Division by zero", token)
    try:
        return _ARITHMETIC[op](operand1, operand2)
    except (ValueError, OverflowError, ZeroDivisionError) as e:
        raise EvaluationError(f"Math error for operator: {op}", token, e)
