import math
from typing import Iterable, Union

from .stack import Stack
from .tokens import Token, TokenKind
from .utils import PRECEDENCE, is_left_associative


def postfix2infix(tokens: Iterable[Union[Token, str]]) -> str:
    """
    Convert a postfix token sequence back to infix code.

    Only the parentheses needed to keep the grouping are emitted, so converting the result to postfix again
    gives back the same token sequence.

    Args:
        tokens: Postfix tokens, or plain token strings.

    Returns:
        Infix code, e.g. `"2 ^ (3 + 1)"` for `2 3 1 + ^`.

    Raises:
        ValueError: If an error was found in the input sequence.
    """
    # Each entry holds the rendered operand and the precedence of its outermost operator.
    stack: Stack[tuple[str, float]] = Stack()

    for i, item in enumerate(tokens):
        token = item if isinstance(item, Token) else Token.from_text(item)

        if token.kind == TokenKind.NUMBER:
            stack.push((token.text, math.inf))
            continue

        if token.kind != TokenKind.OPERATOR or token.text not in PRECEDENCE:
            raise ValueError(f"postfix2infix: {i}th token '{token.text}' is unknown.")

        if stack.size() < 2:
            raise ValueError(
                f"postfix2infix: Stack Underflow at {i}th token '{token.text}'."
            )

        op = token.text
        precedence = PRECEDENCE[op]
        right, right_precedence = stack.pop()
        left, left_precedence = stack.pop()

        if left_precedence < precedence or (
            left_precedence == precedence and not is_left_associative(op)
        ):
            left = f"({left})"
        if right_precedence < precedence or (
            right_precedence == precedence and is_left_associative(op)
        ):
            right = f"({right})"

        stack.push((f"{left} {op} {right}", precedence))

    if stack.size() != 1:
        raise ValueError(
            f"postfix2infix: Expression left {stack.size()} items on the stack, but 1 was expected."
        )
    return stack.pop()[0]
