import logging
from typing import Iterable, Union

from .errors import ExprError
from .infix2postfix import convert_to_postfix
from .lexer import tokenize
from .tokens import Token, TokenKind
from .utils import OPERATORS

logger = logging.getLogger(__name__)


def verify_infix_expr(expression: str) -> bool:
    """
    Verify if an infix expression lexes, converts to postfix and leaves exactly one value.
    """
    try:
        postfix = convert_to_postfix(tokenize(expression))
    except ExprError as e:
        logger.info(f"verify_infix_expr: {e}")
        return False
    return verify_postfix_expr(postfix)


def verify_postfix_expr(tokens: Iterable[Union[Token, str]]) -> bool:
    """
    Verify if a postfix sequence is well formed, without computing it.

    Division by zero and math domain errors are only found by `evaluate`.
    """
    try:
        stack_size = 0

        for i, item in enumerate(tokens):
            token = item if isinstance(item, Token) else Token.from_text(item)

            if token.kind == TokenKind.NUMBER:
                stack_size += 1
                continue

            if token.kind == TokenKind.OPERATOR and token.text in OPERATORS:
                if stack_size < 2:
                    raise ValueError(
                        f"{i}th token '{token.text}' requires 2 arguments, but stack has {stack_size}."
                    )
                stack_size -= 1
                continue

            raise ValueError(f"{i}th token '{token.text}' is unknown.")

        if stack_size != 1:
            raise ValueError(
                f"Expression left {stack_size} items on the stack, but 1 was expected."
            )
        return True
    except ValueError as e:
        logger.info(f"verify_postfix_expr: {e}")
        return False
