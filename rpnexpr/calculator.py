import logging

from .evaluator import evaluate
from .infix2postfix import convert_to_postfix
from .lexer import tokenize
from .utils import format_tokens

logger = logging.getLogger(__name__)


def calculate(expression: str) -> float:
    """
    Evaluate an infix expression.

    Args:
        expression: Infix expression using numbers, `+ - * / ^`, `(...)` and `[...]`.

    Returns:
        The result as a float.

    Raises:
        SyntaxError: If the expression failed to convert to postfix.
        EvaluationError: If the postfix form could not be evaluated.
    """
    tokens = tokenize(expression)
    logger.debug(f"calculate: tokens of {expression!r}: [{', '.join(map(str, tokens))}]")

    postfix = convert_to_postfix(tokens)
    logger.debug(f"calculate: postfix: {format_tokens(postfix)}")

    result = evaluate(postfix)
    logger.debug(f"calculate: {expression!r} = {result}")
    return result
