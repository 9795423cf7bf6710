"""
Error type definitions for the expression pipeline.
"""

from typing import Optional

from .tokens import Token


class ExprError(Exception):
    """Base error type for malformed expressions"""

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        cause: Optional[Exception] = None,
    ):
        self.message = message
        self.token = token
        self.cause = cause
        super().__init__(f"{message}" + (f" Caused by: {cause}" if cause else ""))


class SyntaxError(ExprError):
    """Bracket nesting or invalid token found while converting infix to postfix"""

    pass


class EvaluationError(ExprError):
    """Postfix sequence could not be reduced to a single number"""

    pass


class InternalInvariantError(RuntimeError):
    """A state the pipeline itself must never produce. Indicates a bug, not bad input."""

    pass
