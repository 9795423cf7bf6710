'''
Infix arithmetic expressions to postfix (RPN) conversion and evaluation.
'''

from .tokens import Token, TokenKind, BracketFamily, ROUND, SQUARE, bracket_family
from .lexer import tokenize
from .infix2postfix import convert_to_postfix, infix2postfix
from .postfix2infix import postfix2infix
from .evaluator import evaluate
from .calculator import calculate
from .verify import verify_infix_expr, verify_postfix_expr
from .errors import ExprError, SyntaxError, EvaluationError, InternalInvariantError
from .stack import Stack
from .utils import PRECEDENCE, RIGHT_ASSOCIATIVE, get_precedence, is_left_associative, format_tokens

__version__ = "0.1.0"

__all__ = [
    'Token',
    'TokenKind',
    'BracketFamily',
    'ROUND',
    'SQUARE',
    'bracket_family',
    'tokenize',
    'convert_to_postfix',
    'infix2postfix',
    'postfix2infix',
    'evaluate',
    'calculate',
    'verify_infix_expr',
    'verify_postfix_expr',
    'ExprError',
    'SyntaxError',
    'EvaluationError',
    'InternalInvariantError',
    'Stack',
    'PRECEDENCE',
    'RIGHT_ASSOCIATIVE',
    'get_precedence',
    'is_left_associative',
    'format_tokens',
]
