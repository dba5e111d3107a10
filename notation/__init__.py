"""Infix/postfix notation converter and evaluator."""

from .converter import convert_infix_to_postfix, convert_postfix_to_infix
from .errors import ErrorKind, NotationError
from .evaluator import evaluate_infix_expression, evaluate_postfix_expression, operate

__all__ = [
    'convert_infix_to_postfix',
    'convert_postfix_to_infix',
    'evaluate_infix_expression',
    'evaluate_postfix_expression',
    'operate',
    'ErrorKind',
    'NotationError',
]
