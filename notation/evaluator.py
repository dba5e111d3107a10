# evaluator.py
"""
Numeric evaluation of infix and postfix expressions.

Arithmetic is done on numpy float64 values with floating point warnings
silenced, so dividing by zero gives inf or nan instead of raising, the same
way overflowing a power gives inf.
"""

import logging
from typing import Mapping, Optional

import numpy as np

from .containers import Stack
from .errors import ErrorKind, NotationError, stack_errors
from .tokenizer import CLOSE_BRACKET, NUMBER, OPEN_BRACKET, OPERATOR, Token, tokenize
from .validator import validate_infix, validate_postfix

logger = logging.getLogger(__name__)


def operate(a: float, b: float, op: str) -> float:
    """Apply a binary operator to the top two operands of a stack.

    a is the operand pushed last (the top of the stack) and b the one beneath
    it, so in reading order b is the left-hand side:

        '+' -> a + b    '-' -> b - a    '*' -> a * b
        '/' -> b / a    '^' -> b ** a
    """
    x = np.float64(a)
    y = np.float64(b)
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        if op == '+':
            result = x + y
        elif op == '-':
            result = y - x
        elif op == '*':
            result = x * y
        elif op == '/':
            result = np.divide(y, x)
        elif op == '^':
            result = np.power(y, x)
        else:
            raise NotationError(ErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {op!r}")
    return float(result)


def _operand_value(token: Token, variables: Optional[Mapping[str, float]]) -> float:
    if token.type == NUMBER:
        return token.number
    if variables is None or token.value not in variables:
        raise NotationError(ErrorKind.UNDEFINED_VARIABLE, f"Undefined variable: {token.value}")
    return float(variables[token.value])


def _apply_top(operators: Stack[Token], operands: Stack[float]) -> None:
    """Pop one operator and two operands, push the result."""
    op = operators.pop().value
    val1 = operands.pop()
    val2 = operands.pop()
    operands.push(operate(val1, val2, op))


def evaluate_infix_expression(
    expr: str,
    variables: Optional[Mapping[str, float]] = None,
    max_stack_size: Optional[int] = None,
) -> float:
    """Evaluate an infix expression.

    Uses one stack for operators and open brackets and one for operand values,
    with the same precedence rules as convert_infix_to_postfix. Each time an
    operator would be written to postfix output it is applied instead.
    Variables are single letters looked up in variables.
    """
    validate_infix(expr)
    tokens = tokenize(expr)

    operators: Stack[Token] = Stack(max_stack_size)
    operands: Stack[float] = Stack(max_stack_size)

    with stack_errors(max_stack_size):
        for token in tokens:
            if token.is_operand:
                operands.push(_operand_value(token, variables))
            elif token.type == OPERATOR:
                if token.value in ('+', '-'):
                    while not operators.is_empty() and operators.peek().type != OPEN_BRACKET:
                        _apply_top(operators, operands)
                elif token.value in ('*', '/'):
                    while not operators.is_empty() and operators.peek().value == '^':
                        _apply_top(operators, operands)
                    while not operators.is_empty() and operators.peek().value in ('*', '/'):
                        _apply_top(operators, operands)
                operators.push(token)
            elif token.type == OPEN_BRACKET:
                operators.push(token)
            elif token.type == CLOSE_BRACKET:
                while operators.peek().type != OPEN_BRACKET:
                    _apply_top(operators, operands)
                operators.pop()
        while not operators.is_empty():
            _apply_top(operators, operands)

        if operands.size() > 1:
            raise NotationError(ErrorKind.RESIDUAL_OPERANDS)
        result = operands.pop()

    logger.debug(f"Evaluated infix {expr!r} = {result!r}")
    return result


def evaluate_postfix_expression(
    expr: str,
    variables: Optional[Mapping[str, float]] = None,
    max_stack_size: Optional[int] = None,
) -> float:
    """Evaluate a postfix expression with a single operand stack."""
    validate_postfix(expr)
    tokens = tokenize(expr)

    operands: Stack[float] = Stack(max_stack_size)

    with stack_errors(max_stack_size):
        for token in tokens:
            if token.is_operand:
                operands.push(_operand_value(token, variables))
                continue
            this_val = operands.pop()
            next_val = operands.pop()
            operands.push(operate(this_val, next_val, token.value))

        if operands.size() > 1:
            raise NotationError(ErrorKind.RESIDUAL_OPERANDS)
        result = operands.pop()

    logger.debug(f"Evaluated postfix {expr!r} = {result!r}")
    return result
