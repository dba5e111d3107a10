# converter.py
"""
Infix <-> postfix conversion.

Infix to postfix is a shunting-yard pass over one operator stack:

  * operands go straight to the output
  * '^' is always pushed
  * '+' and '-' pop everything down to the nearest open bracket, then push
  * '*' and '/' pop any '^', then any '*' or '/', then push
  * open brackets are pushed; a close bracket pops down to its open bracket
  * whatever is left on the stack is popped at the end

Postfix to infix keeps a stack of partial expressions. Sums and differences
are wrapped in parentheses, products, quotients and powers are not. That means
"8 4 2 / /" renders as "8 / 4 / 2", which does not read back as the same value.
"""

import logging
from typing import List, Optional

from .containers import Queue, Stack
from .errors import ErrorKind, NotationError, stack_errors
from .tokenizer import CLOSE_BRACKET, OPEN_BRACKET, OPERATOR, OPERATORS, Token, tokenize
from .validator import validate_infix, validate_postfix

logger = logging.getLogger(__name__)


def _is_open_bracket(token: Token) -> bool:
    return token.type == OPEN_BRACKET


def _pop_to_output(operators: Stack[Token], output: Queue[str]) -> None:
    output.enqueue(operators.pop().value)


def _check_arity(tokens: List[str]) -> None:
    """Make sure a postfix token list reduces to exactly one value."""
    depth = 0
    for value in tokens:
        if value in OPERATORS:
            if depth < 2:
                raise NotationError(ErrorKind.STACK_UNDERFLOW)
            depth -= 1
        else:
            depth += 1
    if depth > 1:
        raise NotationError(ErrorKind.RESIDUAL_OPERANDS)
    if depth == 0:
        raise NotationError(ErrorKind.STACK_UNDERFLOW)


def convert_infix_to_postfix(expr: str, max_stack_size: Optional[int] = None) -> str:
    """Convert an infix expression to space-delimited postfix.

    >>> convert_infix_to_postfix("2+3*4")
    '2 3 4 * +'

    Raises NotationError if expr is not well-formed infix.
    """
    validate_infix(expr)
    tokens = tokenize(expr)

    operators: Stack[Token] = Stack(max_stack_size)
    output: Queue[str] = Queue()

    with stack_errors(max_stack_size):
        for token in tokens:
            if token.is_operand:
                output.enqueue(token.value)
            elif token.type == OPERATOR:
                if token.value in ('+', '-'):
                    while not operators.is_empty() and not _is_open_bracket(operators.peek()):
                        _pop_to_output(operators, output)
                elif token.value in ('*', '/'):
                    while not operators.is_empty() and operators.peek().value == '^':
                        _pop_to_output(operators, output)
                    while not operators.is_empty() and operators.peek().value in ('*', '/'):
                        _pop_to_output(operators, output)
                operators.push(token)
            elif token.type == OPEN_BRACKET:
                operators.push(token)
            elif token.type == CLOSE_BRACKET:
                while not _is_open_bracket(operators.peek()):
                    _pop_to_output(operators, output)
                operators.pop()
        while not operators.is_empty():
            _pop_to_output(operators, output)

    postfix = [output.dequeue() for _ in range(output.size())]
    _check_arity(postfix)
    result = ' '.join(postfix)
    logger.debug(f"Converted infix {expr!r} to postfix {result!r}")
    return result


def convert_postfix_to_infix(expr: str, max_stack_size: Optional[int] = None) -> str:
    """Convert a postfix expression to infix.

    Sums and differences come back parenthesized, e.g. "2 3 + 4 *" becomes
    "(2 + 3) * 4". Raises NotationError if expr is not well-formed postfix.
    """
    validate_postfix(expr)
    tokens = tokenize(expr)

    operands: Stack[str] = Stack(max_stack_size)

    with stack_errors(max_stack_size):
        for token in tokens:
            if token.is_operand:
                operands.push(token.value)
                continue
            val1 = operands.pop()
            val2 = operands.pop()
            if token.value in ('+', '-'):
                operands.push(f"({val2} {token.value} {val1})")
            else:
                operands.push(f"{val2} {token.value} {val1}")

        if operands.size() > 1:
            raise NotationError(ErrorKind.RESIDUAL_OPERANDS)
        result = operands.pop()

    logger.debug(f"Converted postfix {expr!r} to infix {result!r}")
    return result
