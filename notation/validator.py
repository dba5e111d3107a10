# validator.py
"""
Up-front checks run before any conversion or evaluation.

The predicate functions answer a single question each and can be combined
freely. validate_infix and validate_postfix run the relevant predicates in
order and raise NotationError with the kind of the first check that failed.
"""

import logging

from .containers import Stack
from .errors import ErrorKind, NotationError
from .tokenizer import (
    BRACKET_KINDS,
    CLOSE_BRACKET,
    CLOSE_BRACKETS,
    OPEN_BRACKET,
    OPEN_BRACKETS,
    OPERATOR,
    OPERATORS,
    tokenize,
)

logger = logging.getLogger(__name__)


def _is_operand_char(ch: str) -> bool:
    return ch.isspace() or ch == '.' or ch.isdecimal() or ch.isalpha()


def has_valid_characters(expr: str) -> bool:
    """True if expr only holds whitespace, numbers, letters, operators and brackets."""
    for ch in expr:
        if _is_operand_char(ch) or ch in OPERATORS or ch in OPEN_BRACKETS or ch in CLOSE_BRACKETS:
            continue
        return False
    return True


def has_valid_postfix_characters(expr: str) -> bool:
    """Like has_valid_characters, but brackets are rejected and expr must not be blank."""
    found = False
    for ch in expr:
        if ch.isspace():
            continue
        if _is_operand_char(ch) or ch in OPERATORS:
            found = True
            continue
        return False
    return found


def is_balanced(expr: str) -> bool:
    """True if every bracket is closed by one of the same kind, correctly nested.

    Does not look at any other character.
    """
    open_brackets: Stack[str] = Stack()
    for ch in expr:
        if ch in OPEN_BRACKETS:
            open_brackets.push(ch)
        elif ch in CLOSE_BRACKETS:
            if open_brackets.is_empty():
                return False
            if BRACKET_KINDS[open_brackets.pop()] != BRACKET_KINDS[ch]:
                return False
    return open_brackets.is_empty()


def has_sequential_operators(expr: str) -> bool:
    """True if an operator or open bracket is directly followed by an operator or close bracket.

    Catches infix input like "5++4", "5+)" or "()". Raises NotationError when
    expr can not be tokenized.
    """
    tokens = tokenize(expr)
    for current, following in zip(tokens, tokens[1:]):
        if current.type in (OPERATOR, OPEN_BRACKET) and following.type in (OPERATOR, CLOSE_BRACKET):
            return True
    return False


def validate_infix(expr: str) -> None:
    """Raise NotationError unless expr passes every infix check."""
    if not expr.strip():
        raise NotationError(ErrorKind.INVALID_CHARACTER, "The expression is empty")
    if not has_valid_characters(expr):
        logger.info(f"Rejected infix expression with invalid characters: {expr!r}")
        raise NotationError(ErrorKind.INVALID_CHARACTER)
    if not is_balanced(expr):
        logger.info(f"Rejected unbalanced infix expression: {expr!r}")
        raise NotationError(ErrorKind.UNBALANCED_DELIMITERS)
    if has_sequential_operators(expr):
        logger.info(f"Rejected infix expression with sequential operators: {expr!r}")
        raise NotationError(ErrorKind.SEQUENTIAL_OPERATORS)


def validate_postfix(expr: str) -> None:
    """Raise NotationError unless expr is acceptable postfix input."""
    if has_valid_postfix_characters(expr):
        return
    logger.info(f"Rejected postfix expression: {expr!r}")
    if not expr.strip():
        raise NotationError(ErrorKind.INVALID_CHARACTER, "The expression is empty")
    if any(ch in OPEN_BRACKETS or ch in CLOSE_BRACKETS for ch in expr):
        raise NotationError(
            ErrorKind.INVALID_CHARACTER,
            "Postfix expressions may not contain brackets or parentheses",
        )
    raise NotationError(
        ErrorKind.INVALID_CHARACTER,
        "The expression may only contain numbers/letters, and +, -, *, /, ^",
    )
