# errors.py
"""
Error types for the notation converter.

Every failure the public functions can report is a NotationError. The kind
attribute tells callers which check rejected the expression; the message is
meant for humans. Container errors are internal and never escape the
converter or evaluator.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of notation failures."""
    INVALID_CHARACTER = 'InvalidCharacter'
    UNBALANCED_DELIMITERS = 'UnbalancedDelimiters'
    SEQUENTIAL_OPERATORS = 'SequentialOperators'
    MALFORMED_NUMBER = 'MalformedNumber'
    STACK_UNDERFLOW = 'StackUnderflow'
    STACK_OVERFLOW = 'StackOverflow'
    RESIDUAL_OPERANDS = 'ResidualOperands'
    UNKNOWN_OPERATOR = 'UnknownOperator'
    UNDEFINED_VARIABLE = 'UndefinedVariable'


_DEFAULT_MESSAGES = {
    ErrorKind.INVALID_CHARACTER: (
        "The expression may only contain numbers/letters, brackets/parens, and +, -, *, /, ^"
    ),
    ErrorKind.UNBALANCED_DELIMITERS: "The expression has unbalanced brackets or parentheses",
    ErrorKind.SEQUENTIAL_OPERATORS: "The expression has an operator with no operand after it",
    ErrorKind.MALFORMED_NUMBER: "A number in the expression has more than one decimal point",
    ErrorKind.STACK_UNDERFLOW: "An operator in the expression is missing an operand",
    ErrorKind.STACK_OVERFLOW: "The expression is nested deeper than the stack limit allows",
    ErrorKind.RESIDUAL_OPERANDS: "The expression has operands that no operator consumes",
    ErrorKind.UNKNOWN_OPERATOR: "Unknown operator",
    ErrorKind.UNDEFINED_VARIABLE: "The expression uses a variable with no value",
}


class NotationError(Exception):
    """Raised when an expression can not be converted or evaluated."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"NotationError({self.kind.value}, {self.message!r})"


# --------------------------
# Container errors
# --------------------------

class ContainerError(Exception):
    """Base class for stack and queue capacity errors."""
    pass

class StackUnderflowError(ContainerError):
    """Raised when popping or peeking an empty stack."""
    pass

class StackOverflowError(ContainerError):
    """Raised when pushing onto a full stack."""
    pass

class QueueUnderflowError(ContainerError):
    """Raised when dequeuing from an empty queue."""
    pass

class QueueOverflowError(ContainerError):
    """Raised when enqueuing onto a full queue."""
    pass


@contextmanager
def stack_errors(max_size: Optional[int] = None):
    """Re-raise stack underflow/overflow inside the block as NotationError."""
    try:
        yield
    except StackUnderflowError as e:
        raise NotationError(ErrorKind.STACK_UNDERFLOW) from e
    except StackOverflowError as e:
        raise NotationError(
            ErrorKind.STACK_OVERFLOW,
            f"The expression needs more than {max_size} stack entries",
        ) from e
