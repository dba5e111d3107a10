# tokenizer.py
"""
Tokenizer for infix and postfix expressions.

Numbers may span several characters (digits plus at most one decimal point).
Everything else is a single character: an operator, a bracket or a one-letter
variable. Whitespace separates tokens and is otherwise dropped, which is how
postfix input keeps "23 4 +" apart from "234 +".
"""

from dataclasses import dataclass
from typing import List

from .errors import ErrorKind, NotationError

# Token types
NUMBER = 'NUMBER'
VARIABLE = 'VARIABLE'
OPERATOR = 'OPERATOR'
OPEN_BRACKET = 'OPEN_BRACKET'
CLOSE_BRACKET = 'CLOSE_BRACKET'

OPERATORS = frozenset('+-*/^')
OPEN_BRACKETS = frozenset('({[')
CLOSE_BRACKETS = frozenset(')}]')

# Bracket character -> bracket kind; an open and a close bracket match when their kinds agree.
BRACKET_KINDS = {
    '(': 'paren', ')': 'paren',
    '{': 'brace', '}': 'brace',
    '[': 'bracket', ']': 'bracket',
}


@dataclass(frozen=True)
class Token:
    """A single token with its literal text and character position."""
    type: str
    value: str
    pos: int

    @property
    def number(self) -> float:
        """Decimal value of a NUMBER token."""
        if self.type != NUMBER:
            raise TypeError(f"{self.type} token has no numeric value")
        return float(self.value)

    @property
    def kind(self) -> str:
        """Bracket kind (paren, brace or bracket) of a bracket token."""
        if self.type not in (OPEN_BRACKET, CLOSE_BRACKET):
            raise TypeError(f"{self.type} token has no bracket kind")
        return BRACKET_KINDS[self.value]

    @property
    def is_operand(self) -> bool:
        return self.type in (NUMBER, VARIABLE)

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


class Lexer:
    """Turns an expression string into a list of tokens.

    Raises NotationError with MALFORMED_NUMBER as soon as a numeric literal
    picks up a second decimal point, and INVALID_CHARACTER for characters
    that belong to no token.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _advance(self) -> None:
        self.pos += 1

    def _read_number(self) -> Token:
        start = self.pos
        has_dot = False
        while True:
            ch = self._peek()
            if ch.isdecimal():
                self._advance()
            elif ch == '.':
                if has_dot:
                    raise NotationError(
                        ErrorKind.MALFORMED_NUMBER,
                        f"Malformed number at pos {self.pos}: "
                        f"{self.text[start:self.pos + 1]!r} has more than one decimal point",
                    )
                has_dot = True
                self._advance()
            else:
                break
        raw = self.text[start:self.pos]
        if raw == '.':
            raise NotationError(ErrorKind.MALFORMED_NUMBER, f"Malformed number at pos {start}: '.' has no digits")
        return Token(NUMBER, raw, start)

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while True:
            ch = self._peek()
            if ch == '':
                break
            if ch.isspace():
                self._advance()
                continue
            if ch.isdecimal() or ch == '.':
                tokens.append(self._read_number())
                continue
            if ch in OPERATORS:
                tokens.append(Token(OPERATOR, ch, self.pos))
            elif ch in OPEN_BRACKETS:
                tokens.append(Token(OPEN_BRACKET, ch, self.pos))
            elif ch in CLOSE_BRACKETS:
                tokens.append(Token(CLOSE_BRACKET, ch, self.pos))
            elif ch.isalpha():
                tokens.append(Token(VARIABLE, ch, self.pos))
            else:
                raise NotationError(ErrorKind.INVALID_CHARACTER, f"Unknown character at pos {self.pos}: {ch!r}")
            self._advance()
        return tokens


def tokenize(expr: str) -> List[Token]:
    """Tokenize expr into a new list of tokens."""
    return Lexer(expr).tokenize()
