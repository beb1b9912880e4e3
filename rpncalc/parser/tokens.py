"""
Token model for arithmetic expressions.

A token is an immutable tagged value: a number, one of the six binary
operators, the unary minus marker, or a parenthesis. Tokens remember the
source position they came from, for error reporting only.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

OPERATORS = ("+", "-", "*", "/", "%", "^")


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    OPERATOR = auto()
    UNARY_MINUS = auto()
    LPAREN = auto()  # (
    RPAREN = auto()  # )


def format_number(value: float) -> str:
    """Render a number the way the calculator prints results (``%g``)."""
    return f"{value:g}"


@dataclass(frozen=True)
class Token:
    """
    Represents a single token in the expression.

    Attributes:
        type: The token type
        value: Numeric value (NUMBER only)
        op: Operator symbol (OPERATOR only)
        pos: Position in the source string, not part of equality
    """

    type: TokenType
    value: float = 0.0
    op: str = ""
    pos: int = field(default=-1, compare=False)

    @classmethod
    def number(cls, value: float, pos: int = -1) -> "Token":
        return cls(TokenType.NUMBER, value=float(value), pos=pos)

    @classmethod
    def operator(cls, op: str, pos: int = -1) -> "Token":
        return cls(TokenType.OPERATOR, op=op, pos=pos)

    @classmethod
    def unary_minus(cls, pos: int = -1) -> "Token":
        return cls(TokenType.UNARY_MINUS, pos=pos)

    @classmethod
    def lparen(cls, pos: int = -1) -> "Token":
        return cls(TokenType.LPAREN, pos=pos)

    @classmethod
    def rparen(cls, pos: int = -1) -> "Token":
        return cls(TokenType.RPAREN, pos=pos)

    @property
    def is_number(self) -> bool:
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return format_number(self.value)
        if self.type is TokenType.OPERATOR:
            return self.op
        if self.type is TokenType.UNARY_MINUS:
            return "-"
        if self.type is TokenType.LPAREN:
            return "("
        return ")"

    def __repr__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r}, pos={self.pos})"
        if self.type is TokenType.OPERATOR:
            return f"Token(OPERATOR, '{self.op}', pos={self.pos})"
        return f"Token({self.type.name}, pos={self.pos})"


def render_tokens(tokens: Iterable[Token]) -> str:
    """Join tokens by their rendered form, e.g. ``2 3 4 + *``."""
    return " ".join(str(token) for token in tokens)
