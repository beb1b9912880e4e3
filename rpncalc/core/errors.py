"""
Calculator exceptions.

Every stage of the pipeline raises a subclass of CalcError. The hierarchy
mirrors the stages: LexError for the lexer, CalcSyntaxError for grouping
problems found while restructuring, EvalError for arithmetic.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..parser.tokens import Token


class CalcError(Exception):
    """Base exception for calculator errors"""

    kind = "calc"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class LexError(CalcError):
    """Raised when the input text cannot be split into tokens"""

    kind = "lex"

    def __init__(self, message: str, position: int, char: str = ""):
        self.reason = message
        self.position = position
        self.char = char
        text = f"{message} at position {position}"
        if char:
            text += f": '{char}'"
        super().__init__(
            message=text,
            details={"position": position, "char": char},
        )


class CalcSyntaxError(CalcError):
    """Raised when the token sequence is structurally invalid"""

    kind = "syntax"


class MismatchedParenthesisError(CalcSyntaxError):
    """Raised when a '(' has no matching ')' or the other way round"""

    def __init__(self, message: str = "Mismatched parenthesis"):
        super().__init__(message)


class ParseError(CalcSyntaxError):
    """Raised by the tree parser on an unexpected token."""

    def __init__(self, message: str, token: "Token | None" = None):
        self.token = token
        if token is None:
            super().__init__(f"{message} at end of expression")
        else:
            super().__init__(
                f"{message} at position {token.pos}: '{token}'",
                details={"position": token.pos},
            )


class EvalErrorKind(Enum):
    """Reasons an evaluation can fail."""

    INVALID_EXPRESSION = "Invalid expression"
    DIVISION_BY_ZERO = "Division by zero"
    INVALID_OPERATOR = "Invalid operator"


class EvalError(CalcError):
    """Raised when a postfix sequence cannot be reduced to one number"""

    kind = "eval"

    def __init__(self, reason: EvalErrorKind, detail: Optional[str] = None):
        self.reason = reason
        message = reason.value if detail is None else f"{reason.value}: {detail}"
        super().__init__(message, details={"reason": reason.name})
