"""
rpncalc

Evaluates arithmetic expressions by tokenizing them, converting the tokens
to postfix order with the shunting yard algorithm and reducing the postfix
sequence on a value stack.
"""

from .core.errors import (
    CalcError,
    CalcSyntaxError,
    EvalError,
    EvalErrorKind,
    LexError,
    MismatchedParenthesisError,
    ParseError,
)
from .pipeline import (
    ErrorInfo,
    Evaluation,
    EvaluationResult,
    calculate,
    run,
    to_error_info,
    try_calculate,
)

__version__ = "1.0.0"

__all__ = [
    "CalcError",
    "CalcSyntaxError",
    "EvalError",
    "EvalErrorKind",
    "LexError",
    "MismatchedParenthesisError",
    "ParseError",
    "ErrorInfo",
    "Evaluation",
    "EvaluationResult",
    "calculate",
    "run",
    "to_error_info",
    "try_calculate",
]
