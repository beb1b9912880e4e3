"""Core utilities package"""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    CalcError,
    LexError,
    CalcSyntaxError,
    MismatchedParenthesisError,
    ParseError,
    EvalError,
    EvalErrorKind,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "CalcError",
    "LexError",
    "CalcSyntaxError",
    "MismatchedParenthesisError",
    "ParseError",
    "EvalError",
    "EvalErrorKind",
]
