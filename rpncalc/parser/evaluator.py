"""
Postfix evaluator.

Walks a postfix token sequence with a value stack. Arithmetic that is
undefined for the calculator raises EvalError instead of producing a
Python exception or an infinity:
- ``/`` by a value within epsilon of zero
- ``%`` by a value that truncates to zero
- ``^`` with a base within epsilon of zero and an exponent <= epsilon
"""

import math
import operator
from typing import Callable, Iterable

from ..core.errors import EvalError, EvalErrorKind
from .context import Context
from .tokens import Token, TokenType


def _modulo(left: float, right: float, context: Context) -> float:
    # Integer remainder with truncating division: the sign follows the dividend.
    if not (math.isfinite(left) and math.isfinite(right)):
        raise EvalError(EvalErrorKind.INVALID_EXPRESSION, "modulo of a non-finite value")
    dividend, divisor = math.trunc(left), math.trunc(right)
    if divisor == 0:
        raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
    remainder = abs(dividend) % abs(divisor)
    return float(remainder if dividend >= 0 else -remainder)


def _divide(left: float, right: float, context: Context) -> float:
    if context.is_zero(right):
        raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
    return left / right


def _power(left: float, right: float, context: Context) -> float:
    # 0^x is undefined for x <= 0
    if context.is_zero(left) and right <= context.epsilon:
        raise EvalError(EvalErrorKind.DIVISION_BY_ZERO)
    try:
        return math.pow(left, right)
    except OverflowError:
        negative = left < 0 and float(right).is_integer() and int(right) % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        # negative base with a fractional exponent has no real result
        return math.nan


def _plain(func: Callable[[float, float], float]) -> Callable[[float, float, Context], float]:
    def apply(left: float, right: float, context: Context) -> float:
        return func(left, right)
    return apply


_BIN_OPS: dict[str, Callable[[float, float, Context], float]] = {
    "+": _plain(operator.add),
    "-": _plain(operator.sub),
    "*": _plain(operator.mul),
    "/": _divide,
    "%": _modulo,
    "^": _power,
}


def apply_operator(op: str, left: float, right: float, context: Context | None = None) -> float:
    """
    Apply a binary operator to two operands.

    Raises:
        EvalError: DIVISION_BY_ZERO for undefined arithmetic, INVALID_OPERATOR
            for an unknown symbol
    """
    try:
        func = _BIN_OPS[op]
    except KeyError:
        raise EvalError(EvalErrorKind.INVALID_OPERATOR, repr(op)) from None
    return func(left, right, context or Context.standard())


def evaluate(tokens: Iterable[Token], context: Context | None = None) -> float:
    """
    Evaluate a list of tokens in reverse Polish order.

    Tokens other than NUMBER and OPERATOR are ignored.

    Raises:
        EvalError: INVALID_EXPRESSION when an operator lacks operands or more
            than one value is left over; see apply_operator for the rest
    """
    context = context or Context.standard()
    stack: list[float] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            stack.append(token.value)
        elif token.type is TokenType.OPERATOR:
            if len(stack) < 2:
                raise EvalError(EvalErrorKind.INVALID_EXPRESSION)
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(token.op, left, right, context))

    # At the end of the computation, there should be exactly one value
    # left on the stack
    if len(stack) != 1:
        raise EvalError(EvalErrorKind.INVALID_EXPRESSION)
    return stack[0]
