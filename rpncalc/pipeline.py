"""
Expression evaluation pipeline.

    +------------+     +--------------+     +------------+
    | tokenize() | >>> | to_postfix() | >>> | evaluate() | >>> float
    +------------+     +--------------+     +------------+

Each stage consumes the full output of the previous one. Any CalcError
aborts the run; try_calculate() captures it as a serialisable result instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .core.errors import CalcError, EvalError, LexError
from .core.logging import get_context_logger
from .parser.context import Context
from .parser.evaluator import evaluate
from .parser.lexer import tokenize
from .parser.postfix import to_postfix
from .parser.tokens import Token, render_tokens


@dataclass(frozen=True)
class Evaluation:
    """All intermediate forms of one successful run."""

    expression: str
    infix: list[Token]
    postfix: list[Token]
    value: float


class ErrorInfo(BaseModel):
    """Structured description of a pipeline failure."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["lex", "syntax", "eval", "calc"]
    message: str
    position: Optional[int] = None
    reason: Optional[str] = Field(default=None, description="EvalErrorKind name for eval errors")


class EvaluationResult(BaseModel):
    """Outcome of try_calculate(): a value or an error, never both."""

    # inf and nan results serialise as JSON Infinity / NaN, not null
    model_config = ConfigDict(ser_json_inf_nan="constants")

    expression: str
    value: Optional[float] = None
    postfix: list[str] = Field(default_factory=list)
    error: Optional[ErrorInfo] = None

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None


def to_error_info(exc: CalcError) -> ErrorInfo:
    """Convert a calculator exception to its structured form."""
    position = exc.position if isinstance(exc, LexError) else exc.details.get("position")
    reason = exc.reason.name if isinstance(exc, EvalError) else None
    return ErrorInfo(kind=exc.kind, message=exc.message, position=position, reason=reason)


def run(expression: str, context: Context | None = None) -> Evaluation:
    """
    Run all three stages on ``expression``.

    Raises:
        LexError, CalcSyntaxError, EvalError: From the failing stage
    """
    context = context or Context.standard()
    log = get_context_logger(__name__, expression=expression)
    stage = "tokenize"
    try:
        infix = tokenize(expression)
        log.debug("Tokenized into %d tokens", len(infix))
        stage = "to_postfix"
        postfix = to_postfix(infix, context)
        log.debug("Postfix form: %s", render_tokens(postfix))
        stage = "evaluate"
        value = evaluate(postfix, context)
    except CalcError as exc:
        log.info("Evaluation failed: %s", exc.message, context={"stage": stage, "error": exc.kind})
        raise
    log.debug("Evaluated to %r", value)
    return Evaluation(expression=expression, infix=infix, postfix=postfix, value=value)


def calculate(expression: str, context: Context | None = None) -> float:
    """Evaluate ``expression`` and return its value."""
    return run(expression, context).value


def try_calculate(expression: str, context: Context | None = None) -> EvaluationResult:
    """Evaluate ``expression`` without raising for calculator errors."""
    try:
        evaluation = run(expression, context)
    except CalcError as exc:
        return EvaluationResult(expression=expression, error=to_error_info(exc))
    return EvaluationResult(
        expression=expression,
        value=evaluation.value,
        postfix=[str(token) for token in evaluation.postfix],
    )
