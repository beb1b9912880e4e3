"""
Evaluation context for arithmetic expressions.

The context bundles the static configuration the stages share:
- Operator precedence ranks
- The epsilon used for zero checks during evaluation

Equal ranks pop during conversion, so every operator is left-associative,
including ``^`` (``2^3^2`` is ``(2^3)^2``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

EPSILON = 1e-5


@dataclass(frozen=True)
class OperatorConfig:
    """Configuration for an operator."""

    symbol: str
    precedence: int


def _standard_operators() -> Mapping[str, OperatorConfig]:
    return MappingProxyType(
        {
            "+": OperatorConfig("+", precedence=1),
            "-": OperatorConfig("-", precedence=1),
            "*": OperatorConfig("*", precedence=2),
            "/": OperatorConfig("/", precedence=2),
            "%": OperatorConfig("%", precedence=2),
            "^": OperatorConfig("^", precedence=3),
        }
    )


@dataclass(frozen=True)
class Context:
    """
    Immutable environment for converting and evaluating expressions.

    Attributes:
        name: Context name
        operators: Operator symbol to configuration
        epsilon: Absolute tolerance for zero comparisons
    """

    name: str = "Standard"
    operators: Mapping[str, OperatorConfig] = field(default_factory=_standard_operators)
    epsilon: float = EPSILON

    @classmethod
    def standard(cls) -> "Context":
        """The only context the calculator uses."""
        return _STANDARD

    def get_operator_precedence(self, op: str) -> int:
        """
        Get the precedence of an operator.

        Args:
            op: Operator symbol

        Returns:
            Precedence value (higher = binds tighter), 0 when unknown
        """
        if op in self.operators:
            return self.operators[op].precedence
        return 0

    def is_operator(self, op: str) -> bool:
        return op in self.operators

    def is_zero(self, value: float) -> bool:
        """True when value is within epsilon of zero."""
        return abs(value) < self.epsilon


_STANDARD = Context()
