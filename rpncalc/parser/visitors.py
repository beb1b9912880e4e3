"""
Tree visitor implementations.

- StringVisitor: fully parenthesised infix rendering
- PostfixVisitor: postfix token rendering, comparable with the converter
- EvalVisitor: numeric evaluation sharing the postfix evaluator's arithmetic
"""

from .ast import BinaryOp, Number
from .context import Context
from .evaluator import apply_operator
from .tokens import format_number


class StringVisitor:
    """
    Convert a tree to a fully parenthesised string.

    Examples:
    - BinaryOp(Number(2), '+', Number(3)) → "(2 + 3)"
    - 2(3+4) → "(2 * (3 + 4))"
    """

    def visit_number(self, node: Number) -> str:
        return format_number(node.value)

    def visit_binary_op(self, node: BinaryOp) -> str:
        return f"({node.left.accept(self)} {node.op} {node.right.accept(self)})"


class PostfixVisitor:
    """Render a tree as space separated postfix tokens."""

    def visit_number(self, node: Number) -> str:
        return format_number(node.value)

    def visit_binary_op(self, node: BinaryOp) -> str:
        return f"{node.left.accept(self)} {node.right.accept(self)} {node.op}"


class EvalVisitor:
    """
    Evaluate a tree to a float.

    Args:
        context: Evaluation context
    """

    def __init__(self, context: Context | None = None):
        self.context = context or Context.standard()

    def visit_number(self, node: Number) -> float:
        return node.value

    def visit_binary_op(self, node: BinaryOp) -> float:
        left = node.left.accept(self)
        right = node.right.accept(self)
        return apply_operator(node.op, left, right, self.context)
