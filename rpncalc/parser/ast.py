"""
Expression tree node definitions.

The tree is the structural view of an expression built by the reference
parser. It follows the Visitor pattern so evaluation and the various
renderings live outside the node classes.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol


class ASTVisitor(Protocol):
    """
    Visitor protocol for traversing tree nodes.

    Implementations provide evaluation and string renderings.
    """

    def visit_number(self, node: "Number") -> Any:
        ...

    def visit_binary_op(self, node: "BinaryOp") -> Any:
        ...


class ASTNode(ABC):
    """Base class for all tree nodes."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor for traversal."""
        pass

    @abstractmethod
    def __repr__(self) -> str:
        """Return string representation for debugging."""
        pass


class Number(ASTNode):
    """
    Represents a numeric literal.

    Examples: 42, 3.14, .5, 1e-10
    """

    def __init__(self, value: float | int):
        self.value = float(value)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def __repr__(self) -> str:
        return f"Number({self.value})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value


class BinaryOp(ASTNode):
    """
    Represents a binary operation.

    Unary minus has no node of its own; it is ``BinaryOp(Number(-1), '*', x)``.
    """

    def __init__(self, left: ASTNode, op: str, right: ASTNode):
        self.left = left
        self.op = op
        self.right = right

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def __repr__(self) -> str:
        return f"BinaryOp({self.left!r}, '{self.op}', {self.right!r})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, BinaryOp)
            and self.op == other.op
            and self.left == other.left
            and self.right == other.right
        )
