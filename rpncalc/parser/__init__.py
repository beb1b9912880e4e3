"""
Expression parsing package.

Tokenization, infix to postfix conversion and postfix evaluation, plus a
precedence climbing parser that builds an expression tree for rendering and
cross-checking.
"""

from .ast import ASTNode, BinaryOp, Number
from .context import EPSILON, Context, OperatorConfig
from .evaluator import apply_operator, evaluate
from .lexer import Lexer, tokenize
from .parser import Parser
from .postfix import to_postfix
from .tokens import OPERATORS, Token, TokenType, format_number, render_tokens
from .visitors import EvalVisitor, PostfixVisitor, StringVisitor

__all__ = [
    "ASTNode",
    "BinaryOp",
    "Number",
    "EPSILON",
    "Context",
    "OperatorConfig",
    "apply_operator",
    "evaluate",
    "Lexer",
    "tokenize",
    "Parser",
    "to_postfix",
    "OPERATORS",
    "Token",
    "TokenType",
    "format_number",
    "render_tokens",
    "EvalVisitor",
    "PostfixVisitor",
    "StringVisitor",
]
