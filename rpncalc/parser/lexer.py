"""
Lexer for arithmetic expressions.

Converts a raw string into tokens in source order, rejecting malformed input
as early as possible:
- two numbers in a row (including a second decimal point, ``5.3.3``)
- two operators in a row, or an operator opening the expression
- a ``)`` closing an empty or dangling group
- an operator left hanging at the end of the input
- any character outside the grammar

Unary ``+`` is dropped and unary ``-`` becomes a UNARY_MINUS marker. A ``(``
directly after a number or ``)`` gets an implicit ``*`` in front of it.
"""

import re

from ..core.errors import LexError
from .tokens import OPERATORS, Token, TokenType

# Decimal literal; stops before a second '.' so "5.3.3" yields "5.3" first.
NUMBER_PATTERN = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

NUMBER_START = "0123456789."


class Lexer:
    """
    Tokenizes arithmetic expressions one character at a time.

    The lexer keeps no state between calls; one instance can tokenize any
    number of expressions.
    """

    def tokenize(self, expression: str) -> list[Token]:
        """
        Tokenize an arithmetic expression.

        Args:
            expression: The expression to tokenize

        Returns:
            List of tokens

        Raises:
            LexError: On the first invalid construct
        """
        tokens: list[Token] = []
        pos = 0

        while pos < len(expression):
            ch = expression[pos]
            prev = tokens[-1] if tokens else None

            if ch.isspace():
                pos += 1
                continue

            # Sign in front of an operand
            if ch in "+-" and self._is_unary_context(prev):
                if ch == "-":
                    tokens.append(Token.unary_minus(pos))
                pos += 1
                continue

            if ch in NUMBER_START:
                if prev is not None and prev.type is TokenType.NUMBER:
                    raise LexError("Expected operator or parenthesis", pos, ch)
                match = NUMBER_PATTERN.match(expression, pos)
                if not match:
                    raise LexError("Invalid number", pos, ch)
                tokens.append(Token.number(float(match.group()), pos))
                pos = match.end()
                continue

            if ch in OPERATORS:
                if prev is None or prev.type in (TokenType.OPERATOR, TokenType.UNARY_MINUS):
                    raise LexError("Expected number", pos, ch)
                tokens.append(Token.operator(ch, pos))
            elif ch == "(":
                # 2(3+4) -> 2*(3+4), (3+4)(2+1) -> (3+4)*(2+1)
                if prev is not None and prev.type in (TokenType.NUMBER, TokenType.RPAREN):
                    tokens.append(Token.operator("*", pos))
                tokens.append(Token.lparen(pos))
            elif ch == ")":
                if prev is not None and prev.type in (
                    TokenType.OPERATOR,
                    TokenType.UNARY_MINUS,
                    TokenType.LPAREN,
                ):
                    raise LexError("Expected number", pos, ch)
                tokens.append(Token.rparen(pos))
            else:
                raise LexError("Invalid character", pos, ch)
            pos += 1

        if tokens and tokens[-1].type in (TokenType.OPERATOR, TokenType.UNARY_MINUS):
            raise LexError("Unexpected end of expression", len(expression))

        return tokens

    @staticmethod
    def _is_unary_context(prev: Token | None) -> bool:
        """A sign is unary at the start or after an operator or '('."""
        return prev is None or prev.type in (TokenType.OPERATOR, TokenType.LPAREN)


_LEXER = Lexer()


def tokenize(expression: str) -> list[Token]:
    """Tokenize ``expression`` with a shared stateless lexer."""
    return _LEXER.tokenize(expression)
