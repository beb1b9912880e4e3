"""
Infix to postfix conversion using the shunting yard algorithm.

See <http://en.wikipedia.org/wiki/Shunting_yard_algorithm>

Unary minus is rewritten as multiplication by -1: ``-1`` goes straight to
the output and a ``*`` is pushed without popping anything, so it binds
whatever operand follows. ``-(5)`` evaluates as ``(-1)*(5)``.
"""

from typing import Iterable

from ..core.errors import MismatchedParenthesisError
from .context import Context
from .tokens import Token, TokenType


def to_postfix(tokens: Iterable[Token], context: Context | None = None) -> list[Token]:
    """
    Convert infix tokens to postfix (reverse Polish) order.

    Args:
        tokens: Infix tokens as produced by the lexer
        context: Supplies operator precedence (defaults to standard)

    Returns:
        Tokens in postfix order; only NUMBER and OPERATOR tokens remain

    Raises:
        MismatchedParenthesisError: On an unmatched ')' or a leftover '('
    """
    context = context or Context.standard()
    # Output, in reverse Polish order
    out: list[Token] = []
    # Operator stack
    stack: list[Token] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            out.append(token)

        elif token.type is TokenType.OPERATOR:
            # Pop anything binding at least as tightly (left-associative)
            precedence = context.get_operator_precedence(token.op)
            while (
                stack
                and stack[-1].type is not TokenType.LPAREN
                and context.get_operator_precedence(stack[-1].op) >= precedence
            ):
                out.append(stack.pop())
            stack.append(token)

        elif token.type is TokenType.UNARY_MINUS:
            out.append(Token.number(-1.0, token.pos))
            stack.append(Token.operator("*", token.pos))

        elif token.type is TokenType.LPAREN:
            stack.append(token)

        elif token.type is TokenType.RPAREN:
            while stack and stack[-1].type is not TokenType.LPAREN:
                out.append(stack.pop())
            if not stack:
                raise MismatchedParenthesisError()
            stack.pop()  # the left parenthesis

    # Finally, pop off anything still on the stack
    while stack:
        token = stack.pop()
        if token.type is TokenType.LPAREN:
            raise MismatchedParenthesisError()
        out.append(token)

    return out
