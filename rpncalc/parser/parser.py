"""
Recursive descent parser for arithmetic expressions.

Builds an expression tree from the lexer's tokens using precedence climbing
over the same precedence table as the shunting yard converter. The tree is
an independent route to the same value as the postfix pipeline:
- every operator is left-associative
- unary minus becomes ``(-1) * operand``, where the operand takes only
  operators binding tighter than ``*``
"""

from ..core.errors import ParseError
from .ast import ASTNode, BinaryOp, Number
from .context import Context
from .lexer import Lexer
from .tokens import Token, TokenType


class Parser:
    """
    Precedence climbing parser.

    The parser builds a tree from a token stream, respecting:
    - Operator precedence (defined in context)
    - Left associativity for all operators
    - Parenthesised groups
    """

    def __init__(self, context: Context | None = None):
        """
        Initialize parser with optional context.

        Args:
            context: Evaluation context (defaults to standard)
        """
        self.context = context or Context.standard()
        self.tokens: list[Token] = []
        self.pos = 0

    def parse(self, expression: str) -> ASTNode:
        """
        Parse an expression string to a tree.

        Raises:
            LexError: If the lexer rejects the expression
            ParseError: If the tokens do not form an expression
        """
        return self.parse_tokens(Lexer().tokenize(expression))

    def parse_tokens(self, tokens: list[Token]) -> ASTNode:
        """Parse an already tokenized infix sequence."""
        self.tokens = list(tokens)
        self.pos = 0

        if not self.tokens:
            raise ParseError("Empty expression")

        tree = self.parse_expression(0)

        # Ensure we consumed all tokens
        if self.current() is not None:
            raise ParseError("Unexpected token", self.current())

        return tree

    def current(self) -> Token | None:
        """Get current token without consuming it, None at the end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current()
        if token is None:
            raise ParseError("Unexpected end of expression")
        self.pos += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        """
        Consume a token of the expected type.

        Raises:
            ParseError: If current token doesn't match expected type
        """
        token = self.current()
        if token is None:
            raise ParseError(f"Expected {token_type.name}")
        if token.type is not token_type:
            raise ParseError(f"Expected {token_type.name}, got {token.type.name}", token)
        return self.advance()

    def parse_expression(self, min_precedence: int = 0) -> ASTNode:
        """
        Parse an expression using operator precedence climbing.

        Args:
            min_precedence: Minimum precedence to consider

        Returns:
            Tree node
        """
        left = self.parse_prefix()

        while True:
            token = self.current()
            if token is None or token.type is not TokenType.OPERATOR:
                break

            precedence = self.context.get_operator_precedence(token.op)
            if precedence < min_precedence:
                break

            op_token = self.advance()
            # Left associative: the right side only takes tighter operators
            right = self.parse_expression(precedence + 1)
            left = BinaryOp(left, op_token.op, right)

        return left

    def parse_prefix(self) -> ASTNode:
        """Parse unary minus, a number or a parenthesised group."""
        token = self.current()
        if token is None:
            raise ParseError("Unexpected end of expression")

        if token.type is TokenType.UNARY_MINUS:
            self.advance()
            operand = self.parse_expression(self.context.get_operator_precedence("*") + 1)
            return BinaryOp(Number(-1.0), "*", operand)

        if token.type is TokenType.NUMBER:
            self.advance()
            return Number(token.value)

        if token.type is TokenType.LPAREN:
            self.advance()
            inner = self.parse_expression(0)
            self.expect(TokenType.RPAREN)
            return inner

        raise ParseError("Unexpected token", token)
