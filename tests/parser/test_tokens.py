"""Tests for the token model."""

import dataclasses

import pytest

from rpncalc.parser.tokens import Token, TokenType, format_number, render_tokens


class TestTokenConstruction:
    """Test the named constructors."""

    def test_number(self):
        token = Token.number(3, pos=4)
        assert token.type is TokenType.NUMBER
        assert token.value == 3.0
        assert isinstance(token.value, float)
        assert token.pos == 4

    def test_operator(self):
        token = Token.operator("^", pos=1)
        assert token.type is TokenType.OPERATOR
        assert token.op == "^"
        assert token.is_operator
        assert not token.is_number

    def test_markers(self):
        assert Token.unary_minus().type is TokenType.UNARY_MINUS
        assert Token.lparen().type is TokenType.LPAREN
        assert Token.rparen().type is TokenType.RPAREN

    def test_equality_ignores_position(self):
        assert Token.number(2, pos=0) == Token.number(2, pos=7)
        assert Token.operator("+", pos=1) != Token.operator("-", pos=1)

    def test_tokens_are_immutable(self):
        token = Token.number(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = 2.0


class TestTokenRendering:
    """Test the textual form of tokens."""

    @pytest.mark.parametrize(
        "value, text",
        [
            (2.0, "2"),
            (-1.0, "-1"),
            (0.5, "0.5"),
            (44.9767441860465, "44.9767"),
            (1e20, "1e+20"),
        ],
    )
    def test_format_number(self, value, text):
        assert format_number(value) == text

    def test_str(self):
        assert str(Token.number(2.5)) == "2.5"
        assert str(Token.operator("%")) == "%"
        assert str(Token.unary_minus()) == "-"
        assert str(Token.lparen()) == "("
        assert str(Token.rparen()) == ")"

    def test_repr_mentions_type(self):
        assert repr(Token.operator("*", pos=3)) == "Token(OPERATOR, '*', pos=3)"
        assert repr(Token.lparen(0)) == "Token(LPAREN, pos=0)"

    def test_render_tokens(self):
        tokens = [Token.number(2), Token.number(3), Token.operator("+")]
        assert render_tokens(tokens) == "2 3 +"
        assert render_tokens([]) == ""
