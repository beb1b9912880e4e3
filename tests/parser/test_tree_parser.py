"""Tests for the tree parser, its visitors, and agreement with the postfix pipeline."""

import pytest

from rpncalc.core.errors import CalcSyntaxError, LexError, ParseError
from rpncalc.parser.ast import BinaryOp, Number
from rpncalc.parser.evaluator import evaluate
from rpncalc.parser.lexer import tokenize
from rpncalc.parser.parser import Parser
from rpncalc.parser.postfix import to_postfix
from rpncalc.parser.visitors import EvalVisitor, PostfixVisitor, StringVisitor


def parse(expression):
    return Parser().parse(expression)


class TestTreeShape:
    """Test the trees built for representative expressions."""

    def test_precedence(self):
        assert parse("2 + 3 * 4") == BinaryOp(
            Number(2), "+", BinaryOp(Number(3), "*", Number(4))
        )

    def test_left_associative_power(self):
        assert parse("2^3^2") == BinaryOp(
            BinaryOp(Number(2), "^", Number(3)), "^", Number(2)
        )

    def test_unary_minus_is_multiplication(self):
        assert parse("-5") == BinaryOp(Number(-1), "*", Number(5))

    def test_unary_minus_operand_binds_power(self):
        assert parse("-2^2") == BinaryOp(
            Number(-1), "*", BinaryOp(Number(2), "^", Number(2))
        )

    def test_implicit_multiplication(self):
        assert parse("2(3+4)") == BinaryOp(
            Number(2), "*", BinaryOp(Number(3), "+", Number(4))
        )

    def test_repr(self):
        assert repr(parse("1+2")) == "BinaryOp(Number(1.0), '+', Number(2.0))"


class TestParseErrors:
    """Test token streams the parser rejects."""

    @pytest.mark.parametrize("expression", ["", "((5", "5))", "(2)3"])
    def test_rejected(self, expression):
        with pytest.raises(ParseError):
            parse(expression)

    def test_parse_error_is_syntax_error(self):
        with pytest.raises(CalcSyntaxError, match=r"Unexpected token at position 3: '3'"):
            parse("(2)3")

    def test_lex_errors_pass_through(self):
        with pytest.raises(LexError):
            parse("2 +* 3")


class TestVisitors:
    """Test the renderings and evaluation."""

    @pytest.mark.parametrize(
        "expression, text",
        [
            ("2 + 3", "(2 + 3)"),
            ("2(3+4)", "(2 * (3 + 4))"),
            ("-(5)*-(3)", "((-1 * 5) * (-1 * 3))"),
            ("1 - 2 - 3", "((1 - 2) - 3)"),
        ],
    )
    def test_string_visitor(self, expression, text):
        assert parse(expression).accept(StringVisitor()) == text

    def test_postfix_visitor(self):
        assert parse("(3+4)(2+1)").accept(PostfixVisitor()) == "3 4 + 2 1 + *"

    def test_eval_visitor(self):
        assert parse("(10 + 11) * 12").accept(EvalVisitor()) == 252.0


AGREEMENT_CASES = [
    "2 + 3",
    "4 - 5",
    "8 / 9",
    "(10 + 11) * 12",
    "(19 / 20) - 21",
    "(26 / 27) + (28 * 29)",
    "(10.5 + 11) * -12",
    "(13 - -14) / 15",
    "(22 + -23) (24 - -25)",
    "-(5)(-3)(2)",
    "-(5)*-(3)",
    "(-42 / -43) + 44",
    "2(3+4)",
    "(3+4)(2+1)",
    "1 - 2 - 3",
    "2 ^ 3 ^ 2",
    "-2 ^ 2",
    "2 ^ -3",
    "2 ^ -3 * 4",
    "2 * -3 ^ 2",
    "2 + -3 * 4",
    "2 % -3 * 4",
    "7 % 3 ^ 2",
    "100 / 10 / 5",
    "-(1 + 2)(3) - -(4 ^ 2)",
    "+3 * +(2 - 8) % 5",
]


class TestAgreementWithPostfix:
    """The tree and the shunting yard must agree on structure and value."""

    @pytest.mark.parametrize("expression", AGREEMENT_CASES)
    def test_same_postfix_order(self, postfix_of, expression):
        assert parse(expression).accept(PostfixVisitor()) == postfix_of(expression)

    @pytest.mark.parametrize("expression", AGREEMENT_CASES)
    def test_same_value(self, expression):
        expected = parse(expression).accept(EvalVisitor())
        assert evaluate(to_postfix(tokenize(expression))) == pytest.approx(expected)
