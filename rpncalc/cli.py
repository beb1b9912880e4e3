"""Command line interface for rpncalc."""

from __future__ import annotations

import argparse
import sys

from .core.config import get_settings
from .core.errors import CalcError
from .core.logging import get_context_logger, setup_logging
from .parser.parser import Parser
from .parser.tokens import format_number, render_tokens
from .parser.visitors import StringVisitor
from .pipeline import run, try_calculate
from .selftest import run_self_tests


class _ArgumentParser(argparse.ArgumentParser):
    """Argument errors exit with status 1 like every other usage error."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rpncalc",
        usage="%(prog)s [options] <expression | run_tests>",
        description="Evaluate an arithmetic expression via its postfix form.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "operands",
        nargs="*",
        help="The expression to evaluate, or the self-test sentinel.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result (or error) as a JSON document.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Also print the fully parenthesised form of the expression.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG).",
    )
    return parser


def _evaluate(expression: str, show_tree: bool) -> int:
    try:
        evaluation = run(expression)
        tree = Parser().parse(expression) if show_tree else None
    except CalcError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    print(f"{expression} = {format_number(evaluation.value)}")
    print(f"postfix: {render_tokens(evaluation.postfix)}")
    if tree is not None:
        print(f"tree: {tree.accept(StringVisitor())}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    # Expressions such as "-(5)*3" look like options; argparse hands them back
    # as unknown arguments and they are treated as operands.
    args, extras = parser.parse_known_args(argv)
    operands = list(args.operands) + extras

    settings = get_settings()
    setup_logging(settings, level=args.log_level)

    if len(operands) != 1:
        parser.print_usage(sys.stdout)
        return 1

    operand = operands[0]
    if operand == settings.SELFTEST_SENTINEL:
        get_context_logger(__name__, mode="selftest").info("Running self-tests")
        report = run_self_tests(settings=settings)
        return 0 if report.passed else 1

    mode = "json" if args.json else ("tree" if args.tree else "text")
    get_context_logger(__name__, expression=operand, mode=mode).info("Evaluating expression")
    if args.json:
        result = try_calculate(operand)
        print(result.model_dump_json(indent=2))
        return 0 if result.ok else 1

    return _evaluate(operand, args.tree)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
