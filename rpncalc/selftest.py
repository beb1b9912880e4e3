"""
Built-in self-test harness.

Runs a table of expressions with known values and a list of expressions that
must be rejected, printing one line per case and a summary. The default
table ships as ``rpncalc/data/selftest.yaml``.
"""

from __future__ import annotations

import math
import sys
from importlib import resources
from pathlib import Path
from typing import TextIO

import yaml
from pydantic import BaseModel, Field

from .core.config import Settings, get_settings
from .core.errors import CalcError
from .core.logging import get_logger
from .parser.tokens import format_number
from .pipeline import calculate

logger = get_logger(__name__)


class SelfTestCase(BaseModel):
    """An expression and the value it must evaluate to."""

    expression: str
    expected: float


class SelfTestTable(BaseModel):
    """Valid cases plus expressions that must raise a CalcError."""

    valid: list[SelfTestCase] = Field(default_factory=list)
    invalid: list[str] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SelfTestTable":
        """Load a table from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    @classmethod
    def default(cls) -> "SelfTestTable":
        """The table bundled with the package."""
        text = resources.files("rpncalc").joinpath("data").joinpath("selftest.yaml").read_text(encoding="utf-8")
        return cls.model_validate(yaml.safe_load(text))


class CaseOutcome(BaseModel):
    expression: str
    passed: bool
    detail: str


class SelfTestReport(BaseModel):
    """Per-case outcomes of one harness run."""

    outcomes: list[CaseOutcome] = Field(default_factory=list)

    @property
    def failures(self) -> list[CaseOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def passed(self) -> bool:
        return not self.failures


def load_table(settings: Settings | None = None) -> SelfTestTable:
    """Load the configured table, falling back to the bundled one."""
    settings = settings or get_settings()
    if settings.SELFTEST_CASES:
        logger.info("Loading self-test cases from %s", settings.SELFTEST_CASES)
        return SelfTestTable.from_yaml(settings.SELFTEST_CASES)
    return SelfTestTable.default()


def _check_valid(case: SelfTestCase, tolerance: float) -> CaseOutcome:
    try:
        value = calculate(case.expression)
    except CalcError as exc:
        return CaseOutcome(expression=case.expression, passed=False, detail=f"ERROR: {exc.message}")
    if math.isclose(value, case.expected, rel_tol=tolerance, abs_tol=tolerance):
        return CaseOutcome(expression=case.expression, passed=True, detail=format_number(value))
    return CaseOutcome(
        expression=case.expression,
        passed=False,
        detail=f"{format_number(value)} ERROR: Expected {format_number(case.expected)}",
    )


def _check_invalid(expression: str) -> CaseOutcome:
    try:
        value = calculate(expression)
    except CalcError as exc:
        return CaseOutcome(expression=expression, passed=True, detail=f"Exception: {exc.message}")
    return CaseOutcome(
        expression=expression,
        passed=False,
        detail=f"Result: {format_number(value)} ERROR: Expected exception",
    )


def _report_line(outcome: CaseOutcome) -> str:
    status = "OK" if outcome.passed else "FAIL"
    return f"{outcome.expression} = {outcome.detail:<10}{status:>10}"


def run_self_tests(
    table: SelfTestTable | None = None,
    out: TextIO | None = None,
    settings: Settings | None = None,
) -> SelfTestReport:
    """
    Run every case in ``table`` and print a report to ``out``.

    Args:
        table: Cases to run (defaults to the configured table)
        out: Stream for the report (defaults to stdout)
        settings: Supplies the comparison tolerance

    Returns:
        The collected outcomes
    """
    settings = settings or get_settings()
    if table is None:
        table = load_table(settings)
    out = out or sys.stdout
    report = SelfTestReport()

    for case in table.valid:
        outcome = _check_valid(case, settings.SELFTEST_TOLERANCE)
        report.outcomes.append(outcome)
        print(_report_line(outcome), file=out)

    for expression in table.invalid:
        outcome = _check_invalid(expression)
        report.outcomes.append(outcome)
        print(_report_line(outcome), file=out)

    if report.passed:
        print("All tests passed", file=out)
    else:
        print(f"Some tests failed ({len(report.failures)} of {len(report.outcomes)})", file=out)
    logger.info("Self-tests finished: %d cases, %d failed", len(report.outcomes), len(report.failures))
    return report
