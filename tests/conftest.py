"""
Shared pytest fixtures.

This module provides:
- Isolation of the cached settings and of the root logger between tests
- Helpers turning expressions into token and postfix renderings
"""

import logging
import os

import pytest

from rpncalc.core.config import get_settings
from rpncalc.parser import Context, render_tokens, to_postfix, tokenize


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any RPNCALC_ variables from the environment."""
    for name in list(os.environ):
        if name.startswith("RPNCALC_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove and close handlers installed by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def context():
    """The standard evaluation context."""
    return Context.standard()


@pytest.fixture
def postfix_of():
    """Render the postfix form of an expression as a string."""
    def _postfix_of(expression: str) -> str:
        return render_tokens(to_postfix(tokenize(expression)))
    return _postfix_of
