"""
Logging for the calculator.

Records may carry a calculation context (the expression being evaluated,
the CLI mode, the failing stage). Both formatters render it: the JSON
formatter under a "context" key, the text formatter as a trailing
``[key=value ...]`` block. All output goes to stderr so results on stdout
stay clean.
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings

# LogRecord attribute holding the calculation context
CONTEXT_ATTR = "calc_context"


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the calculation context attached to ``record`` (may be empty)."""
    return getattr(record, CONTEXT_ATTR, None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``HH:MM:SS LEVEL logger: message [key=value ...]``"""

    def __init__(self):
        super().__init__(fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = record_context(record)
        if not context:
            return text
        fields = " ".join(f"{key}={value!r}" for key, value in context.items())
        # Keep the context on the message line, ahead of any traceback
        head, sep, tail = text.partition("\n")
        return f"{head} [{fields}]{sep}{tail}"


_FORMATTERS = {"json": StructuredFormatter, "text": TextFormatter}


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """
    Install stderr (and optional file) handlers on the root logger.

    ``level`` overrides ``settings.LOG_LEVEL``; unknown names mean WARNING.
    """
    settings = settings or get_settings()
    log_level = _resolve_level(level or settings.LOG_LEVEL)
    formatter = _FORMATTERS[settings.LOG_FORMAT]()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class CalcLoggerAdapter(logging.LoggerAdapter):
    """
    Logger bound to a calculation context.

    Per-call context is passed as ``context={...}`` and merged over the
    bound one::

        log = get_context_logger(__name__, expression="1/0")
        log.info("Evaluation failed", context={"stage": "evaluate"})
    """

    def process(self, msg: Any, kwargs: Dict[str, Any]) -> tuple:
        context = {**self.extra, **kwargs.pop("context", {})}
        kwargs.setdefault("extra", {})[CONTEXT_ATTR] = context
        return msg, kwargs

    def bind(self, **context: Any) -> "CalcLoggerAdapter":
        """Return a new adapter with ``context`` added to the bound one."""
        return CalcLoggerAdapter(self.logger, {**self.extra, **context})


def get_context_logger(name: str, **context: Any) -> CalcLoggerAdapter:
    """Get a logger that attaches ``context`` to every record."""
    return CalcLoggerAdapter(get_logger(name), context)
