"""Structured Logging — JSON formatter and init-once setup for the process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (question_id, error_code, path, origin, method) surfaced when present
    - setup_logging installs its handler at most once per process

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Compact text format by default: one line per record for local runs
    - setup_logging called on startup via lifespan; repeated app startups
      (tests, reloads) must not stack handlers
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("question_id", "error_code", "path", "origin", "method")

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> bool:
    """Configure root logging. Returns False if already configured."""
    global _handler
    if _handler is not None:
        return False
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return True


def reset_logging() -> None:
    """Remove the handler installed by setup_logging."""
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)
        _handler = None
