"""
rest_parse.core.logging
────────────────────────
Structured logs for the library's own loggers. Each logger is a stdlib
logger under "rest_parse" wrapped with its own structlog processor chain,
so importing the package leaves the host application's structlog and
logging setup untouched. Keys and tokens are redacted before rendering.

Output is opt-in: call configure_logging() to attach a stdout handler;
otherwise records propagate to whatever handlers the application set up.

Settings: PARSE_LOG_LEVEL, PARSE_LOG_FORMAT=json|console (via ParseSettings)
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from rest_parse.core.config import ParseSettings, get_settings

LIBRARY_LOGGER = "rest_parse"


# ── Redaction processor ───────────────────────────────────────────────────────

_REDACT_KEYS = frozenset({
    "password", "session_token", "sessiontoken", "master_key", "masterkey",
    "rest_api_key", "api_key", "app_id", "authdata", "auth_data", "token",
    "x-parse-session-token", "x-parse-master-key", "x-parse-rest-api-key",
})

_REDACTED = "[REDACTED]"


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Strip sensitive fields from log records before output."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


# ── Rendering ─────────────────────────────────────────────────────────────────

_renderers: dict[str, Any] = {
    "json": structlog.processors.JSONRenderer(),
    "console": structlog.dev.ConsoleRenderer(colors=False),
}
_log_format = "json"


def _render(logger: Any, method: str, event_dict: dict) -> str:
    return _renderers[_log_format](logger, method, event_dict)


_processors: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    _redact_processor,
    _render,
]


# ── Public API ────────────────────────────────────────────────────────────────

_handler: logging.Handler | None = None


def configure_logging(settings: ParseSettings | None = None) -> logging.Logger:
    """
    Send the library's logs to stdout at the configured level and format.
    Safe to call more than once; the handler is replaced, not duplicated.
    """
    global _handler, _log_format
    settings = settings or get_settings()
    _log_format = settings.log_format

    lib_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        lib_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    lib_logger.addHandler(_handler)
    lib_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return lib_logger


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger bound to the given name.

    Usage:
        log = get_logger(__name__)
        log.debug("parse.request", method="GET", path="/users/me")
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
