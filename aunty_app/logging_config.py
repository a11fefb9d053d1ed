"""JSON logging for the aunty backend.

Every record is one JSON line carrying the event name and the correlation id of
the request or tool call that produced it. Chat text, prompts, user ids and
image URIs are scrubbed before they reach a handler.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, Iterator, Mapping

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes owned by LogRecord itself; fields with these names cannot ride in ``extra``.
RESERVED_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
RESERVED_FIELD_PREFIX = "field_"

SENSITIVE_KEYS = frozenset(
    {
        "user_id",
        "image_uri",
        "message",
        "text",
        "history",
        "reply",
        "roast",
        "prompt",
    }
)
REDACTED = "[redacted]"
REDACTED_URI = "[redacted-uri]"
REDACTED_EMAIL = "[redacted-email]"

_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+\.\w+")
_IMAGE_URI_PATTERN = re.compile(r"^(?:https?|file|content|gs)://", re.IGNORECASE)


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        rendered = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", rendered),
            "message": rendered,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in RESERVED_RECORD_ATTRS and key not in payload
        }
        payload.update(redact_for_log(extras))
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Install a single JSON stream handler on the root logger."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def _scrub_text(value: str) -> str:
    if _IMAGE_URI_PATTERN.match(value.strip()):
        return REDACTED_URI
    return _EMAIL_PATTERN.sub(REDACTED_EMAIL, value)


def redact_for_log(payload: Any) -> Any:
    """Return a JSON-friendly copy of ``payload`` with sensitive values masked.

    Values stored under :data:`SENSITIVE_KEYS` are replaced outright. Any other
    string that looks like an image URI or contains an email address is masked
    wherever it appears, including inside lists and nested mappings.
    """

    if isinstance(payload, str):
        return _scrub_text(payload)
    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, Mapping):
        return {
            key: REDACTED if key in SENSITIVE_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set)):
        return [redact_for_log(item) for item in payload]
    return str(payload)


def _as_extra(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Prefix field names that collide with LogRecord attributes."""

    extra: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in RESERVED_RECORD_ATTRS:
            key = f"{RESERVED_FIELD_PREFIX}{key}"
        extra[key] = value
    return extra


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, keep the current one, or mint a fresh id."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Set a correlation id for the duration of the block."""

    token = CORRELATION_ID.set(correlation_id or ensure_correlation_id())
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted structured fields.

    ``correlation_id`` and ``exc_info`` are consumed here. Fields named after
    LogRecord attributes (``message``, ``name``, ``args`` ...) are kept under a
    ``field_`` prefix instead of being rejected by :mod:`logging`.
    """

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    extra = _as_extra(redact_for_log(fields))
    extra.update(event=event, correlation_id=correlation_id)
    logger.log(level, event, exc_info=exc_info, extra=extra)


@contextlib.contextmanager
def operation_context(name: str, **attributes: Any) -> Iterator[str]:
    """Run a named agent operation under one correlation id."""

    with correlation_context(attributes.get("correlation_id")) as scoped_id:
        logging.getLogger(__name__).debug("operation_started", extra={"operation": name})
        yield scoped_id


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "SENSITIVE_KEYS",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
