"""
Structured JSON logging with request_id, user_id, issue_id when applicable.
Credentials (tokens, passwords) are redacted from structured extras.
"""
from __future__ import annotations

import json
import logging
import time
from contextvars import ContextVar
from typing import Any, Optional

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_SECRET_KEYS = ("authorization", "token", "password", "secret", "key")


def _redact(obj: Any) -> Any:
    """Redact keys that might contain credentials."""
    if isinstance(obj, dict):
        return {k: "***" if k.lower() in _SECRET_KEYS else _redact(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_redact(x) for x in obj]
    return obj


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S.000Z", time.gmtime(record.created)),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if request_id_ctx.get():
            log["request_id"] = request_id_ctx.get()
        if getattr(record, "user_id", None):
            log["user_id"] = str(record.user_id)
        if getattr(record, "issue_id", None):
            log["issue_id"] = str(record.issue_id)
        if getattr(record, "error_code", None):
            log["error_code"] = record.error_code
        if getattr(record, "graphql_response", None):
            log["graphql_response"] = _redact(record.graphql_response)
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        from issue_tracker.config import get_settings

        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(get_settings().log_level.upper())
    return logger
