"""Process-wide logger with a per-request correlation id."""
from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar

from postboard.config import settings

_request_id: ContextVar[str] = ContextVar("postboard_request_id", default="-")


def get_request_id() -> str:
    return _request_id.get()


def new_request_id() -> str:
    """Start a fresh correlation id for the current context and return it."""
    request_id = uuid.uuid4().hex[:12]
    _request_id.set(request_id)
    return request_id


class _RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


def _configure() -> logging.Logger:
    root = logging.getLogger("postboard")
    if root.handlers:
        return root
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(_RequestIdFilter())
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
    ))
    root.addHandler(handler)
    root.setLevel(settings.LOG_LEVEL.upper())
    return root


logger = _configure()

__all__ = ["logger", "get_request_id", "new_request_id"]
