"""Structured logging helpers for dialectfactory."""

from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Optional

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

ROOT_LOGGER = "dialectfactory"


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 100, **fields: Any):
    """
    Context manager logging how long the wrapped block took.

    Durations at or above ``threshold_ms`` are logged at WARNING, the rest at
    DEBUG. Extra keyword ``fields`` are attached to the record.
    """

    start = time.monotonic()

    class Timer:
        elapsed_ms: float = 0.0

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            self.elapsed_ms = (time.monotonic() - start) * 1000
            level = logging.WARNING if self.elapsed_ms >= threshold_ms else logging.DEBUG
            extra = dict(fields, elapsed_ms=self.elapsed_ms)
            logger.log(level, "%s took %.2fms", name, self.elapsed_ms, extra=extra)

    return Timer()
