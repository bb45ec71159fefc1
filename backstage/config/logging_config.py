"""
Logging for the API and the order consumer.

Every record carries a correlation id: the X-Correlation-ID header of the
current request, or the stream message id while the consumer handles an order.
"""

import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from backstage.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Stamps the current correlation id on each record a handler emits."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formats records that reached a handler without passing the filter."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _backstage_handler(handler: logging.Handler, formatter: logging.Formatter):
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    handler.backstage = True
    return handler


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """
    Configure the root logger. Safe to call more than once: handlers installed
    by an earlier call are replaced rather than stacked.

    Third-party loggers stay at WARNING, the backstage package logs at `level`.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in [h for h in root.handlers if getattr(h, "backstage", False)]:
        root.removeHandler(handler)
        handler.close()

    formatter = SafeFormatter(Config.LOG_FORMAT)
    root.addHandler(_backstage_handler(logging.StreamHandler(sys.stdout), formatter))

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        root.addHandler(_backstage_handler(file_handler, formatter))

    package_logger = logging.getLogger("backstage")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.info("Logging is set up.")
    return root
