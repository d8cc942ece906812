from __future__ import annotations

from .config import NOTICE, LoggingConfig, severity_for
from .core import configure_logging, get_logger, reset_logging
from .handlers import SimpleLogHandler

__all__ = [
    "NOTICE",
    "LoggingConfig",
    "SimpleLogHandler",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "severity_for",
]
