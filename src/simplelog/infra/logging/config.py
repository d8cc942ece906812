from __future__ import annotations

"""
Logging Bridge Configuration Models.

Defines the data structures required to route records of the standard
``logging`` module into a SimpleLog, including the mapping between stdlib
numeric levels and SimpleLog severities.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from simplelog.domain.levels import Severity

# stdlib has no NOTICE level; it sits between INFO and WARNING
NOTICE: int = 25
logging.addLevelName(NOTICE, "NOTICE")

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "NOTICE": NOTICE,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def severity_for(levelno: int) -> Severity:
    """
    Translate a stdlib level number into a SimpleLog severity.

    Intermediate custom levels fall into the closest lower stdlib bucket.
    """
    if levelno >= logging.CRITICAL:
        return Severity.CRITICAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= NOTICE:
        return Severity.NOTICE
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification of the stdlib bridge.

    Attributes:
        level: Minimum stdlib severity captured by the bridge handler.
        logger_name: Logger receiving the handler (None means the root logger).
        fmt: Format applied to records before they reach the SimpleLog. The
            SimpleLog adds its own timestamp and level label.
    """
    level: str = "INFO"
    logger_name: Optional[str] = None
    fmt: str = "%(name)s: %(message)s"
