from __future__ import annotations

"""
Logging Bridge Orchestrator.

Maintains the idempotent lifecycle of the stdlib bridge: attaches a single
tagged SimpleLogHandler to the configured logger and removes it again on
demand. Records are delivered synchronously.
"""

import logging
from typing import TYPE_CHECKING, Optional

from simplelog.infra.logging.config import _LEVEL_MAP, LoggingConfig
from simplelog.infra.logging.handlers import SimpleLogHandler, _is_our_handler, _tag_handler

if TYPE_CHECKING:
    from simplelog.core.logger import SimpleLog

# Internal state flag for idempotency tracking
_CONFIGURED_FLAG_ATTR: str = "_simplelog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, sink: "SimpleLog", *, force: bool = False) -> logging.Logger:
    """
    Route stdlib records of a logger hierarchy into a SimpleLog.

    Repeated calls are no-ops unless force is set, in which case the
    previously attached bridge handler is replaced.

    Args:
        cfg: Bridge configuration.
        sink: Logger receiving the records.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The configured stdlib logger.
    """
    target = logging.getLogger(cfg.logger_name)

    already_configured = bool(getattr(target, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return target

    level_int = _parse_level(cfg.level)
    target.setLevel(level_int)

    _remove_our_handlers(target)

    handler = SimpleLogHandler(sink, level_int)
    handler.setFormatter(logging.Formatter(cfg.fmt))
    _tag_handler(handler)
    target.addHandler(handler)

    setattr(target, _CONFIGURED_FLAG_ATTR, True)
    return target


def reset_logging(logger_name: Optional[str] = None) -> None:
    """Detach the bridge handler and clear the configured flag."""
    target = logging.getLogger(logger_name)
    _remove_our_handlers(target)
    if hasattr(target, _CONFIGURED_FLAG_ATTR):
        delattr(target, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named stdlib logger.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach and close every handler installed by this package."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
