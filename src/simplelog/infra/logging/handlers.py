from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the handler that forwards stdlib records to a SimpleLog and the
internal tagging mechanism used to tell our handlers apart from handlers
installed by the host application or third-party libraries.
"""

import logging
from typing import TYPE_CHECKING

from simplelog.infra.logging.config import severity_for

if TYPE_CHECKING:
    from simplelog.core.logger import SimpleLog

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_simplelog_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Return True if the handler carries our internal tag."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# BRIDGE HANDLER
# ==============================================================================

class SimpleLogHandler(logging.Handler):
    """
    Forward stdlib log records to a SimpleLog.

    The record is rendered with the handler's formatter and written at the
    severity matching its level number.
    """

    def __init__(self, sink: "SimpleLog", level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.sink.log(msg, severity_for(record.levelno))
        except Exception:
            self.handleError(record)
