from __future__ import annotations

"""
SimpleLog: leveled, optionally timestamped and colored logging to the
console and/or files, with per-destination severity filtering and shared
file handles.
"""

from simplelog.core.formatter import build_timestamp, format_line
from simplelog.core.logger import SimpleLog, create_logger
from simplelog.domain.config import LoggerConfig, load_config
from simplelog.domain.errors import ConstructionError, OpenError, SimpleLogError
from simplelog.domain.levels import LEVEL_LABELS, Severity
from simplelog.domain.models import Destination, DestinationSpec, default_destination
from simplelog.infra.registry import HandleRegistry, default_registry
from simplelog.infra.terminal import TerminalCapabilities, get_capabilities, probe_terminal

__version__ = "0.9.0"


def get_version() -> str:
    return __version__


__all__ = [
    "ConstructionError",
    "Destination",
    "DestinationSpec",
    "HandleRegistry",
    "LEVEL_LABELS",
    "LoggerConfig",
    "OpenError",
    "Severity",
    "SimpleLog",
    "SimpleLogError",
    "TerminalCapabilities",
    "build_timestamp",
    "create_logger",
    "default_destination",
    "default_registry",
    "format_line",
    "get_capabilities",
    "get_version",
    "load_config",
    "probe_terminal",
]
