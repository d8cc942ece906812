from __future__ import annotations

"""
Terminal Capability Probe.

Detects once per process whether stdout is an interactive terminal and
whether ANSI escape sequences can be rendered. Windows consoles are switched
to ANSI mode through colorama. The result is handed to loggers as plain
configuration so that tests can inject any combination.
"""

import functools
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

import colorama

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalCapabilities:
    """
    Attributes:
        is_tty: stdout is attached to an interactive terminal.
        ansi_supported: The environment renders ANSI color sequences.
    """
    is_tty: bool
    ansi_supported: bool


def _stream_is_tty(stream: Optional[TextIO]) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached stream
        return False


def _ansi_supported() -> bool:
    if sys.platform == "win32":
        # Enables VT processing, or installs the win32 translation layer
        colorama.just_fix_windows_console()
        return True
    return os.environ.get("TERM", "") != "dumb"


def probe_terminal(stream: Optional[TextIO] = None) -> TerminalCapabilities:
    """
    Inspect a stream and the environment.

    Args:
        stream: Stream to inspect. Defaults to sys.stdout.

    Returns:
        TerminalCapabilities: The detected capabilities.
    """
    caps = TerminalCapabilities(
        is_tty=_stream_is_tty(stream if stream is not None else sys.stdout),
        ansi_supported=_ansi_supported(),
    )
    logger.debug(f"Terminal probe: tty={caps.is_tty} ansi={caps.ansi_supported}")
    return caps


@functools.lru_cache(maxsize=None)
def get_capabilities() -> TerminalCapabilities:
    """Return the process-wide capability probe, computed on first call."""
    return probe_terminal()
