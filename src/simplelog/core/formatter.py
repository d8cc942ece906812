from __future__ import annotations

"""
Log Line Formatting.

Renders one message into its final textual form:

    [ESC[0;Cm][timestamp - ][ESC[1;Cm]LABEL[ESC[0;Cm] - message[ESC[0m]\\n

Bracketed segments only appear when colors or timestamps are enabled. The
functions are pure; nothing is cached between calls.
"""

from datetime import datetime
from typing import Optional

from simplelog.domain.levels import ANSI_CODES, Severity, level_label

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
SEPARATOR = " - "


def _ansi(seq: str) -> str:
    return f"\033[{seq}m"


RESET = _ansi("0")


def build_timestamp(now: Optional[datetime] = None) -> str:
    """Return the local time as 14 concatenated digits (YYYYMMDDHHMMSS)."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def format_line(
        message: str,
        level: int,
        *,
        use_timestamp: bool,
        use_ansi: bool,
        now: Optional[datetime] = None,
) -> str:
    """
    Format a message for one destination.

    Args:
        message: Fully prefixed message text.
        level: Severity of the message, 0 to 5.
        use_timestamp: Prepend the timestamp segment.
        use_ansi: Wrap the line in color sequences.
        now: Fixed time for the timestamp (defaults to the current time).

    Returns:
        str: The line, including its trailing newline.
    """
    severity = Severity(level)

    color = bold = normal = ""
    if use_ansi:
        code = ANSI_CODES[severity]
        color = _ansi(f"0;{code}")
        bold = _ansi(f"1;{code}")
        normal = RESET

    ts = build_timestamp(now) + SEPARATOR if use_timestamp else ""

    return f"{color}{ts}{bold}{level_label(severity)}{color}{SEPARATOR}{message}{normal}\n"
