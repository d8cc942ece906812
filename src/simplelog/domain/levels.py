from __future__ import annotations

"""
Severity Level Definitions.

Centralizes the numeric severity scale, the fixed-width labels printed in
every log line and the ANSI color palette associated with each level.
Lower numbers are more severe.
"""

import re
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

# -----------------------------------------------------------------------------
# SEVERITY SCALE
# -----------------------------------------------------------------------------

class Severity(IntEnum):
    CRITICAL = 0
    ERROR = 1
    WARNING = 2
    NOTICE = 3
    INFO = 4
    DEBUG = 5


MIN_LEVEL: int = int(Severity.CRITICAL)
MAX_LEVEL: int = int(Severity.DEBUG)

# Padded to 8 characters so that messages line up
LEVEL_LABELS: Tuple[str, ...] = (
    "CRITICAL",
    "ERROR   ",
    "WARNING ",
    "NOTICE  ",
    "INFO    ",
    "DEBUG   ",
)

ANSI_CODES: Dict[Severity, int] = {
    Severity.CRITICAL: 35,  # magenta
    Severity.ERROR: 31,     # red
    Severity.WARNING: 33,   # yellow
    Severity.NOTICE: 32,    # green
    Severity.INFO: 37,      # white
    Severity.DEBUG: 36,     # cyan
}

_DIGITS_RE = re.compile(r"^\d+$")

# -----------------------------------------------------------------------------
# VALUE COERCION
# -----------------------------------------------------------------------------

def coerce_level(value: Any) -> Optional[int]:
    """
    Interpret a user-supplied severity threshold.

    Accepts integers and strings made only of decimal digits. Booleans are
    rejected even though they are integers in Python.

    Args:
        value: Raw level value from configuration or CLI.

    Returns:
        Optional[int]: The level in [0, 5], or None when the value is invalid.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        level = int(value)
    elif isinstance(value, str) and _DIGITS_RE.match(value.strip()):
        level = int(value.strip())
    else:
        return None

    if MIN_LEVEL <= level <= MAX_LEVEL:
        return level
    return None


def coerce_flag(value: Any) -> Optional[bool]:
    """
    Interpret a boolean-valued option (color / timestamp).

    Only True/False, 0/1 and their string forms "0"/"1" are accepted.

    Args:
        value: Raw flag value.

    Returns:
        Optional[bool]: The flag, or None when the value is not boolean-valued.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip() in ("0", "1"):
        return value.strip() == "1"
    return None


def level_label(level: int) -> str:
    """Return the fixed-width label for a severity level."""
    return LEVEL_LABELS[int(level)]
