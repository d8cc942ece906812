from __future__ import annotations

"""
Destination Data Models.

Defines the validated destination record held by a logger, the raw
unvalidated specification it is built from, and the factory for the default
console destination used when nothing else is configured.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from simplelog.domain.levels import MAX_LEVEL

if TYPE_CHECKING:
    from simplelog.infra.terminal import TerminalCapabilities

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Destination:
    """
    One validated output sink.

    Attributes:
        canon_path: Registry key of the backing file, or None for the console.
        level: Severity threshold; messages at a level <= this are delivered.
        use_timestamp: Prefix every line with a 14 digit local timestamp.
        use_ansi: Wrap every line in ANSI color sequences.
    """
    canon_path: Optional[str]
    level: int
    use_timestamp: bool
    use_ansi: bool

    @property
    def is_console(self) -> bool:
        return self.canon_path is None

    def admits(self, level: int) -> bool:
        return level <= self.level


@dataclass(frozen=True)
class DestinationSpec:
    """
    Raw destination request, as found in configuration.

    Values are deliberately typed as Any: validation happens in the logger,
    which drops invalid specs with a warning instead of failing.
    """
    path: Optional[str] = None
    level: Any = MAX_LEVEL
    use_ansi: Any = 0
    use_timestamp: Any = 1

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def default_destination(capabilities: "TerminalCapabilities") -> Destination:
    """
    Build a fresh console destination receiving every message.

    Timestamps are enabled when stdout is redirected, colors when it is an
    interactive terminal able to render ANSI sequences.

    Args:
        capabilities: Result of the terminal capability probe.

    Returns:
        Destination: A new console destination at DEBUG level.
    """
    return Destination(
        canon_path=None,
        level=MAX_LEVEL,
        use_timestamp=not capabilities.is_tty,
        use_ansi=capabilities.is_tty and capabilities.ansi_supported,
    )
