from __future__ import annotations

"""
Logger Configuration Domain.

Holds the constructor parameters of a logger as four parallel arrays (one
entry per destination) plus a message prefix. Supports building the
configuration from keyword mappings, from a list of destination records and
from JSON files on disk. Unknown keys are kept aside so that the logger can
report them instead of rejecting the configuration.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from simplelog.domain.models import DestinationSpec

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Aliases
# -----------------------------------------------------------------------------

# Both the historical camelCase names and snake_case names are understood
_KEY_ALIASES: Dict[str, str] = {
    "logFiles": "log_files",
    "log_files": "log_files",
    "logLevels": "log_levels",
    "log_levels": "log_levels",
    "useANSICodes": "use_ansi_codes",
    "use_ansi_codes": "use_ansi_codes",
    "useTimestamps": "use_timestamps",
    "use_timestamps": "use_timestamps",
    "prefix": "prefix",
}

# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable constructor parameters of a logger.

    Attributes:
        log_files: File path per destination; None or "" means the console.
        log_levels: Severity threshold per destination.
        use_ansi_codes: Color flag per destination.
        use_timestamps: Timestamp flag per destination.
        prefix: String prepended to every message.
        ignored_keys: Unrecognized configuration keys, reported at startup.
    """
    log_files: Tuple[Any, ...] = ()
    log_levels: Tuple[Any, ...] = ()
    use_ansi_codes: Tuple[Any, ...] = ()
    use_timestamps: Tuple[Any, ...] = ()
    prefix: str = ""
    ignored_keys: Tuple[str, ...] = ()

    def is_consistent(self) -> bool:
        """Return True when the four per-destination arrays have equal length."""
        n = len(self.log_files)
        return (
            len(self.log_levels) == n
            and len(self.use_ansi_codes) == n
            and len(self.use_timestamps) == n
        )

    def destination_specs(self) -> List[DestinationSpec]:
        """
        Zip the parallel arrays into destination records.

        Returns:
            List[DestinationSpec]: One record per destination, in order.

        Raises:
            ValueError: If the arrays are not consistent.
        """
        if not self.is_consistent():
            raise ValueError("Inconsistent destination parameter lengths")
        return [
            DestinationSpec(path=f or None, level=lv, use_ansi=a, use_timestamp=t)
            for f, lv, a, t in zip(
                self.log_files, self.log_levels, self.use_ansi_codes, self.use_timestamps
            )
        ]

    @classmethod
    def from_specs(cls, specs: Iterable[DestinationSpec], prefix: str = "") -> "LoggerConfig":
        """Build a configuration from a list of destination records."""
        specs = list(specs)
        return cls(
            log_files=tuple(s.path for s in specs),
            log_levels=tuple(s.level for s in specs),
            use_ansi_codes=tuple(s.use_ansi for s in specs),
            use_timestamps=tuple(s.use_timestamp for s in specs),
            prefix=prefix,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LoggerConfig":
        """
        Build a configuration from keyword parameters.

        Args:
            mapping: Parameter dictionary (camelCase or snake_case keys).

        Returns:
            LoggerConfig: The configuration; unknown keys end up in ignored_keys.
        """
        values: Dict[str, Any] = {}
        ignored: List[str] = []
        for key, value in mapping.items():
            field_name = _KEY_ALIASES.get(key)
            if field_name is None:
                ignored.append(str(key))
                continue
            values[field_name] = value

        prefix = values.pop("prefix", "")
        arrays = {name: _as_tuple(value) for name, value in values.items()}
        return cls(
            prefix="" if prefix is None else str(prefix),
            ignored_keys=tuple(ignored),
            **arrays,
        )

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: str) -> LoggerConfig:
    """
    Load a logger configuration from a JSON file.

    Args:
        path: Location of a JSON document holding an object.

    Returns:
        LoggerConfig: The parsed configuration.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(
            f"Logger configuration must be a JSON object, got {type(data).__name__}"
        )

    logger.debug(f"Logger configuration loaded from {path}")
    return LoggerConfig.from_mapping(data)

# -----------------------------------------------------------------------------
# Private Helpers
# -----------------------------------------------------------------------------

def _as_tuple(value: Optional[Any]) -> Tuple[Any, ...]:
    """Normalize a scalar or sequence parameter into a tuple."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)
