from __future__ import annotations

"""
Multi-Destination Logger.

A SimpleLog fans every message out to an ordered list of destinations
(console or files), each with its own severity threshold, timestamp flag and
color flag. Invalid destinations are dropped at construction with a warning
written through the logger itself; only inconsistent parameter arrays are
fatal. File handles are shared through the HandleRegistry and released by
close() or by leaving a ``with`` block.
"""

import logging
import sys
from dataclasses import replace
from typing import Any, Iterable, List, Mapping, Optional, TextIO, Tuple

from simplelog.core.formatter import format_line
from simplelog.domain.config import LoggerConfig
from simplelog.domain.errors import ConstructionError, OpenError
from simplelog.domain.levels import Severity, coerce_flag, coerce_level
from simplelog.domain.models import Destination, DestinationSpec, default_destination
from simplelog.infra.registry import HandleRegistry, default_registry
from simplelog.infra.terminal import TerminalCapabilities, get_capabilities

logger = logging.getLogger(__name__)

DIAG_PREFIX = "[SimpleLog] "


class SimpleLog:
    """
    Leveled logger writing to one or more destinations.

    Destination indices used by set_levels() refer to the destinations that
    survived validation: if the second of five specs is dropped, the third
    one becomes index 1.
    """

    def __init__(
            self,
            config: Optional[LoggerConfig] = None,
            *,
            registry: Optional[HandleRegistry] = None,
            capabilities: Optional[TerminalCapabilities] = None,
            stream: Optional[TextIO] = None,
    ) -> None:
        """
        Build the destination list from a configuration.

        Args:
            config: Destination parameters and message prefix.
            registry: Shared file handle registry (process-wide one by default).
            capabilities: Terminal probe result (probed once per process by default).
            stream: Console stream (sys.stdout at write time by default).

        Raises:
            ConstructionError: If the per-destination arrays differ in length.
        """
        self._config = config if config is not None else LoggerConfig()
        self._registry = registry if registry is not None else default_registry()
        self._caps = capabilities if capabilities is not None else get_capabilities()
        self._stream = stream
        self._prefix = self._config.prefix
        self._closed = False

        # Until the real list is built, diagnostics go to the console
        self._destinations: List[Destination] = [default_destination(self._caps)]

        for key in self._config.ignored_keys:
            self._diag(f"Ignoring invalid constructor parameter \"{key}\"", Severity.NOTICE)

        if not self._config.is_consistent():
            self._diag(
                "Unable to initialize SimpleLog, inconsistent constructor parameters",
                Severity.CRITICAL,
            )
            self._destinations = []
            self._closed = True
            raise ConstructionError("Inconsistent destination parameter lengths")

        self._destinations = self._build_destinations(self._config.destination_specs())
        logger.debug(f"SimpleLog initialized with {len(self._destinations)} destination(s)")

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_specs(cls, specs: Iterable[DestinationSpec], prefix: str = "", **kwargs: Any) -> "SimpleLog":
        return cls(LoggerConfig.from_specs(specs, prefix), **kwargs)

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any], **kwargs: Any) -> "SimpleLog":
        return cls(LoggerConfig.from_mapping(params), **kwargs)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def destinations(self) -> Tuple[Destination, ...]:
        return tuple(self._destinations)

    @property
    def levels(self) -> List[int]:
        return [d.level for d in self._destinations]

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, message: str, level: int = Severity.INFO) -> None:
        """
        Write a message to every destination whose threshold admits it.

        Args:
            message: Message text; the configured prefix is prepended.
            level: Severity of the message, 0 (CRITICAL) to 5 (DEBUG).

        Raises:
            ValueError: If the level is outside [0, 5].
        """
        severity = Severity(level)
        if self._closed:
            return

        if not self._destinations:
            self._destinations.append(default_destination(self._caps))
            self._diag("No log file configured, redirecting to standard output", Severity.INFO)

        text = f"{self._prefix}{message}"
        for dest in list(self._destinations):
            if not dest.admits(severity):
                continue
            line = format_line(
                text,
                severity,
                use_timestamp=dest.use_timestamp,
                use_ansi=dest.use_ansi,
            )
            self._write(dest, line)

    def critical(self, message: str) -> None:
        self.log(message, Severity.CRITICAL)

    def error(self, message: str) -> None:
        self.log(message, Severity.ERROR)

    def warning(self, message: str) -> None:
        self.log(message, Severity.WARNING)

    def notice(self, message: str) -> None:
        self.log(message, Severity.NOTICE)

    def info(self, message: str) -> None:
        self.log(message, Severity.INFO)

    def debug(self, message: str) -> None:
        self.log(message, Severity.DEBUG)

    def set_levels(self, levels: Iterable[Optional[Any]]) -> None:
        """
        Update destination thresholds by position.

        None entries leave the matching destination unchanged, invalid values
        are reported and ignored, and values beyond the destination list are
        reported once and discarded.

        Args:
            levels: New level per destination index.
        """
        new_levels = list(levels)
        if len(new_levels) > len(self._destinations):
            self._diag("set_levels called with too many level values", Severity.NOTICE)
            new_levels = new_levels[:len(self._destinations)]

        for index, value in enumerate(new_levels):
            if value is None:
                continue
            level = coerce_level(value)
            if level is None:
                self._diag(
                    f"ignoring invalid new log level in set_levels call ({value})",
                    Severity.WARNING,
                )
                continue
            self._destinations[index] = replace(self._destinations[index], level=level)

    def close(self) -> None:
        """Release the registry reference of every file destination."""
        if self._closed:
            return
        self._closed = True
        destinations, self._destinations = self._destinations, []
        for dest in destinations:
            if dest.canon_path is not None:
                self._registry.release(dest.canon_path)

    def __enter__(self) -> "SimpleLog":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._destinations)} destinations"
        return f"<SimpleLog prefix={self._prefix!r} {state}>"

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _build_destinations(self, specs: List[DestinationSpec]) -> List[Destination]:
        """Validate specs in order, dropping the invalid ones with a warning."""
        accepted: List[Destination] = []

        for spec in specs:
            canon_path: Optional[str] = None
            if spec.path:
                try:
                    canon_path = self._registry.acquire(spec.path)
                except OpenError as e:
                    logger.debug(str(e))
                    self._diag(f"Unable to open \"{spec.path}\" for writing", Severity.WARNING)
                    continue

            level = coerce_level(spec.level)
            if level is None:
                self._diag(f"invalid log level \"{spec.level}\"", Severity.WARNING)
                self._release(canon_path)
                continue

            use_ansi = coerce_flag(spec.use_ansi)
            if use_ansi is None:
                self._diag(f"invalid use_ansi_codes value \"{spec.use_ansi}\"", Severity.WARNING)
                self._release(canon_path)
                continue
            if use_ansi and not self._caps.ansi_supported:
                self._diag(
                    "ignoring use_ansi_codes mode (not supported by terminal)",
                    Severity.NOTICE,
                )
                use_ansi = False

            use_timestamp = coerce_flag(spec.use_timestamp)
            if use_timestamp is None:
                self._diag(
                    f"invalid use_timestamps value \"{spec.use_timestamp}\"",
                    Severity.WARNING,
                )
                self._release(canon_path)
                continue

            accepted.append(Destination(
                canon_path=canon_path,
                level=level,
                use_timestamp=use_timestamp,
                use_ansi=use_ansi,
            ))

        return accepted

    def _release(self, canon_path: Optional[str]) -> None:
        if canon_path is not None:
            self._registry.release(canon_path)

    def _diag(self, message: str, level: Severity) -> None:
        self.log(DIAG_PREFIX + message, level)

    def _write(self, dest: Destination, line: str) -> None:
        if dest.canon_path is None:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(line)
            stream.flush()
        else:
            self._registry.write(dest.canon_path, line)


def create_logger(
        *,
        registry: Optional[HandleRegistry] = None,
        capabilities: Optional[TerminalCapabilities] = None,
        stream: Optional[TextIO] = None,
        **params: Any,
) -> Optional[SimpleLog]:
    """
    Permissive factory mirroring the historical constructor.

    Unknown keyword parameters are reported and ignored. Inconsistent
    destination arrays yield None after a CRITICAL line has been written.

    Returns:
        Optional[SimpleLog]: The logger, or None when construction failed.
    """
    try:
        return SimpleLog.from_mapping(
            params, registry=registry, capabilities=capabilities, stream=stream
        )
    except ConstructionError:
        return None
