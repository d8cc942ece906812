from __future__ import annotations

"""
Shared File Handle Registry.

Maps canonical file paths to a single open append-mode handle and a
reference count. Several destinations (within one logger or across loggers)
targeting the same file share one handle, which is closed only when the last
reference is released. All operations are serialized with a re-entrant lock.
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Dict, Optional, TextIO

from simplelog.domain.errors import OpenError

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    handle: TextIO
    ref_count: int


def canonicalize(path: str) -> str:
    """
    Compute the sharing key of a file path.

    The path is made absolute with symlinks resolved; on case-insensitive platforms
    it is also case-folded.

    Args:
        path: User-supplied file path.

    Returns:
        str: Canonical key.
    """
    return os.path.normcase(os.path.realpath(os.fspath(path)))


class HandleRegistry:
    """
    Reference-counted table of open log files.

    Loggers hold the keys returned by acquire() and never touch raw handles.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.RLock()

    def acquire(self, path: str) -> str:
        """
        Take a reference on a log file, opening it on first use.

        Args:
            path: File path to append to.

        Returns:
            str: Canonical key to pass to write() and release().

        Raises:
            OpenError: If the path is malformed or the file cannot be opened for appending.
        """
        try:
            key = canonicalize(path)
        except (OSError, TypeError, ValueError) as e:
            raise OpenError(str(path), str(e)) from e

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                entry.ref_count += 1
                logger.debug(f"HandleRegistry: {key} shared (refs={entry.ref_count})")
                return key

            try:
                handle = open(path, "a", encoding="utf-8")
            except (OSError, TypeError, ValueError) as e:
                raise OpenError(str(path), str(e)) from e

            self._entries[key] = _Entry(handle=handle, ref_count=1)
            logger.debug(f"HandleRegistry: opened {key}")
            return key

    def release(self, key: str) -> None:
        """
        Drop one reference; close the handle when none remain.

        Args:
            key: Canonical key obtained from acquire().
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.warning(f"HandleRegistry: release of unknown key {key}")
                return

            entry.ref_count -= 1
            if entry.ref_count > 0:
                return

            del self._entries[key]
            entry.handle.close()
            logger.debug(f"HandleRegistry: closed {key}")

    def write(self, key: str, text: str) -> None:
        """
        Append text to the file behind a live key and flush immediately.

        Raises:
            KeyError: If the key holds no reference.
        """
        with self._lock:
            handle = self._entries[key].handle
            handle.write(text)
            handle.flush()

    def ref_count(self, key: str) -> int:
        with self._lock:
            entry = self._entries.get(key)
            return entry.ref_count if entry else 0

    def is_open(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __contains__(self, key: object) -> bool:
        return self.is_open(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_DEFAULT_REGISTRY: Optional[HandleRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> HandleRegistry:
    """Return the process-wide registry used when none is injected."""
    global _DEFAULT_REGISTRY
    with _DEFAULT_LOCK:
        if _DEFAULT_REGISTRY is None:
            _DEFAULT_REGISTRY = HandleRegistry()
        return _DEFAULT_REGISTRY
