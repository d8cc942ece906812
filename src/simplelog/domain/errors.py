from __future__ import annotations

"""
Error Taxonomy.

Exceptions raised by the registry and the logger. Only ConstructionError is
fatal; OpenError is converted into a warning line by the logger and the
offending destination is dropped.
"""

from typing import Optional


class SimpleLogError(Exception):
    """Base class for all SimpleLog failures."""


class OpenError(SimpleLogError):
    """A log file could not be opened for appending."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Unable to open \"{path}\" for writing"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ConstructionError(SimpleLogError):
    """The destination configuration arrays have inconsistent lengths."""
