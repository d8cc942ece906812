from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: an isolated handle registry, injected terminal
   capabilities and an in-memory console stream.
"""

import io
import os
import sys
from typing import Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from simplelog.infra.registry import HandleRegistry  # noqa: E402
from simplelog.infra.terminal import TerminalCapabilities  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def registry() -> Generator[HandleRegistry, None, None]:
    """
    Provide a private registry so tests never share handles.

    Any handle still open at teardown is closed to avoid leaking files
    between tests.
    """
    reg = HandleRegistry()
    yield reg
    for entry in list(reg._entries.values()):
        entry.handle.close()
    reg._entries.clear()


@pytest.fixture
def plain_caps() -> TerminalCapabilities:
    """Redirected output on an ANSI capable environment."""
    return TerminalCapabilities(is_tty=False, ansi_supported=True)


@pytest.fixture
def tty_caps() -> TerminalCapabilities:
    """Interactive terminal rendering ANSI sequences."""
    return TerminalCapabilities(is_tty=True, ansi_supported=True)


@pytest.fixture
def no_ansi_caps() -> TerminalCapabilities:
    """Interactive terminal without ANSI rendering."""
    return TerminalCapabilities(is_tty=True, ansi_supported=False)


@pytest.fixture
def console() -> io.StringIO:
    """In-memory console stream."""
    return io.StringIO()
