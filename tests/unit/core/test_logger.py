from __future__ import annotations

"""
Unit tests for the multi-destination logger.

Verifies:
1. Per-destination level gating and fan-out independence.
2. Construction-time validation (skip, downgrade, fatal mismatch).
3. Positional level updates over the surviving destinations.
4. Default console fallback and teardown.
"""

import io
from pathlib import Path

import pytest

from simplelog.core.logger import SimpleLog, create_logger
from simplelog.domain.config import LoggerConfig
from simplelog.domain.errors import ConstructionError
from simplelog.domain.levels import Severity
from simplelog.domain.models import DestinationSpec
from simplelog.infra.registry import HandleRegistry, canonicalize
from simplelog.infra.terminal import TerminalCapabilities


def make_log(specs, registry, caps, console, prefix=""):
    """Helper to build a logger with injected dependencies."""
    return SimpleLog.from_specs(specs, prefix, registry=registry, capabilities=caps, stream=console)


def console_spec(level=5, ansi=0, ts=0):
    return DestinationSpec(path=None, level=level, use_ansi=ansi, use_timestamp=ts)


def file_spec(path, level=5, ansi=0, ts=0):
    return DestinationSpec(path=str(path), level=level, use_ansi=ansi, use_timestamp=ts)


# -----------------------------------------------------------------------------
# Emit
# -----------------------------------------------------------------------------

def test_prefixed_info_line(registry, plain_caps, console) -> None:
    log = make_log([console_spec()], registry, plain_caps, console, prefix="[X] ")
    log.log("hello", 4)
    assert console.getvalue() == "INFO     - [X] hello\n"


@pytest.mark.parametrize("threshold", range(6))
def test_level_gating(registry, plain_caps, threshold: int) -> None:
    out = io.StringIO()
    log = make_log([console_spec(level=threshold)], registry, plain_caps, out)
    for level in range(6):
        log.log(f"m{level}", level)
    lines = out.getvalue().splitlines()
    assert [line.rsplit(" - ", 1)[1] for line in lines] == [f"m{lv}" for lv in range(threshold + 1)]


def test_filtered_destination_does_not_stop_fan_out(registry, plain_caps, console, tmp_path: Path) -> None:
    target = tmp_path / "all.log"
    log = make_log([console_spec(level=0), file_spec(target, level=5)], registry, plain_caps, console)
    log.debug("details")
    log.close()

    assert console.getvalue() == ""
    assert target.read_text(encoding="utf-8") == "DEBUG    - details\n"


def test_repeated_messages_are_formatted_independently(registry, plain_caps, console) -> None:
    log = make_log([console_spec()], registry, plain_caps, console)
    log.log("same", 2)
    log.log("same", 2)
    first, second = console.getvalue().splitlines()
    assert first == second == "WARNING  - same"


def test_convenience_methods(registry, plain_caps, console) -> None:
    log = make_log([console_spec()], registry, plain_caps, console)
    log.critical("a")
    log.error("b")
    log.warning("c")
    log.notice("d")
    log.info("e")
    log.debug("f")
    labels = [line.split(" - ")[0].strip() for line in console.getvalue().splitlines()]
    assert labels == ["CRITICAL", "ERROR", "WARNING", "NOTICE", "INFO", "DEBUG"]


def test_invalid_message_level(registry, plain_caps, console) -> None:
    log = make_log([console_spec()], registry, plain_caps, console)
    with pytest.raises(ValueError):
        log.log("m", 9)


def test_colored_destination(registry, tty_caps, console) -> None:
    log = make_log([console_spec(ansi=1)], registry, tty_caps, console)
    log.notice("go")
    assert console.getvalue() == "\033[0;32m\033[1;32mNOTICE  \033[0;32m - go\033[0m\n"


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------

def test_invalid_level_spec_is_dropped(registry, plain_caps, console, tmp_path: Path) -> None:
    target = tmp_path / "a.log"
    log = make_log([console_spec(level=7), file_spec(target, level=3)], registry, plain_caps, console)

    assert len(log.destinations) == 1
    assert log.destinations[0].canon_path == canonicalize(str(target))
    assert 'invalid log level "7"' in console.getvalue()

    # Reindexed: position 0 now designates the file destination
    log.set_levels([1])
    assert log.levels == [1]


def test_invalid_level_releases_acquired_handle(registry, plain_caps, console, tmp_path: Path) -> None:
    target = tmp_path / "a.log"
    make_log([file_spec(target, level=9)], registry, plain_caps, console)
    assert len(registry) == 0


@pytest.mark.parametrize("field", ["ansi", "ts"])
def test_non_boolean_flag_is_dropped(registry, plain_caps, console, field: str) -> None:
    spec = console_spec(**{field: 2})
    log = make_log([spec, console_spec()], registry, plain_caps, console)
    assert len(log.destinations) == 1
    assert "WARNING" in console.getvalue()


def test_unopenable_file_is_dropped(registry, plain_caps, console, tmp_path: Path) -> None:
    bad = tmp_path / "missing-dir" / "x.log"
    log = make_log([file_spec(bad), console_spec(level=3)], registry, plain_caps, console)

    assert len(log.destinations) == 1
    assert log.destinations[0].is_console
    assert f'Unable to open "{bad}" for writing' in console.getvalue()


def test_nul_byte_path_is_dropped(registry, plain_caps, console) -> None:
    log = make_log([file_spec("bad\0name.log"), console_spec(level=3)], registry, plain_caps, console)

    assert len(log.destinations) == 1
    assert log.destinations[0].is_console
    assert "WARNING" in console.getvalue()
    assert "for writing" in console.getvalue()
    assert len(registry) == 0


def test_non_path_file_entry_is_dropped(registry, plain_caps, console, tmp_path: Path) -> None:
    good = tmp_path / "good.log"
    log = create_logger(
        registry=registry, capabilities=plain_caps, stream=console,
        logFiles=[str(good), 1, None], logLevels=[5, 5, 5], useANSICodes=[0, 0, 0], useTimestamps=[0, 0, 0],
    )

    assert log is not None
    assert [d.is_console for d in log.destinations] == [False, True]
    assert 'Unable to open "1" for writing' in console.getvalue()
    assert registry.ref_count(canonicalize(str(good))) == 1
    log.close()
    assert len(registry) == 0


def test_color_downgraded_when_unsupported(registry, no_ansi_caps, console) -> None:
    log = make_log([console_spec(ansi=1)], registry, no_ansi_caps, console)
    assert log.destinations[0].use_ansi is False
    assert "NOTICE" in console.getvalue()
    assert "not supported by terminal" in console.getvalue()


def test_inconsistent_lengths_are_fatal(registry, plain_caps, console, tmp_path: Path) -> None:
    cfg = LoggerConfig(
        log_files=(str(tmp_path / "a.log"), str(tmp_path / "b.log")),
        log_levels=(3,),
        use_ansi_codes=(0, 0),
        use_timestamps=(0, 0),
    )
    with pytest.raises(ConstructionError):
        SimpleLog(cfg, registry=registry, capabilities=plain_caps, stream=console)

    assert "CRITICAL" in console.getvalue()
    assert len(registry) == 0
    assert not (tmp_path / "a.log").exists()


def test_create_logger_returns_sentinel_on_mismatch(registry, plain_caps, console) -> None:
    log = create_logger(
        registry=registry, capabilities=plain_caps, stream=console,
        logFiles=["a.log", "b.log"], logLevels=[1], useANSICodes=[0, 0], useTimestamps=[0, 0],
    )
    assert log is None


def test_create_logger_reports_unknown_keys(registry, plain_caps, console) -> None:
    log = create_logger(
        registry=registry, capabilities=plain_caps, stream=console,
        logFiles=[None], logLevels=[5], useANSICodes=[0], useTimestamps=[0], rotate=True,
    )
    assert log is not None
    assert 'Ignoring invalid constructor parameter "rotate"' in console.getvalue()
    assert len(log.destinations) == 1


def test_construction_diagnostics_use_prefix(registry, plain_caps, console) -> None:
    make_log([console_spec(level="x")], registry, plain_caps, console, prefix="app: ")
    assert 'app: [SimpleLog] invalid log level "x"' in console.getvalue()


# -----------------------------------------------------------------------------
# Default destination
# -----------------------------------------------------------------------------

def test_default_console_fallback(registry, tty_caps, console) -> None:
    log = make_log([], registry, tty_caps, console)
    assert log.destinations == ()

    log.log("first", 4)
    log.log("second", 4)

    out = console.getvalue()
    assert out.count("No log file configured") == 1
    assert "first" in out and "second" in out
    assert len(log.destinations) == 1
    assert log.destinations[0].use_ansi is True


# -----------------------------------------------------------------------------
# Level updates
# -----------------------------------------------------------------------------

def test_set_levels_changes_only_given_positions(registry, plain_caps, console, tmp_path: Path) -> None:
    targets = [tmp_path / f"d{i}.log" for i in range(3)]
    log = make_log([file_spec(t, level=5) for t in targets], registry, plain_caps, console)

    log.set_levels([2])
    assert log.levels == [2, 5, 5]

    log.log("notice", Severity.NOTICE)
    log.close()
    assert [t.read_text(encoding="utf-8") for t in targets] == ["", "NOTICE   - notice\n", "NOTICE   - notice\n"]


def test_set_levels_skips_none_and_invalid(registry, plain_caps, console) -> None:
    log = make_log([console_spec(level=1), console_spec(level=2), console_spec(level=3)],
                   registry, plain_caps, console)
    log.set_levels([None, 9, "4"])
    assert log.levels == [1, 2, 4]
    assert "ignoring invalid new log level in set_levels call (9)" in console.getvalue()


def test_set_levels_truncates_extra_values(registry, plain_caps, console) -> None:
    log = make_log([console_spec(level=5)], registry, plain_caps, console)
    log.set_levels([4, 0, 0])
    assert log.levels == [4]
    assert console.getvalue().count("too many level values") == 1


# -----------------------------------------------------------------------------
# Teardown
# -----------------------------------------------------------------------------

def test_close_releases_each_file_destination(registry, plain_caps, console, tmp_path: Path) -> None:
    target = tmp_path / "a.log"
    log = make_log([file_spec(target), file_spec(target, level=2)], registry, plain_caps, console)
    key = canonicalize(str(target))
    assert registry.ref_count(key) == 2

    log.close()
    assert key not in registry
    assert log.closed

    # idempotent per logger
    log.close()
    assert len(registry) == 0


def test_closed_logger_discards_messages(registry, plain_caps, console) -> None:
    log = make_log([console_spec()], registry, plain_caps, console)
    log.close()
    log.info("late")
    assert console.getvalue() == ""


def test_context_manager_closes(registry: HandleRegistry, plain_caps: TerminalCapabilities,
                                console, tmp_path: Path) -> None:
    target = tmp_path / "a.log"
    with make_log([file_spec(target)], registry, plain_caps, console) as log:
        log.log("inside", Severity.ERROR)
        assert len(registry) == 1
    assert len(registry) == 0
    assert target.read_text(encoding="utf-8") == "ERROR    - inside\n"
