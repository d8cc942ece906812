from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema. Destination options are
repeatable and collected into parallel arrays, one entry per destination,
exactly like the library constructor; a length mismatch between them is
therefore reported by the logger as a fatal configuration error.
"""

import argparse
from typing import Any, Dict, List, Optional

from simplelog import __version__
from simplelog.domain.config import LoggerConfig, load_config
from simplelog.domain.levels import Severity, coerce_level

CONSOLE_TOKEN = "-"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the simplelog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="simplelog",
        description="Write leveled log lines to the console and/or log files.",
    )

    p.add_argument(
        "message",
        nargs="*",
        help="Message to log. Lines are read from stdin when omitted.",
    )

    # --- Destinations (one entry per destination, in order) ---
    p.add_argument(
        "-f", "--log-file",
        dest="log_files",
        action="append",
        default=None,
        help=f"Destination file; '{CONSOLE_TOKEN}' for the console. Repeatable.",
    )
    p.add_argument(
        "-l", "--log-level",
        dest="log_levels",
        action="append",
        default=None,
        help="Severity threshold (0-5) of the matching destination. Repeatable.",
    )
    p.add_argument(
        "-a", "--ansi",
        dest="use_ansi_codes",
        action="append",
        default=None,
        help="Color flag (0/1) of the matching destination. Repeatable.",
    )
    p.add_argument(
        "-t", "--timestamp",
        dest="use_timestamps",
        action="append",
        default=None,
        help="Timestamp flag (0/1) of the matching destination. Repeatable.",
    )

    # --- Global options ---
    p.add_argument("-p", "--prefix", default=None, help="Prefix prepended to every message.")
    p.add_argument("-c", "--config", dest="config_file", default=None, help="JSON configuration file.")
    p.add_argument(
        "-s", "--severity",
        type=parse_severity,
        default=int(Severity.INFO),
        help="Severity of the message, by number (0-5) or name. Default: INFO.",
    )
    p.add_argument(
        "--set-levels",
        dest="set_levels",
        default=None,
        help="Comma separated thresholds applied after construction; empty entries are skipped.",
    )
    p.add_argument("--debug", action="store_true", help="Trace internal operations on stderr.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# VALUE PARSING
# -----------------------------------------------------------------------------

def parse_severity(value: str) -> int:
    """Accept a level number or a level name (case-insensitive)."""
    name = value.strip().upper()
    if name in Severity.__members__:
        return int(Severity[name])
    level = coerce_level(value)
    if level is None:
        raise argparse.ArgumentTypeError(f"Invalid severity: {value}")
    return level


def parse_level_list(raw: Optional[str]) -> List[Optional[str]]:
    """Split a --set-levels value, mapping empty entries to None."""
    if raw is None:
        return []
    return [item.strip() or None for item in raw.split(",")]

# -----------------------------------------------------------------------------
# CONFIGURATION MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> LoggerConfig:
    """
    Translate parsed arguments into a logger configuration.

    A configuration file provides the base values. Destination options on the
    command line replace the file's destinations as a whole.

    Raises:
        OSError: If the configuration file cannot be read.
        ValueError: If the configuration file is malformed.
    """
    base = load_config(args.config_file) if args.config_file else LoggerConfig()

    arrays = (args.log_files, args.log_levels, args.use_ansi_codes, args.use_timestamps)
    overrides: Dict[str, Any] = {}
    if any(a is not None for a in arrays):
        overrides = {
            "log_files": tuple(None if f == CONSOLE_TOKEN else f for f in args.log_files or ()),
            "log_levels": tuple(args.log_levels or ()),
            "use_ansi_codes": tuple(args.use_ansi_codes or ()),
            "use_timestamps": tuple(args.use_timestamps or ()),
        }

    return LoggerConfig(
        log_files=overrides.get("log_files", base.log_files),
        log_levels=overrides.get("log_levels", base.log_levels),
        use_ansi_codes=overrides.get("use_ansi_codes", base.use_ansi_codes),
        use_timestamps=overrides.get("use_timestamps", base.use_timestamps),
        prefix=args.prefix if args.prefix is not None else base.prefix,
        ignored_keys=base.ignored_keys,
    )
