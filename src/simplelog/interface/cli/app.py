from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: optional diagnostic tracing, configuration
resolution (JSON file and command-line destinations), logger construction,
message delivery and deterministic release of file handles.
"""

import sys
from typing import Iterable, List, Optional

from simplelog.core.logger import SimpleLog
from simplelog.domain.errors import ConstructionError
from simplelog.infra.logging import LoggingConfig, configure_logging, get_logger, reset_logging
from simplelog.interface.cli import args as cli_args

logger = get_logger(__name__)

_TRACE_LOGGER = "simplelog"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 2 for configuration failures).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Internal tracing goes to its own console logger on stderr
    tracer: Optional[SimpleLog] = None
    if args.debug:
        tracer = SimpleLog(stream=sys.stderr)
        configure_logging(LoggingConfig(level="DEBUG", logger_name=_TRACE_LOGGER), tracer)

    try:
        try:
            config = cli_args.args_to_config(args)
        except (OSError, ValueError) as e:
            print(f"ERROR: Unable to load configuration: {e}", file=sys.stderr)
            return 2

        try:
            log = SimpleLog(config)
        except ConstructionError:
            return 2

        with log:
            if args.set_levels is not None:
                log.set_levels(cli_args.parse_level_list(args.set_levels))

            for message in _messages(args.message):
                log.log(message, args.severity)

        logger.debug("CLI run completed")
        return 0
    finally:
        if tracer is not None:
            reset_logging(_TRACE_LOGGER)
            tracer.close()

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _messages(words: List[str]) -> Iterable[str]:
    """Yield the positional message, or each stdin line when there is none."""
    if words:
        yield " ".join(words)
        return
    for line in sys.stdin:
        yield line.rstrip("\r\n")


if __name__ == "__main__":
    sys.exit(main())
