from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, the
timed scan, and rendering of the frequency table and summary line.
"""

import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from charcounter.core.pipeline.engine import run_scan
from charcounter.infra.logging import configure_logging
from charcounter.interface.cli import args as cli_args
from charcounter.interface.cli.report import format_summary, print_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    configure_logging(cli_args.args_to_logging_config(args))
    logger.debug(f"CLI execution initiated for '{args.path}'.")

    try:
        return _run(args.path, json_output=bool(args.json_output))
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        return EXIT_INTERRUPTED


def _run(path: str, *, json_output: bool) -> int:
    """Scan the path and render the outcome in the requested format."""
    result, counter = run_scan(path, announce_invalid=not json_output)

    if json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        print_table(counter)
        try:
            print(format_summary(result))
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write summary: {e}")
            return EXIT_FAILURE

    return EXIT_OK if result.valid_path else EXIT_INVALID_PATH

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
