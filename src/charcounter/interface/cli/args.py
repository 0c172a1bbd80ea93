from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema: one positional path plus diagnostic and
output-format flags. Provides the translation from the argparse namespace
to a LoggingConfig.
"""

import argparse

from charcounter.domain.constants import APP_NAME
from charcounter.infra.logging import LoggingConfig

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the charcounter CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Recursively count text files, non-text files and directories under a path, "
            "and report how often each character occurs in the text files."
        ),
    )

    p.add_argument(
        "path",
        help="File or directory to scan.",
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the scan result as JSON instead of a table and summary line.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_logging_config(args: argparse.Namespace) -> LoggingConfig:
    """
    Build the logging configuration requested on the command line.

    Args:
        args: Parsed command-line arguments.

    Returns:
        LoggingConfig: Console logging to stderr, optionally mirrored to a file.
    """
    level = "DEBUG" if args.debug else "WARNING"
    return LoggingConfig(level=level, console=True, log_file=args.log_file)
