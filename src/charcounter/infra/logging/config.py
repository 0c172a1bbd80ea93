from __future__ import annotations

"""
Logging Configuration Models.

The CLI picks a level, always logs to stderr, and may mirror records to a
rotating file. Formats and rotation limits are fixed here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Levels selectable from the command line (--debug or the quiet default)
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "WARNING": logging.WARNING,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings derived from the command line.

    Attributes:
        level: "DEBUG" or "WARNING"; anything else is treated as WARNING.
        console: Emit records on stderr.
        log_file: Optional path for a rotating log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
