from __future__ import annotations

"""
Terminal Report Rendering.

Acts as the 'View' for the CLI: turns the counter into a frequency table
sorted by descending count and formats the one-line run summary.
"""

import logging
import sys
from typing import List, Optional, TextIO, Tuple

from tabulate import tabulate

from charcounter.domain.constants import (
    SUMMARY_TEMPLATE,
    TABLE_COLALIGN,
    TABLE_FORMAT,
    TABLE_HEADERS,
    TABLE_PRINT_ERROR,
)
from charcounter.domain.counter import CharCounter
from charcounter.domain.scan_models import ScanResult, code_point_label

logger = logging.getLogger(__name__)

TableRow = Tuple[str, str, int]

# -----------------------------------------------------------------------------
# TABLE
# -----------------------------------------------------------------------------

def display_char(character: str) -> str:
    """
    Return a form of the character that keeps table cells on one line.

    Whitespace and non-printable characters are shown as their repr.
    """
    if character.isprintable() and not character.isspace():
        return character
    return repr(character)


def build_rows(counter: CharCounter) -> List[TableRow]:
    """
    Build one row per distinct character.

    Args:
        counter: Populated counter.

    Returns:
        List[TableRow]: (display character, code point label, count), count descending.
    """
    return [
        (display_char(c), code_point_label(c), n)
        for c, n in counter.sorted_frequencies()
    ]


def render_table(counter: CharCounter) -> str:
    """Render the frequency table as plain text."""
    return tabulate(
        build_rows(counter),
        headers=TABLE_HEADERS,
        tablefmt=TABLE_FORMAT,
        colalign=TABLE_COLALIGN,
        disable_numparse=True,
    )


def print_table(counter: CharCounter, stream: Optional[TextIO] = None) -> bool:
    """
    Write the frequency table, swallowing output errors.

    Nothing is written when no characters were counted. A stream that cannot
    encode a counted character fails like a closed pipe.

    Args:
        counter: Populated counter.
        stream: Destination; defaults to sys.stdout.

    Returns:
        bool: False if writing failed, True otherwise.
    """
    if counter.chars_total == 0:
        return True

    out = stream if stream is not None else sys.stdout
    try:
        out.write(render_table(counter) + "\n")
        out.flush()
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to write frequency table: {e}")
        print(TABLE_PRINT_ERROR, file=sys.stderr)
        return False
    return True

# -----------------------------------------------------------------------------
# SUMMARY
# -----------------------------------------------------------------------------

def format_summary(result: ScanResult) -> str:
    """Format the one-line run summary."""
    return SUMMARY_TEMPLATE.format(
        files_text=result.files_text,
        files_non_text=result.files_non_text,
        directories=result.directories,
        chars_total=result.chars_total,
        elapsed=result.elapsed_seconds,
    )
