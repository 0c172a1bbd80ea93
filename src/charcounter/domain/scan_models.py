from __future__ import annotations

"""
Scan Domain Data Models.

Defines the immutable result object passed from the scan orchestrator to
the interface layer, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import List

from charcounter.domain.counter import CharCounter

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FrequencyRow:
    """
    One line of the frequency table.

    Attributes:
        character: The counted character.
        code_point: Label in ``U+XXXX`` form.
        count: Number of occurrences across all text files.
    """
    character: str
    code_point: str
    count: int


@dataclass(frozen=True)
class ScanResult:
    """
    Snapshot of a completed scan.

    Attributes:
        path: The path given on the command line.
        valid_path: False when the path was neither a file nor a directory.
        files_text: Files decoded successfully.
        files_non_text: Files that could not be read or decoded.
        directories: Directories listed.
        directories_skipped: Directories whose listing failed.
        chars_total: Characters tallied.
        elapsed_seconds: Wall-clock time of the counting phase.
        frequencies: Rows sorted by count descending, then code point.
    """
    path: str
    valid_path: bool
    files_text: int = 0
    files_non_text: int = 0
    directories: int = 0
    directories_skipped: int = 0
    chars_total: int = 0
    elapsed_seconds: float = 0.0
    frequencies: List[FrequencyRow] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def code_point_label(character: str) -> str:
    """Format a character's code point as ``U+XXXX`` (at least four hex digits)."""
    return f"U+{ord(character):04X}"


def create_scan_result(
        path: str,
        counter: CharCounter,
        elapsed_seconds: float,
        valid_path: bool = True,
) -> ScanResult:
    """
    Freeze the counter state into a ScanResult.

    Args:
        path: The scanned path as supplied by the user.
        counter: The populated counter.
        elapsed_seconds: Duration of the counting phase.
        valid_path: Whether the path resolved to a file or a directory.

    Returns:
        ScanResult: Immutable result object.
    """
    rows = [
        FrequencyRow(character=c, code_point=code_point_label(c), count=n)
        for c, n in counter.sorted_frequencies()
    ]
    return ScanResult(
        path=path,
        valid_path=valid_path,
        files_text=counter.files_text,
        files_non_text=counter.files_non_text,
        directories=counter.directories,
        directories_skipped=counter.directories_skipped,
        chars_total=counter.chars_total,
        elapsed_seconds=elapsed_seconds,
        frequencies=rows,
    )
