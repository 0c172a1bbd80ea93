from __future__ import annotations

"""
Character Frequency Counter.

Holds the running aggregate of a scan: file and directory counts, total
characters, and the per-character frequency map. The counter is owned by
the scan orchestrator and passed explicitly to every step that mutates it.
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union

# -----------------------------------------------------------------------------
# CLASSIFICATION OUTCOMES
# -----------------------------------------------------------------------------

class EntryKind(enum.Enum):
    """Scalar outcomes of classifying a filesystem entry."""
    TEXT = "text"
    NON_TEXT = "non_text"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Char:
    """
    A single decoded character routed to the frequency map.

    Attributes:
        value: One Unicode scalar value.
    """
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char expects exactly one character, got {self.value!r}")


Increment = Union[EntryKind, Char]

# -----------------------------------------------------------------------------
# AGGREGATE
# -----------------------------------------------------------------------------

class CharCounter:
    """
    Mutable tally of one scan.

    Invariant: ``chars_total`` always equals the sum of ``char_frequency``.
    """

    def __init__(self) -> None:
        self._files_text = 0
        self._files_non_text = 0
        self._directories = 0
        self._directories_skipped = 0
        self._chars_total = 0
        self._char_frequency: Dict[str, int] = {}

    def increment(self, kind: Increment) -> None:
        """
        Route a classification outcome to the matching field.

        Args:
            kind: An EntryKind member or a Char wrapping one character.
        """
        if isinstance(kind, Char):
            self._char_frequency[kind.value] = self._char_frequency.get(kind.value, 0) + 1
            self._chars_total += 1
        elif kind is EntryKind.TEXT:
            self._files_text += 1
        elif kind is EntryKind.NON_TEXT:
            self._files_non_text += 1
        elif kind is EntryKind.DIRECTORY:
            self._directories += 1
        else:
            raise TypeError(f"Unsupported increment: {kind!r}")

    def record_skipped_directory(self) -> None:
        """Note a directory whose entries could not be listed."""
        self._directories_skipped += 1

    # --- Accessors ---

    @property
    def files_text(self) -> int:
        return self._files_text

    @property
    def files_non_text(self) -> int:
        return self._files_non_text

    @property
    def directories(self) -> int:
        return self._directories

    @property
    def directories_skipped(self) -> int:
        return self._directories_skipped

    @property
    def chars_total(self) -> int:
        return self._chars_total

    @property
    def char_frequency(self) -> Mapping[str, int]:
        """Read-only view of the character to count mapping."""
        return MappingProxyType(self._char_frequency)

    def sorted_frequencies(self) -> List[Tuple[str, int]]:
        """
        Return (character, count) pairs ordered for reporting.

        Counts are descending; equal counts are ordered by ascending code point.
        """
        return sorted(self._char_frequency.items(), key=lambda item: (-item[1], ord(item[0])))
