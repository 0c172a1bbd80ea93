from __future__ import annotations

"""Unit tests for ScanResult construction and code point labels."""

from dataclasses import FrozenInstanceError

import pytest

from charcounter.domain.counter import Char, CharCounter, EntryKind
from charcounter.domain.scan_models import code_point_label, create_scan_result


@pytest.mark.parametrize("char, label", [
    ("a", "U+0061"),
    ("\n", "U+000A"),
    ("ñ", "U+00F1"),
    ("€", "U+20AC"),
    ("😀", "U+1F600"),
])
def test_code_point_label(char: str, label: str) -> None:
    assert code_point_label(char) == label


def test_create_scan_result_snapshots_counter() -> None:
    counter = CharCounter()
    counter.increment(EntryKind.TEXT)
    counter.increment(EntryKind.DIRECTORY)
    for c in "aab":
        counter.increment(Char(c))

    result = create_scan_result("/some/path", counter, 0.25)

    assert result.valid_path is True
    assert result.files_text == 1
    assert result.directories == 1
    assert result.chars_total == 3
    assert result.elapsed_seconds == 0.25
    assert [(r.character, r.code_point, r.count) for r in result.frequencies] == [
        ("a", "U+0061", 2),
        ("b", "U+0062", 1),
    ]

    with pytest.raises(FrozenInstanceError):
        result.chars_total = 0  # type: ignore[misc]
