from __future__ import annotations

"""
Unit tests for the CharCounter aggregate.

Verifies:
1. Routing of each classification outcome to its field.
2. The chars_total == sum(char_frequency) invariant.
3. Report ordering (count descending, code point ascending on ties).
"""

import pytest

from charcounter.domain.counter import Char, CharCounter, EntryKind


def test_new_counter_is_zeroed() -> None:
    counter = CharCounter()

    assert counter.files_text == 0
    assert counter.files_non_text == 0
    assert counter.directories == 0
    assert counter.directories_skipped == 0
    assert counter.chars_total == 0
    assert dict(counter.char_frequency) == {}


def test_scalar_increments_route_to_fields() -> None:
    counter = CharCounter()

    counter.increment(EntryKind.TEXT)
    counter.increment(EntryKind.TEXT)
    counter.increment(EntryKind.NON_TEXT)
    counter.increment(EntryKind.DIRECTORY)
    counter.record_skipped_directory()

    assert counter.files_text == 2
    assert counter.files_non_text == 1
    assert counter.directories == 1
    assert counter.directories_skipped == 1
    assert counter.chars_total == 0


def test_char_increment_updates_map_and_total() -> None:
    counter = CharCounter()

    for c in "hello":
        counter.increment(Char(c))

    assert counter.char_frequency["l"] == 2
    assert counter.char_frequency["h"] == 1
    assert counter.chars_total == 5
    assert counter.chars_total == sum(counter.char_frequency.values())


def test_char_frequency_is_read_only() -> None:
    counter = CharCounter()
    counter.increment(Char("x"))

    with pytest.raises(TypeError):
        counter.char_frequency["x"] = 10  # type: ignore[index]


def test_char_rejects_multiple_characters() -> None:
    with pytest.raises(ValueError):
        Char("ab")
    with pytest.raises(ValueError):
        Char("")


def test_sorted_frequencies_breaks_ties_by_code_point() -> None:
    counter = CharCounter()
    for c in "cbaab":
        counter.increment(Char(c))

    # a and b tie at 2; c has 1
    assert counter.sorted_frequencies() == [("a", 2), ("b", 2), ("c", 1)]
