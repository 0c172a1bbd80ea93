from __future__ import annotations

"""Per-character tally of decoded text."""

from charcounter.domain.counter import Char, CharCounter


def tally(text: str, counter: CharCounter) -> None:
    """
    Increment the counter once for every character of the text, in order.

    Args:
        text: Decoded text; each element is one Unicode scalar value.
        counter: Counter receiving the increments.
    """
    for c in text:
        counter.increment(Char(c))
