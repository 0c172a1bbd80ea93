from __future__ import annotations

"""
Strict Text Reading Component.

Reads a file in one pass and decodes it without any error substitution, so
that binary artifacts and invalid byte sequences are reported as non-text
instead of being silently repaired.
"""

import logging
from typing import Optional

from charcounter.domain.constants import TEXT_ENCODING

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# READING OPERATIONS
# -----------------------------------------------------------------------------

def read_text_file(file_path: str, encoding: str = TEXT_ENCODING) -> Optional[str]:
    """
    Return the full decoded content of a file, or None if it is not text.

    The bytes are decoded as-is: line endings are not translated and a byte
    order mark is kept as a character.

    Args:
        file_path: Path to the target file.
        encoding: Codec the content must decode under.

    Returns:
        Optional[str]: Decoded text, or None on read or decode failure.
    """
    try:
        with open(file_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.debug(f"Unreadable file '{file_path}': {e}")
        return None

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        logger.debug(f"Non-text file '{file_path}': {e.reason} at byte {e.start}")
        return None
