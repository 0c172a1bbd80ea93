from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values shared by the scanner and the CLI reporter:
the assumed text encoding, table layout, and user-facing message templates.
"""

from typing import Tuple

APP_NAME = "charcounter"

# Files are "text" only when their full content decodes under this codec
TEXT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# REPORT LAYOUT
# -----------------------------------------------------------------------------
TABLE_HEADERS: Tuple[str, str, str] = ("Character", "Unicode", "Count")
TABLE_COLALIGN: Tuple[str, str, str] = ("center", "left", "right")
TABLE_FORMAT = "simple"

SUMMARY_TEMPLATE = (
    "{files_text} text files, {files_non_text} non-text files, "
    "{directories} directories, {chars_total} chars, {elapsed:.6f} secs"
)

# -----------------------------------------------------------------------------
# MESSAGES
# -----------------------------------------------------------------------------
INVALID_PATH_MESSAGE = "{path} is not a valid path"
TABLE_PRINT_ERROR = "Error printing table"
