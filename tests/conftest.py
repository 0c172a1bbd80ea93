from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used by the scanner and engine tests.
3. A logging reset fixture for tests that configure the root logger.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small mixed tree.

    Structure:
    /root
      a.txt        "aab"
      blob.bin     b"\\x80\\x81"
      /docs
        note.md    "ñb\\n"
        /empty
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("aab", encoding="utf-8")
    (root / "blob.bin").write_bytes(b"\x80\x81")

    docs = root / "docs"
    docs.mkdir()
    (docs / "note.md").write_bytes("ñb\n".encode("utf-8"))
    (docs / "empty").mkdir()

    return root


@pytest.fixture
def clean_logging():
    """Remove charcounter's root handlers and queue listener before and after a test."""
    from charcounter.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)
        root.setLevel(logging.WARNING)

    _reset()
    yield
    _reset()
