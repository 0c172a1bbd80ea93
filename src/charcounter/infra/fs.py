from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' used by the scanner: path classification, directory
identity for cycle detection, and sorted directory listing.
"""

import enum
import os
from typing import List, Optional, Tuple

DirectoryIdentity = Tuple[int, int]

# -----------------------------------------------------------------------------
# PATH CLASSIFICATION
# -----------------------------------------------------------------------------

class PathKind(enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


def classify_path(path: str) -> PathKind:
    """
    Resolve what a path points at, following symlinks.

    Missing paths, broken links, unreadable metadata and special files
    (devices, sockets, FIFOs) all classify as OTHER.

    Args:
        path: Filesystem path to inspect.

    Returns:
        PathKind: The classification.
    """
    if os.path.isdir(path):
        return PathKind.DIRECTORY
    if os.path.isfile(path):
        return PathKind.FILE
    return PathKind.OTHER


def classify_entry(entry: os.DirEntry) -> PathKind:
    """
    Classify a directory entry without an extra stat call where possible.

    Args:
        entry: Entry produced by os.scandir.

    Returns:
        PathKind: The classification; OTHER when the entry cannot be inspected.
    """
    try:
        if entry.is_dir():
            return PathKind.DIRECTORY
        if entry.is_file():
            return PathKind.FILE
    except OSError:
        pass
    return PathKind.OTHER

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def directory_identity(path: str) -> Optional[DirectoryIdentity]:
    """
    Return the (device, inode) pair identifying a directory.

    Args:
        path: Directory path; symlinks are followed.

    Returns:
        Optional[DirectoryIdentity]: The identity, or None if stat fails.
    """
    try:
        st = os.stat(path)
    except OSError:
        return None
    return st.st_dev, st.st_ino


def list_directory(path: str) -> List[os.DirEntry]:
    """
    List a directory's entries sorted by name.

    Args:
        path: Directory to list.

    Returns:
        List[os.DirEntry]: The entries.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    with os.scandir(path) as it:
        return sorted(it, key=lambda e: e.name)
