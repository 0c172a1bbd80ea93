from __future__ import annotations

"""
Directory Traversal and Classification Service.

Walks a directory tree depth-first with an explicit work stack, classifies
every entry, and feeds the content of text files to the tally step.
Directories are identified by (device, inode) so that a symlink pointing
back to an ancestor is never followed.
"""

import logging
from typing import FrozenSet, List, Tuple

from charcounter.core.pipeline.components.reader import read_text_file
from charcounter.core.services.tally import tally
from charcounter.domain.counter import CharCounter, EntryKind
from charcounter.infra.fs import (
    DirectoryIdentity,
    PathKind,
    classify_entry,
    directory_identity,
    list_directory,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def count_file(path: str, counter: CharCounter) -> None:
    """
    Classify a single regular file and tally it when it is text.

    Args:
        path: Path to the file.
        counter: Counter receiving the increments.
    """
    content = read_text_file(path)
    if content is None:
        counter.increment(EntryKind.NON_TEXT)
        return

    counter.increment(EntryKind.TEXT)
    tally(content, counter)


def walk(path: str, counter: CharCounter) -> None:
    """
    Traverse a directory tree and count everything beneath it.

    Symlinks are followed, so an aliased directory or file is counted at
    every alias. A directory whose (device, inode) is already on the current
    path is not re-entered, which stops symlink loops. Directories that
    cannot be listed are recorded as skipped and the walk continues with the
    remaining work. Entries that are neither directories nor regular files
    are ignored.

    Args:
        path: Root directory of the walk.
        counter: Counter receiving the increments.
    """
    stack: List[Tuple[str, FrozenSet[DirectoryIdentity]]] = [(path, frozenset())]

    while stack:
        current, ancestors = stack.pop()

        identity = directory_identity(current)
        if identity is None:
            logger.warning(f"Cannot stat directory '{current}', skipping.")
            counter.record_skipped_directory()
            continue
        if identity in ancestors:
            logger.debug(f"Directory '{current}' loops back to an ancestor, not re-entering.")
            continue

        try:
            entries = list_directory(current)
        except OSError as e:
            logger.warning(f"Cannot list directory '{current}': {e}")
            counter.record_skipped_directory()
            continue

        counter.increment(EntryKind.DIRECTORY)

        lineage = ancestors | {identity}
        subdirs: List[str] = []
        for entry in entries:
            kind = classify_entry(entry)
            if kind is PathKind.DIRECTORY:
                subdirs.append(entry.path)
            elif kind is PathKind.FILE:
                count_file(entry.path, counter)
            else:
                logger.debug(f"Ignoring special entry '{entry.path}'")

        # Reversed so the first subdirectory by name is processed next
        stack.extend((d, lineage) for d in reversed(subdirs))
