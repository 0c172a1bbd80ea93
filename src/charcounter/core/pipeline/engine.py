from __future__ import annotations

"""
Scan Orchestration.

Coordinates one run of the tool:
1. Starts the wall-clock timer.
2. Resolves the input path to a directory, a file, or neither.
3. Dispatches to the traversal engine or the single-file counter.
4. Stops the timer and freezes the counter into a ScanResult.
"""

import logging
import time
from typing import Tuple

from charcounter.core.services.scanner import count_file, walk
from charcounter.domain.constants import INVALID_PATH_MESSAGE
from charcounter.domain.counter import CharCounter
from charcounter.domain.scan_models import ScanResult, create_scan_result
from charcounter.infra.fs import PathKind, classify_path

logger = logging.getLogger(__name__)


def run_scan(path: str, *, announce_invalid: bool = True) -> Tuple[ScanResult, CharCounter]:
    """
    Execute the counting phase for a path.

    The elapsed time covers path resolution and counting only; rendering the
    report is left to the caller and is not timed.

    Args:
        path: File or directory to scan.
        announce_invalid: Print the invalid-path message to stdout.

    Returns:
        Tuple[ScanResult, CharCounter]: The frozen result and the live counter.
    """
    start = time.perf_counter()
    counter = CharCounter()

    kind = classify_path(path)
    logger.debug(f"Resolved '{path}' as {kind.value}.")

    if kind is PathKind.DIRECTORY:
        walk(path, counter)
    elif kind is PathKind.FILE:
        count_file(path, counter)
    else:
        logger.info(f"Input path '{path}' is neither a file nor a directory.")
        if announce_invalid:
            print(INVALID_PATH_MESSAGE.format(path=path))

    elapsed = time.perf_counter() - start

    if counter.directories_skipped:
        logger.warning(f"{counter.directories_skipped} directories could not be listed and were skipped.")

    result = create_scan_result(path, counter, elapsed, valid_path=kind is not PathKind.OTHER)
    return result, counter
