from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file output through the rotating handler, and shutdown cleanup.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from charcounter.infra.logging import (
    _HANDLER_TAG_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)

pytestmark = pytest.mark.usefixtures("clean_logging")


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="WARNING", console=True)

    configure_logging(cfg)
    first = _our_handlers()
    configure_logging(cfg)

    assert _our_handlers() == first
    assert len(first) == 1
    assert isinstance(first[0], QueueHandler)


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.WARNING


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "charcounter.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("charcounter.test").info("scan started")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "scan started" in content
    assert "charcounter.test" in content


def test_shutdown_allows_fresh_configuration(tmp_path: Path) -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    shutdown_logging()

    assert _our_handlers() == []

    log_file = tmp_path / "second.log"
    configure_logging(LoggingConfig(level="WARNING", console=False, log_file=str(log_file)))
    logging.getLogger("charcounter.test").warning("second run")
    shutdown_logging()

    assert "second run" in log_file.read_text(encoding="utf-8")
