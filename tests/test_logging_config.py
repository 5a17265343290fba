from __future__ import annotations

import logging
from pathlib import Path

from gambit7702.config.logging_config import get_cli_logger, setup_logger


def test_cli_logger_is_quiet_by_default() -> None:
    logger = get_cli_logger()

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_verbose_raises_level_without_duplicating_handlers() -> None:
    get_cli_logger()
    logger = get_cli_logger(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert all(h.level == logging.DEBUG for h in logger.handlers)


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "accept.log"
    logger = setup_logger("gambit7702", level=logging.INFO, log_file=str(log_path), console=False)

    logging.getLogger("gambit7702.helpers.action").info("nonce resolved")
    for handler in logger.handlers:
        handler.flush()

    assert "nonce resolved" in log_path.read_text(encoding="utf-8")
