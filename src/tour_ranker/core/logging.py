"""Logging helpers."""
from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "ranker.log"
ENGINE_LOGGER = "tour_ranker"


def configure_logging(level: str, log_dir: Path) -> Path:
    """Configure logging for CLI runs and return the log file path.

    The console shows ``level`` and above. The log file also receives the
    engine's DEBUG records, such as every offer dropped by the budget filter.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    console_level = getattr(logging, level.upper(), logging.INFO)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)

    logging.basicConfig(level=console_level, format=LOG_FORMAT, handlers=[console, file_handler])
    logging.getLogger(ENGINE_LOGGER).setLevel(logging.DEBUG)
    return log_path
