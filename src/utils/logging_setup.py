"""
Logging configuration for the corruption harness.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

from config import AppConfig, ensure_directories

LOGGER_NAME = "corruption_harness"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Return the shared harness logger without attaching handlers."""
    return logging.getLogger(LOGGER_NAME)


def setup_logging(log_dir: Path, level: int = logging.INFO) -> Dict[str, logging.Logger]:
    """Attach console and dated file handlers to the harness logger."""
    ensure_directories([log_dir])
    date_stamp = datetime.now(timezone.utc).strftime("%Y%m%d")
    formatter = logging.Formatter(LOG_FORMAT)

    corruption_log = log_dir / f"corruption_log_{date_stamp}.log"

    base_logger = get_logger()
    if not base_logger.handlers:
        base_logger.setLevel(level)
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        base_logger.addHandler(stream_handler)

        file_handler = logging.FileHandler(corruption_log, encoding="utf-8")
        file_handler.setFormatter(formatter)
        base_logger.addHandler(file_handler)

    return {"main": base_logger}


def setup_logging_from_config(config: AppConfig) -> Dict[str, logging.Logger]:
    """Set up logging in the ``paths.logs`` directory, relative to the config file."""
    log_dir = config.resolve_path("paths", "logs", default="logs")
    level_name = str(config.get("logging", "level", default="INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging.level: {level_name}")
    return setup_logging(log_dir, level=level)
