import logging
from pathlib import Path

import pytest

from config import AppConfig
from utils import LOGGER_NAME, setup_logging, setup_logging_from_config


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    for handler in saved_handlers:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def test_setup_logging_creates_dated_log(tmp_path: Path, clean_logger: logging.Logger) -> None:
    log_dir = tmp_path / "logs"

    loggers = setup_logging(log_dir)
    assert loggers["main"] is clean_logger
    handler_count = len(clean_logger.handlers)

    setup_logging(log_dir)
    assert len(clean_logger.handlers) == handler_count

    clean_logger.info("hello from the harness")
    for handler in clean_logger.handlers:
        handler.flush()

    log_files = list(log_dir.glob("corruption_log_*.log"))
    assert len(log_files) == 1
    assert "hello from the harness" in log_files[0].read_text(encoding="utf-8")


def test_setup_logging_from_config_uses_configured_dir(
    tmp_path: Path, clean_logger: logging.Logger
) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("paths:\n  logs: \"run/logs\"\nlogging:\n  level: warning\n", encoding="utf-8")

    setup_logging_from_config(AppConfig.load(config_path))

    log_dir = tmp_path / "run" / "logs"
    assert log_dir.is_dir()
    assert len(list(log_dir.glob("corruption_log_*.log"))) == 1
    assert clean_logger.level == logging.WARNING


def test_setup_logging_from_config_defaults_to_logs(
    tmp_path: Path, clean_logger: logging.Logger
) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("corruption: {}\n", encoding="utf-8")

    setup_logging_from_config(AppConfig.load(config_path))

    assert (tmp_path / "logs").is_dir()
    assert clean_logger.level == logging.INFO


def test_setup_logging_from_config_rejects_unknown_level(
    tmp_path: Path, clean_logger: logging.Logger
) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("logging:\n  level: chatty\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown logging.level"):
        setup_logging_from_config(AppConfig.load(config_path))

    assert clean_logger.handlers == []
