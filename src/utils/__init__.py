"""
Utility helpers for the corruption harness.
"""

from .logging_setup import LOGGER_NAME, get_logger, setup_logging, setup_logging_from_config

__all__ = ["LOGGER_NAME", "get_logger", "setup_logging", "setup_logging_from_config"]
