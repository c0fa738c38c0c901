"""CLI configuration."""

import os
import sys

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BUNDLE_NAME = "runnables.wasm.zip"


def get_log_level() -> str:
    """Get the log level from HIVE_LOG_LEVEL."""
    return os.getenv("HIVE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_bundle_name() -> str:
    """Get the default bundle file name from HIVE_BUNDLE_NAME."""
    return os.getenv("HIVE_BUNDLE_NAME", DEFAULT_BUNDLE_NAME)


def configure_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr at the configured level."""
    level = "DEBUG" if verbose else get_log_level()
    logger.remove()
    logger.add(sys.stderr, level=level)
