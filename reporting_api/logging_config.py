"""
Logging configuration for reporting-api-client

Library modules log through child loggers of the "reporting_api" package
logger, which only carries a NullHandler until an application opts in via
setup_logging().
"""

import logging
import sys
from pathlib import Path

ROOT_LOGGER_NAME = "reporting_api"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = True,
    level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Attach output handlers to the package logger

    Calling this again replaces the handlers from the previous call; handlers
    the application attached itself are left alone.

    Args:
        log_file: Optional file receiving every record at or above level
        verbose: Whether to also print INFO and above to stdout
        level: Package logger level

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, "_reporting_api", False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if verbose:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(max(level, logging.INFO))
        _attach(logger, console_handler, formatter)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        _attach(logger, file_handler, formatter)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'request_builder', 'http_client')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter):
    handler.setFormatter(formatter)
    handler._reporting_api = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
