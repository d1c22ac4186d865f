"""Logging setup shared by the CLI and the web app.

Usage:
    from ledgerkeeper.logging_config import setup_logging
    setup_logging("INFO")
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that flood the console at INFO
NOISY_LOGGERS = [
    "sqlalchemy.engine",
    "uvicorn.access",
    "httpx",
    "httpcore",
]


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the root logger with a single console handler.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        level: Log level as a number or name ("DEBUG", "INFO", ...)

    Returns:
        The configured root logger
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_ledgerkeeper", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    console_handler._ledgerkeeper = True
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return root_logger


def teardown_logging() -> None:
    """Remove the handler installed by setup_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_ledgerkeeper", False):
            root_logger.removeHandler(handler)
            handler.close()
