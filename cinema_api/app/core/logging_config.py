"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and, when a path is given, a file handler.  Calling it again after
handlers have been attached is a no-op, so ``create_app`` can run
several times (for example in tests) without duplicating output.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Configure the root logger, or ``logger`` when given.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    logger : Optional[logging.Logger]
        Logger to configure instead of the root logger.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
