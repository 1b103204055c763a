"""
Logging bootstrap for the Devotional API.

``setup_logging`` reads the level and optional log file from
``Settings`` and attaches a console handler (plus a file handler when
``LOG_FILE`` is set) to the root logger.  Records carry the project name
so output from several services sharing a log file can be told apart.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] {project} %(name)s: %(message)s"


def setup_logging(settings: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """Configure ``logger`` (the root logger by default) from ``settings``.

    Nothing happens when the logger already has handlers, e.g. under
    pytest or when ``create_app`` runs twice.  Unknown level names fall
    back to ``INFO``.  Returns the configured logger.
    """
    logger = logger if logger is not None else logging.getLogger()
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt=LOG_FORMAT.format(project=settings.project_name.replace("%", "%%")),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
