"""
Logging Configuration
Sets up the "fitness_tracker" logger used by services and the db layer.

Output:
- Console handler (always)
- Rotating log file (only when LOG_DIR is configured and writable)

Usage:
    from fitness_tracker.core.config import settings
    from fitness_tracker.core.logging import configure_logging

    configure_logging(settings)
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from fitness_tracker.core.config import Settings, settings as default_settings

LOGGER_NAME = "fitness_tracker"

CONSOLE_FORMAT = "%(levelname)s: %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAME = "fitness_tracker.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5


def _file_handler(log_dir: str) -> Optional[RotatingFileHandler]:
    """
    Build the rotating file handler, or None if the directory is unusable.

    The directory is created if missing and probed with a throwaway file,
    the same way a container with a read-only volume would be detected.
    """
    path = Path(log_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / ".write_test"
        probe.touch()
        probe.unlink()
    except (PermissionError, OSError) as e:
        logging.getLogger(LOGGER_NAME).warning(
            "Cannot write to logs directory %s: %s. File logging disabled, using console only.",
            path, e,
        )
        return None

    handler = RotatingFileHandler(
        path / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it more than once does not stack handlers.

    Args:
        config: Settings to read LOG_LEVEL / LOG_DIR from (default: global settings)

    Returns:
        The configured "fitness_tracker" logger
    """
    config = config or default_settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL.upper())

    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if config.LOG_DIR:
        file_handler = _file_handler(config.LOG_DIR)
        if file_handler:
            logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging configured for %s", config.PROJECT_NAME)
    return logger
