"""
Logging setup for the Restaurant Directory API.

Console logging is always on; file logging is optional and writes one file per day.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from restaurant_api.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_file(log_dir: Path) -> Path:
    return log_dir / f"restaurant_api_{datetime.now().strftime('%Y%m%d')}.log"


def setup_logging(
    level: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name. Defaults to settings.LOG_LEVEL.
        enable_file: Also log to a file. Defaults to settings.ENABLE_FILE_LOGGING.
        log_dir: Directory for the log file. Defaults to settings.LOG_DIR.
    """
    level = (level or settings.LOG_LEVEL).upper()
    if enable_file is None:
        enable_file = settings.ENABLE_FILE_LOGGING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    if enable_file:
        directory = Path(log_dir or settings.LOG_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        log_file = get_log_file(directory)

        # Avoid stacking handlers when called more than once
        for handler in root.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file):
                return

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
