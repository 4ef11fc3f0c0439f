"""
Logging configuration for Lyricstator.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QStandardPaths

from ..config.defaults import APPLICATION_NAME


def setup_logging(log_level: str = "INFO", log_file: bool = True) -> logging.Logger:
    """
    Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to a timestamped file

    Returns:
        Root logger instance
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root.addHandler(console)

    if log_file:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = log_dir / f"lyricstator_{timestamp}.log"

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root.addHandler(file_handler)

        root.info(f"Logging to file: {log_path}")

    return root


def get_log_dir() -> Path:
    """
    Get the per-user log directory.

    Returns:
        Path to log directory (not created)
    """
    cache_dir = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.GenericCacheLocation
    )
    return Path(cache_dir) / APPLICATION_NAME.lower() / 'logs'
