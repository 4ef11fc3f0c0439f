"""
Lyricstator - preferences entry point.

Opens the preferences dialog over the per-user configuration file.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication

from lyricstator import __version__
from lyricstator.config import APPLICATION_NAME, ConfigStore
from lyricstator.ui import PreferencesDialog
from lyricstator.utils import setup_logging


def main():
    """Main entry point for Lyricstator preferences."""
    setup_logging(log_level="INFO", log_file=True)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"Lyricstator v{__version__} starting...")
    logger.info("=" * 60)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APPLICATION_NAME)
    app.setOrganizationName(APPLICATION_NAME)

    with ConfigStore() as store:
        logger.info(f"Using configuration file: {store.config_path}")
        dialog = PreferencesDialog(store)
        dialog.exec()

    logger.info("Lyricstator exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
