"""
Main entry point for the Notes & Password Manager.

NOTICE:
All notes and passwords are lost when the application exits.
"""

import sys
import signal
import logging
from typing import Optional
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from notevault.ui import MainWindow
from notevault.session import ManagerSession
from notevault import config

logger = logging.getLogger(__name__)


class NotesManagerApp:
    """Main application class for the notes and password manager."""

    def __init__(self):
        """Initialize the application."""
        self.app = QApplication(sys.argv)
        self.app.setApplicationName(config.APP_NAME)
        self.app.setOrganizationName(config.APP_NAME)
        self.app.setStyle(config.APP_STYLE)

        # The session owns both stores for the lifetime of the window
        self.session = ManagerSession()
        self.main_window: Optional[MainWindow] = None

        # Handle Ctrl+C gracefully
        signal.signal(signal.SIGINT, signal.SIG_DFL)

    def run(self) -> int:
        """Run the application."""
        self.main_window = MainWindow(self.session)
        self.main_window.show()
        logger.info(f"{config.APP_TITLE} started")
        exit_code = self.app.exec_()
        logger.info(f"Event loop finished with exit code {exit_code}")
        return exit_code


def main():
    """Main entry point."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = NotesManagerApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
