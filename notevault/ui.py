"""
User interface for the Notes & Password Manager.

NOTICE:
Passwords entered here are kept in memory only and are obfuscated, not
encrypted. See notevault.codec.
"""

import logging
from typing import Optional, Tuple
from PyQt5.QtWidgets import (
    QMainWindow, QDialog, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QTextEdit, QMessageBox, QInputDialog,
    QDialogButtonBox, QFormLayout
)
from PyQt5.QtGui import QFont

from .session import ManagerSession, ActionResult
from .validation import InputValidator
from . import config

logger = logging.getLogger(__name__)


class PasswordDialog(QDialog):
    """Dialog for entering a service name and its password."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle("Add New Password")
        self.setModal(True)
        self.setMinimumWidth(400)

        layout = QFormLayout()

        self.service_input = QLineEdit()
        layout.addRow("Service:", self.service_input)

        password_layout = QHBoxLayout()
        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        password_layout.addWidget(self.password_input)

        self.show_password_button = QPushButton("Show")
        self.show_password_button.setCheckable(True)
        self.show_password_button.toggled.connect(self.toggle_password_visibility)
        password_layout.addWidget(self.show_password_button)

        layout.addRow("Password:", password_layout)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.validate_and_accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

        self.setLayout(layout)

    def toggle_password_visibility(self, checked: bool):
        """Toggle password visibility."""
        if checked:
            self.password_input.setEchoMode(QLineEdit.Normal)
            self.show_password_button.setText("Hide")
        else:
            self.password_input.setEchoMode(QLineEdit.Password)
            self.show_password_button.setText("Show")

    def validate_and_accept(self):
        """Validate input and accept dialog."""
        is_valid, message = InputValidator.check_credentials(*self.get_credentials())
        if not is_valid:
            QMessageBox.warning(self, "Validation Error", message)
            return
        self.accept()

    def get_credentials(self) -> Tuple[str, str]:
        """Get the (service, password) pair entered in the dialog."""
        return self.service_input.text(), self.password_input.text()


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, session: Optional[ManagerSession] = None):
        super().__init__()
        self.session = session if session is not None else ManagerSession()
        self.init_ui()
        self.update_counts()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(config.APP_TITLE)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout()
        layout.setSpacing(config.LAYOUT_SPACING)
        central_widget.setLayout(layout)

        # Display area
        self.display_area = QTextEdit()
        self.display_area.setReadOnly(True)
        font = QFont(config.DISPLAY_FONT_FAMILY, config.DISPLAY_FONT_SIZE)
        font.setStyleHint(QFont.Monospace)
        self.display_area.setFont(font)
        self.display_area.setPlainText(config.WELCOME_MESSAGE)
        layout.addWidget(self.display_area)

        # Buttons: notes on the first row, passwords on the second
        button_grid = QGridLayout()
        button_grid.setSpacing(config.LAYOUT_SPACING)

        self.add_note_button = QPushButton(config.BUTTON_ADD_NOTE)
        self.add_note_button.clicked.connect(self.add_note)
        button_grid.addWidget(self.add_note_button, 0, 0)

        self.view_notes_button = QPushButton(config.BUTTON_VIEW_NOTES)
        self.view_notes_button.clicked.connect(self.view_notes)
        button_grid.addWidget(self.view_notes_button, 0, 1)

        self.delete_note_button = QPushButton(config.BUTTON_DELETE_NOTE)
        self.delete_note_button.clicked.connect(self.delete_note)
        button_grid.addWidget(self.delete_note_button, 0, 2)

        self.add_password_button = QPushButton(config.BUTTON_ADD_PASSWORD)
        self.add_password_button.clicked.connect(self.add_password)
        button_grid.addWidget(self.add_password_button, 1, 0)

        self.view_password_button = QPushButton(config.BUTTON_VIEW_PASSWORD)
        self.view_password_button.clicked.connect(self.view_password)
        button_grid.addWidget(self.view_password_button, 1, 1)

        self.delete_password_button = QPushButton(config.BUTTON_DELETE_PASSWORD)
        self.delete_password_button.clicked.connect(self.delete_password)
        button_grid.addWidget(self.delete_password_button, 1, 2)

        layout.addLayout(button_grid)

        # Status bar
        self.statusBar().showMessage("Ready")

        self.note_count_label = QLabel("Notes: 0")
        self.statusBar().addPermanentWidget(self.note_count_label)

        self.password_count_label = QLabel("Passwords: 0")
        self.password_count_label.setStyleSheet("padding-right: 10px;")
        self.statusBar().addPermanentWidget(self.password_count_label)

    def update_counts(self):
        """Refresh the note and password counters in the status bar."""
        self.note_count_label.setText(f"Notes: {len(self.session.notes)}")
        self.password_count_label.setText(f"Passwords: {len(self.session.passwords)}")

    def show_result(self, result: ActionResult, status: str):
        """Show a successful result in the display area, or a failure as a warning."""
        if result.ok:
            self.display_area.setPlainText(result.message)
            self.statusBar().showMessage(status, config.STATUS_MESSAGE_TIMEOUT)
        else:
            QMessageBox.warning(self, result.title, result.message)
        self.update_counts()

    def _ask_text(self, title: str, label: str) -> Optional[str]:
        """Prompt for a line of text; returns None if the user cancelled."""
        text, ok = QInputDialog.getText(self, title, label)
        if not ok:
            return None
        return text

    def add_note(self):
        """Add a new note."""
        text = self._ask_text(config.BUTTON_ADD_NOTE, config.PROMPT_ADD_NOTE)
        if text is None:
            return
        try:
            self.show_result(self.session.add_note(text), "Note added")
        except Exception as e:
            self._report_failure("add note", e)

    def view_notes(self):
        """Show all notes."""
        try:
            self.show_result(self.session.view_notes(), "Notes loaded")
        except Exception as e:
            self._report_failure("list notes", e)

    def delete_note(self):
        """Delete a note by ID."""
        raw_id = self._ask_text(config.BUTTON_DELETE_NOTE, config.PROMPT_DELETE_NOTE)
        if raw_id is None:
            return
        try:
            self.show_result(self.session.delete_note(raw_id), "Note deleted")
        except Exception as e:
            self._report_failure("delete note", e)

    def add_password(self):
        """Add or replace the password for a service."""
        dialog = PasswordDialog(parent=self)
        if not dialog.exec_():
            return
        service, password = dialog.get_credentials()
        try:
            self.show_result(self.session.add_password(service, password), "Password saved")
        except Exception as e:
            self._report_failure("save password", e)

    def view_password(self):
        """Show the password stored for a service."""
        service = self._ask_text(config.BUTTON_VIEW_PASSWORD, config.PROMPT_VIEW_PASSWORD)
        if service is None:
            return
        try:
            self.show_result(self.session.view_password(service), "Password shown")
        except Exception as e:
            self._report_failure("retrieve password", e)

    def delete_password(self):
        """Delete the password stored for a service."""
        service = self._ask_text(config.BUTTON_DELETE_PASSWORD, config.PROMPT_DELETE_PASSWORD)
        if service is None:
            return
        try:
            self.show_result(self.session.delete_password(service), "Password deleted")
        except Exception as e:
            self._report_failure("delete password", e)

    def _report_failure(self, action: str, error: Exception):
        logger.error(f"Failed to {action}: {error}", exc_info=True)
        QMessageBox.critical(self, config.ERROR_TITLE, f"Failed to {action}: {str(error)}")
