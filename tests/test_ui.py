import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtWidgets import QDialog, QInputDialog, QLineEdit, QMessageBox

from notevault import config
from notevault import ui
from notevault.session import ManagerSession


class DialogRecorder:
    """Collects message boxes instead of showing them."""

    def __init__(self):
        self.warnings = []
        self.errors = []

    def warning(self, parent, title, message, *args):
        self.warnings.append((title, message))
        return QMessageBox.Ok

    def critical(self, parent, title, message, *args):
        self.errors.append((title, message))
        return QMessageBox.Ok


@pytest.fixture
def dialogs(monkeypatch):
    recorder = DialogRecorder()
    monkeypatch.setattr(QMessageBox, "warning", recorder.warning)
    monkeypatch.setattr(QMessageBox, "critical", recorder.critical)
    return recorder


@pytest.fixture
def window(qapp, session):
    main_window = ui.MainWindow(session)
    yield main_window
    main_window.close()
    main_window.deleteLater()


def answer_input(monkeypatch, text, ok=True):
    monkeypatch.setattr(QInputDialog, "getText", lambda *args, **kwargs: (text, ok))


def test_initial_state(window):
    assert window.windowTitle() == config.APP_TITLE
    assert window.display_area.isReadOnly()
    assert window.display_area.toPlainText() == config.WELCOME_MESSAGE
    assert window.note_count_label.text() == "Notes: 0"
    assert window.password_count_label.text() == "Passwords: 0"


def test_add_note(window, monkeypatch, dialogs):
    answer_input(monkeypatch, "buy milk")
    window.add_note()
    assert window.display_area.toPlainText() == "Note added successfully!\n\nID: 1 | Note: buy milk"
    assert window.note_count_label.text() == "Notes: 1"
    assert dialogs.warnings == []


def test_cancelled_input_does_nothing(window, monkeypatch, dialogs):
    answer_input(monkeypatch, "ignored", ok=False)
    window.add_note()
    window.delete_note()
    window.view_password()
    assert window.display_area.toPlainText() == config.WELCOME_MESSAGE
    assert len(window.session.notes) == 0
    assert dialogs.warnings == []


def test_blank_note_warns(window, monkeypatch, dialogs):
    answer_input(monkeypatch, "   ")
    window.add_note()
    assert dialogs.warnings == [(config.ERROR_TITLE, config.ERROR_EMPTY_NOTE)]
    assert window.display_area.toPlainText() == config.WELCOME_MESSAGE


def test_view_notes_when_empty(window, dialogs):
    window.view_notes()
    assert window.display_area.toPlainText() == "No notes found."


def test_delete_note_with_invalid_id(window, monkeypatch, dialogs):
    answer_input(monkeypatch, "abc")
    window.delete_note()
    assert dialogs.warnings == [(config.ERROR_TITLE, "Invalid ID. Please enter a number.")]


def test_delete_note(window, monkeypatch, dialogs):
    window.session.add_note("first")
    window.session.add_note("second")
    answer_input(monkeypatch, "1")
    window.delete_note()
    assert window.display_area.toPlainText() == "Note deleted successfully.\n\nID: 2 | Note: second"
    assert window.note_count_label.text() == "Notes: 1"


def test_add_view_delete_password(window, monkeypatch, dialogs):
    monkeypatch.setattr(ui.PasswordDialog, "exec_", lambda self: QDialog.Accepted)
    monkeypatch.setattr(ui.PasswordDialog, "get_credentials", lambda self: ("Example.com ", "secret"))
    window.add_password()
    assert window.display_area.toPlainText() == "Password for 'Example.com ' added successfully."
    assert window.password_count_label.text() == "Passwords: 1"

    answer_input(monkeypatch, "example.com")
    window.view_password()
    assert window.display_area.toPlainText() == "--- Password for 'example.com' ---\nsecret"

    window.delete_password()
    assert window.display_area.toPlainText() == "Password for 'example.com' deleted successfully."
    assert window.password_count_label.text() == "Passwords: 0"

    window.view_password()
    assert dialogs.warnings == [(config.ERROR_TITLE, "Password for 'example.com' not found.")]


def test_cancelled_password_dialog(window, monkeypatch, dialogs):
    monkeypatch.setattr(ui.PasswordDialog, "exec_", lambda self: QDialog.Rejected)
    window.add_password()
    assert len(window.session.passwords) == 0
    assert window.display_area.toPlainText() == config.WELCOME_MESSAGE


def test_unexpected_error_is_reported(window, monkeypatch, dialogs):
    def broken(text):
        raise RuntimeError("boom")

    monkeypatch.setattr(window.session, "add_note", broken)
    answer_input(monkeypatch, "note")
    window.add_note()
    assert dialogs.errors == [(config.ERROR_TITLE, "Failed to add note: boom")]


def test_password_dialog_validation(qapp, monkeypatch, dialogs):
    dialog = ui.PasswordDialog()
    dialog.service_input.setText("svc")
    dialog.validate_and_accept()
    assert dialogs.warnings == [("Validation Error", config.ERROR_EMPTY_CREDENTIALS)]
    assert dialog.result() != QDialog.Accepted

    dialog.password_input.setText("pw")
    dialog.validate_and_accept()
    assert dialog.result() == QDialog.Accepted
    assert dialog.get_credentials() == ("svc", "pw")


def test_password_dialog_visibility_toggle(qapp):
    dialog = ui.PasswordDialog()
    assert dialog.password_input.echoMode() == QLineEdit.Password
    dialog.show_password_button.setChecked(True)
    assert dialog.password_input.echoMode() == QLineEdit.Normal
    assert dialog.show_password_button.text() == "Hide"
    dialog.show_password_button.setChecked(False)
    assert dialog.show_password_button.text() == "Show"


def test_window_uses_injected_session(qapp):
    session = ManagerSession()
    session.add_note("preexisting")
    main_window = ui.MainWindow(session)
    assert main_window.session is session
    assert main_window.note_count_label.text() == "Notes: 1"
