"""
Session controller tying the stores to the user interface.

A ManagerSession owns the note and password stores for one run of the
application and turns raw user input into the text the window displays.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .notes import NoteStore
from .passwords import PasswordStore
from .validation import InputValidator, InvalidNoteIdError
from . import config

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Outcome of a user action: display text on success, error text otherwise."""
    ok: bool
    message: str
    title: str = ""

    @classmethod
    def success(cls, message: str) -> 'ActionResult':
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> 'ActionResult':
        return cls(ok=False, message=message, title=config.ERROR_TITLE)


class ManagerSession:
    """Runs note and password actions against a pair of stores."""

    def __init__(self, notes: Optional[NoteStore] = None,
                 passwords: Optional[PasswordStore] = None):
        """
        Initialize the session.

        Args:
            notes: Note store to use; a new empty one if not given
            passwords: Password store to use; a new empty one if not given
        """
        self.notes = notes if notes is not None else NoteStore()
        self.passwords = passwords if passwords is not None else PasswordStore()
        self.validator = InputValidator()

    def add_note(self, text: str) -> ActionResult:
        is_valid, message = self.validator.check_note(text)
        if not is_valid:
            return ActionResult.failure(message)
        self.notes.add_note(text)
        return ActionResult.success(
            config.NOTE_ADDED_MESSAGE.format(listing=self.notes.list_notes())
        )

    def view_notes(self) -> ActionResult:
        return ActionResult.success(self.notes.list_notes())

    def delete_note(self, raw_id: str) -> ActionResult:
        """
        Delete a note by the identifier the user typed.

        Non-numeric input is reported as an input error without touching the
        store.
        """
        try:
            note_id = self.validator.parse_note_id(raw_id)
        except InvalidNoteIdError as e:
            logger.warning(f"Rejected note id {raw_id!r}")
            return ActionResult.failure(str(e))

        if not self.notes.delete_note(note_id):
            return ActionResult.failure(config.ERROR_NOTE_NOT_FOUND.format(id=note_id))
        return ActionResult.success(
            config.NOTE_DELETED_MESSAGE.format(listing=self.notes.list_notes())
        )

    def add_password(self, service: str, password: str) -> ActionResult:
        is_valid, message = self.validator.check_credentials(service, password)
        if not is_valid:
            return ActionResult.failure(message)
        self.passwords.add_password(service, password)
        return ActionResult.success(config.PASSWORD_ADDED_MESSAGE.format(service=service))

    def view_password(self, service: str) -> ActionResult:
        is_valid, message = self.validator.check_service(service)
        if not is_valid:
            return ActionResult.failure(message)
        password = self.passwords.get_password(service)
        if password is None:
            return ActionResult.failure(config.ERROR_PASSWORD_NOT_FOUND.format(service=service))
        return ActionResult.success(
            config.PASSWORD_VIEW_MESSAGE.format(service=service, password=password)
        )

    def delete_password(self, service: str) -> ActionResult:
        is_valid, message = self.validator.check_service(service)
        if not is_valid:
            return ActionResult.failure(message)
        if not self.passwords.delete_password(service):
            return ActionResult.failure(config.ERROR_PASSWORD_NOT_FOUND.format(service=service))
        return ActionResult.success(config.PASSWORD_DELETED_MESSAGE.format(service=service))
