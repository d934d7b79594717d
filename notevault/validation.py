"""
Validation of user input collected by the presentation layer.

The stores accept anything they are given; blank text and malformed note
identifiers are rejected here before a store is called.
"""

import re
from typing import Tuple

from . import config

NOTE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidNoteIdError(ValueError):
    """Raised when a note identifier entered by the user is not a number."""


class InputValidator:
    """Validates user input before it reaches the stores."""

    @staticmethod
    def check_note(text: str) -> Tuple[bool, str]:
        """
        Check that a note has some non-whitespace content.

        Returns:
            Tuple of (is_valid, message)
        """
        if not text.strip():
            return False, config.ERROR_EMPTY_NOTE
        return True, ""

    @staticmethod
    def check_credentials(service: str, password: str) -> Tuple[bool, str]:
        """
        Check that both a service name and a password were entered.

        Returns:
            Tuple of (is_valid, message)
        """
        if not service.strip() or not password.strip():
            return False, config.ERROR_EMPTY_CREDENTIALS
        return True, ""

    @staticmethod
    def check_service(service: str) -> Tuple[bool, str]:
        """
        Check that a service name was entered for a lookup or delete.

        Returns:
            Tuple of (is_valid, message)
        """
        if not service.strip():
            return False, config.ERROR_EMPTY_SERVICE
        return True, ""

    @staticmethod
    def parse_note_id(text: str) -> int:
        """
        Parse a note identifier typed by the user.

        Only ASCII digits with an optional sign are accepted, within the
        range of a 32-bit signed integer.

        Raises:
            InvalidNoteIdError: If the text is not such an integer
        """
        stripped = text.strip()
        if not NOTE_ID_PATTERN.fullmatch(stripped):
            raise InvalidNoteIdError(config.ERROR_INVALID_NOTE_ID)
        note_id = int(stripped)
        if not config.NOTE_ID_MIN <= note_id <= config.NOTE_ID_MAX:
            raise InvalidNoteIdError(config.ERROR_INVALID_NOTE_ID)
        return note_id
