"""
In-memory note storage.

Notes live only as long as the NoteStore that holds them. Nothing is written
to disk.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from . import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    """Represents a single note."""
    id: int
    content: str

    def format_line(self) -> str:
        """Format the note as a single listing line."""
        return config.NOTE_LINE_FORMAT.format(id=self.id, content=self.content)


class NoteStore:
    """Holds notes keyed by an auto-incrementing integer identifier."""

    def __init__(self):
        self._notes: Dict[int, Note] = {}
        self._next_id = config.NOTE_ID_START

    def add_note(self, content: str) -> int:
        """
        Store a new note.

        The store does not validate content; rejecting blank text is up to
        the caller.

        Args:
            content: Text of the note

        Returns:
            The identifier assigned to the note
        """
        note_id = self._next_id
        self._next_id += 1
        self._notes[note_id] = Note(id=note_id, content=content)
        logger.debug(f"Added note {note_id}")
        return note_id

    def notes(self) -> List[Note]:
        """Get all current notes ordered by identifier."""
        return [self._notes[note_id] for note_id in sorted(self._notes)]

    def list_notes(self) -> str:
        """
        Format all current notes, one per line.

        Returns:
            The listing, or config.NO_NOTES_MESSAGE if there are no notes
        """
        if not self._notes:
            return config.NO_NOTES_MESSAGE
        return "\n".join(note.format_line() for note in self.notes())

    def delete_note(self, note_id: int) -> bool:
        """
        Delete a note.

        Identifiers of deleted notes are never handed out again.

        Returns:
            True if the note existed, False otherwise
        """
        if self._notes.pop(note_id, None) is None:
            logger.debug(f"Delete requested for unknown note {note_id}")
            return False
        logger.debug(f"Deleted note {note_id}")
        return True

    def __len__(self) -> int:
        return len(self._notes)
