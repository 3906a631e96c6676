"""
Outcomes reported by the edit flow when it closes. Exactly one outcome is reported each time the edit flow is opened.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from notesboard.notes.model.note import Note


@dataclass(frozen=True)
class NoteCreated:
    """A new note was saved."""
    note: Note


@dataclass(frozen=True)
class NoteUpdated:
    """An existing note was edited."""
    note_id: str
    title: str
    content: str
    modified_date: datetime | None


@dataclass(frozen=True)
class NoteDeleted:
    """The note being edited was deleted."""
    note_id: str


@dataclass(frozen=True)
class EditFailed:
    """The edit flow could not complete."""
    message: str


EditOutcome = NoteCreated | NoteUpdated | NoteDeleted | EditFailed
