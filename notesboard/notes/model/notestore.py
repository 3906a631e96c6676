"""
Contains the ``NoteStore`` class, which holds the ordered collection of notes shown on the notes screen together with
the row view models derived from them.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List

from notesboard import helpers
from notesboard.helpers import DateUtil
from notesboard.notes.model.note import Note, NoteRowViewModel


class NoteNotFoundError(LookupError):
    """
    Raised when a note is looked up by an id or index that isn't in the store.
    """
    pass


class DuplicateNoteError(ValueError):
    """
    Raised when a note is inserted with an id that is already in the store.
    """
    pass


class NoteStore:
    """
    The ordered collection of notes. ``rows`` always has one view model per note, at the same position.

    The collection is ordered newest first. :py:meth:`load` and :py:meth:`update` sort by modification date;
    :py:meth:`insert` puts the note at the front without sorting, since a new note is the most recent one.
    """

    def __init__(self):
        self.notes: List[Note] = []
        self.rows: List[NoteRowViewModel] = []
        self._by_id: Dict[str, Note] = {}

    def __len__(self):
        return len(self.notes)

    @property
    def count(self) -> int:
        """
        :return: the number of notes in the store.
        """
        return len(self.notes)

    @staticmethod
    def header_text(count: int) -> str:
        """
        Get the header text for a number of notes.

        :param count: the number of notes.
        :return: ``1 Note`` for a single note, ``<count> Notes`` otherwise.
        """
        return '{0} {1}'.format(count, 'Note' if count == 1 else 'Notes')

    def load(self, notes: Iterable[Note]) -> None:
        """
        Replace the collection and regenerate every row view model. A note whose id is already taken by an earlier
        note is given a new id.

        :param notes: the notes to load.
        """
        self.notes = []
        self._by_id = {}
        for note in notes:
            if note.uuid in self._by_id:
                old_id = note.uuid
                note.uuid = helpers.get_uuid()
                logging.warning('Note {0!r} repeats id {1}, giving it id {2}'.format(note.title, old_id, note.uuid))
            self.notes.append(note)
            self._by_id[note.uuid] = note
        self.rows = [NoteRowViewModel.from_note(note) for note in self.notes]
        self._sort()
        logging.debug('Loaded {} notes'.format(len(self.notes)))

    def insert(self, note: Note) -> None:
        """
        Add a note to the front of the collection.

        :param note: the note to add.
        :raises DuplicateNoteError: if a note with the same id is already in the store.
        """
        if note.uuid in self._by_id:
            raise DuplicateNoteError('A note with id {} already exists'.format(note.uuid))
        self.notes.insert(0, note)
        self.rows.insert(0, NoteRowViewModel.from_note(note))
        self._by_id[note.uuid] = note
        logging.debug('Inserted note {}'.format(note.uuid))

    def update(self, note_id: str, title: str, content: str, modified_date: datetime | None) -> bool:
        """
        Update a note and its row, then re-sort the collection by modification date.

        :param note_id: the UUID of the note to update.
        :param title: the new title.
        :param content: the new content.
        :param modified_date: the new modification date.

        :return: True if the note was updated, False if there is no note with this id.
        """
        note = self._by_id.get(note_id)
        if note is None:
            logging.warning('Cannot update note {}: not found'.format(note_id))
            return False
        index = self.notes.index(note)
        note.title = title
        note.content = content
        note.modified_date = modified_date
        self.rows[index].update_data(title, content, DateUtil.display(modified_date))
        self._sort()
        logging.debug('Updated note {}'.format(note_id))
        return True

    def delete(self, note_id: str) -> Note:
        """
        Remove a note by id.

        :param note_id: the UUID of the note to remove.

        :return: the removed note.
        :raises NoteNotFoundError: if there is no note with this id.
        """
        return self.delete_at(self.index_of(note_id))

    def delete_at(self, index: int) -> Note:
        """
        Remove the note at a position.

        :param index: the position of the note to remove.

        :return: the removed note.
        :raises NoteNotFoundError: if the index is out of range.
        """
        note = self.get(index)
        self._by_id.pop(note.uuid, None)
        del self.notes[index]
        del self.rows[index]
        logging.debug('Deleted note {0} at {1}'.format(note.uuid, index))
        return note

    def get(self, index: int) -> Note:
        """
        :raises NoteNotFoundError: if the index is out of range.
        """
        if not 0 <= index < len(self.notes):
            raise NoteNotFoundError('No note at index {}'.format(index))
        return self.notes[index]

    def index_of(self, note_id: str) -> int:
        """
        :raises NoteNotFoundError: if there is no note with this id.
        """
        note = self._by_id.get(note_id)
        if note is None:
            raise NoteNotFoundError('No note with id {}'.format(note_id))
        return self.notes.index(note)

    def _sort(self) -> None:
        # Undated notes keep their positions; dated notes are sorted newest first into the remaining slots.
        pairs = list(zip(self.notes, self.rows))
        dated = iter(sorted((pair for pair in pairs if pair[0].modified_date is not None),
                            key=lambda pair: pair[0].modified_date, reverse=True))
        ordered = [pair if pair[0].modified_date is None else next(dated) for pair in pairs]
        self.notes = [note for note, row in ordered]
        self.rows = [row for note, row in ordered]
