"""
Contains the note services which supply the notes screen with its notes. The screen controller only relies on
``fetch_notes``; saving is used by the GUI to persist the collection after it changes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from notesboard import helpers
from notesboard.notes.model.note import Note


class NoteService:
    """
    Base class for note services.
    """

    def fetch_notes(self) -> tuple[bool, List[Note] | str]:
        """
        Fetch all notes. Called once, off the GUI thread.

        :returns:

            -success (:py:class:`bool`) - true if the notes are successfully fetched.

            -data (:py:class:`List[Note]` | :py:class:`str`) - the notes, or an error message on failure.

        """
        raise NotImplementedError

    def save_notes(self, notes: List[Note]) -> tuple[bool, str]:
        """
        Save all notes.

        :param notes: the notes to save.

        :returns:

            -success (:py:class:`bool`) - true if the notes are successfully saved.

            -data (:py:class:`str`) - success message, or error message on failure.

        """
        raise NotImplementedError


class JsonNoteService(NoteService):
    """
    Stores notes as a JSON list in a single file.
    """

    def __init__(self, location: Path | str | None = None):
        """
        :param location: path to the notes file. Defaults to ``notes.json`` in the Application Data folder.
        """
        self.location: Path = Path(location) if location else helpers.notes_file()

    def fetch_notes(self) -> tuple[bool, List[Note] | str]:
        if not self.location.exists():
            logging.info('No notes file at {}, starting with no notes'.format(self.location))
            return True, []
        try:
            with open(self.location) as fp:
                data = json.load(fp)
        except OSError as e:
            return False, 'Could not read notes from {0}: {1}'.format(self.location, e)
        except ValueError as e:
            return False, 'Notes file {0} is corrupt: {1}'.format(self.location, e)
        if not isinstance(data, list):
            return False, 'Notes file {} does not contain a list of notes'.format(self.location)

        notes = [Note.from_dict(item) for item in data]
        logging.debug('Fetched {0} notes from {1}'.format(len(notes), self.location))
        return True, notes

    def save_notes(self, notes: List[Note]) -> tuple[bool, str]:
        try:
            self.location.parent.mkdir(parents=True, exist_ok=True)
            with open(self.location, 'w') as fp:
                json.dump([note.to_dict() for note in notes], fp, indent=2)
        except OSError as e:
            error = 'Failed to save notes to {0}: {1}'.format(self.location, e)
            logging.critical(error)
            return False, error
        return True, 'Saved {0} notes to {1}'.format(len(notes), self.location)
