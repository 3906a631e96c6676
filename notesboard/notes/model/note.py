"""
Contains the ``Note`` class, which represents a single user note, and the ``NoteRowViewModel`` class, which is the
display-ready projection of a note for one list or gallery cell.
"""

from __future__ import annotations

from datetime import datetime

from notesboard import helpers
from notesboard.helpers import DateUtil


class Note:
    """
    Represents a note. Notes are created when the note service is fetched or when the edit flow saves a new note, and
    are only changed by the edit flow.
    """

    def __init__(self,
                 title: str = '',
                 content: str = '',
                 created_date: datetime | None = None,
                 modified_date: datetime | None = None,
                 uuid: str | None = None):
        """
        Create a new note.

        :param title: the title of the note.
        :param content: the text of the note.
        :param created_date: creation date of the note.
        :param modified_date: modification date of the note.
        :param uuid: the UUID for this note. A new one is generated if not given.
        """
        self.uuid: str = uuid if uuid else helpers.get_uuid()
        self.title: str = title
        self.content: str = content
        self.created_date: datetime | None = created_date
        self.modified_date: datetime | None = modified_date

    @staticmethod
    def from_dict(data: dict) -> Note:
        """
        Creates a Note from a dictionary, as stored in the notes file.

        :param data: dictionary with ``uuid``, ``title``, ``content``, ``created_date`` and ``modified_date`` keys.
        :return: a Note instance. Missing or unreadable dates are set to None.
        """
        return Note(
            uuid=data.get('uuid'),
            title=data.get('title', ''),
            content=data.get('content', ''),
            created_date=DateUtil.convert(DateUtil.STORAGE_DATETIME, data.get('created_date')),
            modified_date=DateUtil.convert(DateUtil.STORAGE_DATETIME, data.get('modified_date')))

    def to_dict(self) -> dict:
        """
        Converts this note to a dictionary suitable for JSON.

        :return: a dictionary representation of this note.
        """
        return {
            'uuid': self.uuid,
            'title': self.title,
            'content': self.content,
            'created_date': DateUtil.convert('', self.created_date, DateUtil.STORAGE_DATETIME),
            'modified_date': DateUtil.convert('', self.modified_date, DateUtil.STORAGE_DATETIME)
        }

    def __eq__(self, other):
        if not isinstance(other, Note):
            return NotImplemented
        return self.uuid == other.uuid

    def __hash__(self):
        return hash(self.uuid)

    def __repr__(self):
        return 'Note({0!r}, modified={1})'.format(self.title, self.modified_date)

    def __str__(self):
        return self.title


class NoteRowViewModel:
    """
    What a single cell displays for a note. Dates are already formatted, and are None when the note has no such date.
    """

    def __init__(self, title: str, text: str, date_created: str | None, date_modified: str | None):
        self.title: str = title
        self.text: str = text
        self.date_created: str | None = date_created
        self.date_modified: str | None = date_modified

    @staticmethod
    def from_note(note: Note) -> NoteRowViewModel:
        """
        Projects a note into a row view model.

        :param note: the note to project.
        :return: the row view model for this note.
        """
        return NoteRowViewModel(
            title=note.title,
            text=note.content,
            date_created=DateUtil.display(note.created_date),
            date_modified=DateUtil.display(note.modified_date))

    def update_data(self, title: str, text: str, date_modified: str | None) -> None:
        """
        Refreshes this row after its note was edited. The creation date never changes.
        """
        self.title = title
        self.text = text
        self.date_modified = date_modified

    def __repr__(self):
        return 'NoteRowViewModel({0!r}, {1!r})'.format(self.title, self.date_modified)
