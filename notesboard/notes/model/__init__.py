"""
This is the model of NotesBoard. Here, you'll find the following:

- ``note.py`` - Contains the ``Note`` class and the ``NoteRowViewModel`` class that represents a note in a list or
  gallery cell.
- ``notestore.py`` - Contains the ``NoteStore`` class which holds the ordered collection of notes and their rows.
- ``editoutcome.py`` - Contains the outcomes reported by the edit flow.

"""

from . import editoutcome, note, notestore

__all__ = ['editoutcome', 'note', 'notestore', ]
