"""
This is the notes package for NotesBoard.

- ``model`` - the ``Note`` class, its row view model, the ``NoteStore`` and the edit flow outcomes.
- ``service.py`` - Contains the ``NoteService`` classes that fetch and save notes.

"""

from . import model, service

__all__ = ['model', 'service', ]
