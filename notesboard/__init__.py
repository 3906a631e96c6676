"""
This is the main package for NotesBoard.

- ``notes`` - the note model, the note store and the note services.
- ``gui`` - the notes screen view model and its PyQt6 window.
- ``helpers`` - settings, logging and date helpers used throughout.

"""

from . import helpers

__all__ = ['helpers', ]
