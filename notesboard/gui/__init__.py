"""
This is the GUI package for NotesBoard.

- ``app.py`` - Application entry point.
- ``viewmodel`` - The notes screen view model and the windows which display it.

"""
