"""
This is the view model package for the GUI. Here, you'll find the following:

- ``notesscreen.py`` - Contains the ``NotesScreenController`` class - the view model for the notes screen.
- ``noteswindow.py`` - Contains the ``NotesWindow`` class which displays the notes screen.
- ``editnote.py`` - Contains the ``EditNoteDialog`` class - the edit flow for a single note.
- ``threadedtasks.py`` - Contains classes which run in separate threads.
"""
