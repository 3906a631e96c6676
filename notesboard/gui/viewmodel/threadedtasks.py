"""
Contains classes which are run in a separate thread.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from notesboard.notes.service import NoteService


# noinspection PyUnresolvedReferences
class NoteFetch(QThread):
    """
    Fetches notes from a note service off the GUI thread. Exactly one of ``notes_signal`` or ``error_signal`` is
    emitted per run. Receivers living in the GUI thread get the result through a queued connection, so they are
    called on the GUI thread.
    """

    #: The fetched notes are sent to this signal.
    notes_signal = pyqtSignal(object)
    #: Error messages are sent to this signal.
    error_signal = pyqtSignal(str)

    def __init__(self, service: NoteService):
        """
        Initialises the fetch.

        :param service: the note service to fetch notes from.
        """
        super().__init__()
        self.service: NoteService = service

    def run(self) -> None:
        """
        Fetches the notes and reports the result.
        """
        try:
            success, data = self.service.fetch_notes()
        except Exception as e:
            logging.exception('Note service raised while fetching notes')
            success, data = False, str(e)

        if not success:
            logging.critical('Failed to fetch notes: {}'.format(data))
            self.error_signal.emit(data)
            return
        logging.debug('Fetched {} notes'.format(len(data)))
        self.notes_signal.emit(data)
