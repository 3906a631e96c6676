"""
Contains the ``NotesScreenController`` class - the view model for the notes screen. It reacts to user actions, keeps
the ``NoteStore`` up to date and tells the view what to redraw through its signals.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from notesboard.gui.viewmodel import threadedtasks
from notesboard.notes.model.editoutcome import EditFailed, EditOutcome, NoteCreated, NoteDeleted, NoteUpdated
from notesboard.notes.model.notestore import DuplicateNoteError, NoteNotFoundError, NoteStore
from notesboard.notes.service import NoteService


class SelectionState:
    """
    Tracks the row revealed for deletion by a swipe. Idle when ``pending_index`` is None.
    """

    def __init__(self):
        self.pending_index: int | None = None

    @property
    def is_pending(self) -> bool:
        return self.pending_index is not None

    def select(self, index: int) -> None:
        self.pending_index = index

    def clear(self) -> None:
        self.pending_index = None


# noinspection PyUnresolvedReferences
class NotesScreenController(QObject):
    """
    View model for the notes screen. A view connects to the signals below once and disconnects when it is torn down;
    the controller keeps no reference to the view.

    All state changes and signal emissions happen on the thread this object lives in (the GUI thread). The only work
    done elsewhere is the initial note fetch, whose result is queued back to this thread.
    """

    LAYOUT_LIST = 'list'
    LAYOUT_GALLERY = 'gallery'
    LAYOUTS = [LAYOUT_LIST, LAYOUT_GALLERY]

    DELETE_CONFIRM_TITLE = ''
    DELETE_CONFIRM_MESSAGE = 'Selected note will be deleted'

    #: All rows should be reloaded.
    reload_signal = pyqtSignal()
    #: The row at this index was removed.
    remove_row_signal = pyqtSignal(int)
    #: New header text.
    header_signal = pyqtSignal(str)
    #: New layout mode, either 'list' or 'gallery'.
    layout_signal = pyqtSignal(str)
    #: An error message to display.
    error_signal = pyqtSignal(str)
    #: Ask the user to confirm deletion with this title and message.
    delete_confirm_signal = pyqtSignal(str, str)
    #: Play the swipe animation for the row at this index.
    swipe_signal = pyqtSignal(int)
    #: Dismiss the swipe affordance.
    hide_toolbar_signal = pyqtSignal()
    #: Open the edit flow for this note, or for a new note if None.
    edit_signal = pyqtSignal(object)

    def __init__(self, service: NoteService | None = None, layout: str = LAYOUT_LIST, parent: QObject | None = None):
        """
        Initialises the controller. If a note service is given, the notes are fetched from it straight away.

        :param service: where to fetch notes from.
        :param layout: the initial layout mode.
        :param parent: the Qt parent object.
        """
        super().__init__(parent)
        if layout not in NotesScreenController.LAYOUTS:
            logging.warning('Unknown layout {}, using list'.format(layout))
            layout = NotesScreenController.LAYOUT_LIST
        self.store: NoteStore = NoteStore()
        self.selection: SelectionState = SelectionState()
        self.layout: str = layout
        self.service: NoteService | None = service
        self.fetch_worker: threadedtasks.NoteFetch | None = None
        if service is not None:
            self.load_notes()

    @property
    def rows(self):
        return self.store.rows

    # FETCHING ---------------------------------------------------------------------------------------------------------

    def load_notes(self) -> None:
        """
        Fetch notes from the note service in a separate thread. There is a single attempt and no retry.
        """
        if self.service is None:
            logging.warning('No note service set, not fetching notes')
            return
        if self.fetch_worker is not None and self.fetch_worker.isRunning():
            logging.debug('Note fetch already running')
            return
        self.fetch_worker = threadedtasks.NoteFetch(self.service)
        self.fetch_worker.notes_signal.connect(self.notes_fetched)
        self.fetch_worker.error_signal.connect(self.fetch_failed)
        self.fetch_worker.start()

    @pyqtSlot(object)
    def notes_fetched(self, notes: list) -> None:
        """
        Loads fetched notes into the store and reloads the view.

        :param notes: the fetched notes.
        """
        self.store.load(notes)
        logging.info('Loaded {} notes'.format(self.store.count))
        self.reload_signal.emit()
        self.update_header()

    @pyqtSlot(str)
    def fetch_failed(self, message: str) -> None:
        """
        Shows a fetch error. The store is left untouched.

        :param message: description of the error.
        """
        self.error_signal.emit(message)

    # USER ACTIONS -----------------------------------------------------------------------------------------------------

    def update_header(self) -> None:
        """
        Emit the header text for the current number of notes.
        """
        self.header_signal.emit(NoteStore.header_text(self.store.count))

    def on_appear(self) -> None:
        self.update_header()

    def on_create_tapped(self) -> None:
        self.edit_signal.emit(None)

    def on_row_tapped(self, index: int) -> None:
        """
        Opens the edit flow for a note. If a row is revealed for deletion, the tap only dismisses it.

        :param index: the tapped row.
        """
        if self.selection.is_pending:
            self.selection.clear()
            self.hide_toolbar_signal.emit()
            return
        try:
            note = self.store.get(index)
        except NoteNotFoundError:
            logging.warning('Row {} tapped but there is no such note'.format(index))
            return
        self.edit_signal.emit(note)

    def on_swipe(self, index: int | None) -> None:
        """
        Reveals a row for deletion. Does nothing if the swipe wasn't over a row.

        :param index: the swiped row, or None.
        """
        if index is None or not 0 <= index < self.store.count:
            return
        self.selection.select(index)
        self.swipe_signal.emit(index)

    def on_delete_confirm_requested(self) -> None:
        if not self.selection.is_pending:
            logging.debug('Delete requested with no note selected')
            return
        self.delete_confirm_signal.emit(NotesScreenController.DELETE_CONFIRM_TITLE,
                                        NotesScreenController.DELETE_CONFIRM_MESSAGE)

    def on_delete_confirmed(self) -> bool:
        """
        Deletes the note revealed by the last swipe.

        :return: True if a note was deleted, False if no note was selected.
        """
        index = self.selection.pending_index
        if index is None:
            logging.warning('Delete confirmed with no note selected')
            return False
        try:
            note = self.store.delete_at(index)
        except NoteNotFoundError as e:
            logging.warning('Could not delete selected note: {}'.format(e))
            self.selection.clear()
            return False
        logging.info('Deleted note {}'.format(note.uuid))
        self.update_header()
        self.selection.clear()
        self.remove_row_signal.emit(index)
        return True

    def on_delete_cancelled(self) -> None:
        if self.selection.is_pending:
            self.selection.clear()
            self.hide_toolbar_signal.emit()

    def on_layout_toggled(self, layout: str) -> None:
        """
        Switches between the list and gallery layouts.

        :param layout: either 'list' or 'gallery'.
        :raises ValueError: if the layout is unknown.
        """
        if layout not in NotesScreenController.LAYOUTS:
            raise ValueError('Unknown layout {}'.format(layout))
        if layout == self.layout:
            return
        self.layout = layout
        self.layout_signal.emit(layout)

    # EDIT FLOW --------------------------------------------------------------------------------------------------------

    def on_edit_flow_completed(self, outcome: EditOutcome) -> None:
        """
        Applies the result of the edit flow to the store. Any row revealed for deletion is dismissed when the
        collection is reloaded, since rows may have moved.

        :param outcome: what happened in the edit flow.
        """
        if isinstance(outcome, NoteCreated):
            try:
                self.store.insert(outcome.note)
            except DuplicateNoteError as e:
                logging.warning('Could not add note: {}'.format(e))
                self.error_signal.emit(str(e))
                return
            self.selection.clear()
            self.update_header()
            self.reload_signal.emit()
        elif isinstance(outcome, NoteUpdated):
            if self.store.update(outcome.note_id, outcome.title, outcome.content, outcome.modified_date):
                self.selection.clear()
                self.reload_signal.emit()
        elif isinstance(outcome, NoteDeleted):
            try:
                self.store.delete(outcome.note_id)
            except NoteNotFoundError as e:
                logging.warning('Could not delete note: {}'.format(e))
                return
            self.selection.clear()
            self.update_header()
            self.reload_signal.emit()
        elif isinstance(outcome, EditFailed):
            logging.warning('Edit failed: {}'.format(outcome.message))
            self.error_signal.emit(outcome.message)
        else:
            raise TypeError('Unknown edit outcome {!r}'.format(outcome))
