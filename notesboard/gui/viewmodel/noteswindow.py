"""
Contains the ``NotesWindow`` class - the notes screen. It draws whatever the ``NotesScreenController`` tells it to and
forwards user actions back to it.
"""

from __future__ import annotations

import logging

import darkdetect
from PyQt6.QtCore import QEvent, QPoint, QSize, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QAction, QColor, QKeyEvent
from PyQt6.QtWidgets import (QHBoxLayout, QLabel, QListView, QListWidget, QListWidgetItem, QMainWindow, QMenu,
                             QMessageBox, QPushButton, QVBoxLayout, QWidget)

from notesboard import helpers
from notesboard.gui.viewmodel.editnote import EditNoteDialog
from notesboard.gui.viewmodel.notesscreen import NotesScreenController
from notesboard.notes.model.editoutcome import EditFailed
from notesboard.notes.model.note import Note, NoteRowViewModel
from notesboard.notes.service import NoteService


# noinspection PyUnresolvedReferences
class NotesWindow(QMainWindow):
    """
    The notes screen. The window only holds a reference to the controller; the controller doesn't know about the
    window.
    """

    SWIPE_HIGHLIGHT_MS = 500
    STATUS_MESSAGE_MS = 5000
    log_signal = pyqtSignal(str)

    def __init__(self, controller: NotesScreenController, service: NoteService, settings: dict, *args, **kwargs):
        """
        Initialises the window and subscribes to the controller.

        :param controller: the notes screen controller.
        :param service: the note service, used to save notes after they change.
        :param settings: application settings. The layout is saved here when it changes.
        """
        super().__init__(*args, **kwargs)
        self.controller: NotesScreenController = controller
        self.service: NoteService = service
        self.settings: dict = settings
        self.setWindowTitle('Notes')
        self.resize(480, 640)

        self.lbl_header = QLabel()
        font = self.lbl_header.font()
        font.setPointSize(22)
        self.lbl_header.setFont(font)
        self.btn_list = QPushButton('List')
        self.btn_gallery = QPushButton('Gallery')
        for btn in (self.btn_list, self.btn_gallery):
            btn.setCheckable(True)
        self.btn_list.clicked.connect(lambda: self.toggle_layout(NotesScreenController.LAYOUT_LIST))
        self.btn_gallery.clicked.connect(lambda: self.toggle_layout(NotesScreenController.LAYOUT_GALLERY))

        self.lst_notes = QListWidget()
        self.lst_notes.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.lst_notes.customContextMenuRequested.connect(self.show_row_menu)
        self.lst_notes.itemClicked.connect(lambda item: self.controller.on_row_tapped(self.lst_notes.row(item)))
        self.lst_notes.installEventFilter(self)

        self.btn_create = QPushButton('New Note')
        self.btn_create.clicked.connect(self.controller.on_create_tapped)

        top = QHBoxLayout()
        top.addWidget(self.lbl_header)
        top.addStretch()
        top.addWidget(self.btn_gallery)
        top.addWidget(self.btn_list)
        layout = QVBoxLayout()
        layout.addLayout(top)
        layout.addWidget(self.lst_notes)
        layout.addWidget(self.btn_create, alignment=Qt.AlignmentFlag.AlignRight)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)
        self.log_signal.connect(self.show_status)

        self.bind_to_controller()
        self.apply_layout(self.controller.layout)
        self.reload()
        self.controller.on_appear()

    # CONTROLLER BINDING -----------------------------------------------------------------------------------------------

    def bind_to_controller(self) -> None:
        self.controller.reload_signal.connect(self.reload)
        self.controller.remove_row_signal.connect(self.remove_row)
        self.controller.header_signal.connect(self.lbl_header.setText)
        self.controller.layout_signal.connect(self.layout_changed)
        self.controller.error_signal.connect(self.display_error)
        self.controller.delete_confirm_signal.connect(self.confirm_delete)
        self.controller.swipe_signal.connect(self.highlight_row)
        self.controller.hide_toolbar_signal.connect(self.clear_highlight)
        self.controller.edit_signal.connect(self.open_edit_flow)

    def unbind_from_controller(self) -> None:
        for signal in (self.controller.reload_signal, self.controller.remove_row_signal,
                       self.controller.header_signal, self.controller.layout_signal, self.controller.error_signal,
                       self.controller.delete_confirm_signal, self.controller.swipe_signal,
                       self.controller.hide_toolbar_signal, self.controller.edit_signal):
            signal.disconnect()

    def closeEvent(self, event) -> None:
        self.unbind_from_controller()
        super().closeEvent(event)

    def eventFilter(self, widget: QWidget, event: QEvent | QKeyEvent) -> bool:
        """
        Treats the Delete key on the notes list like a swipe on the current row.

        :return: True if the event was handled here.
        """
        if event.type() == QEvent.Type.KeyPress and widget == self.lst_notes:
            if event.key() == Qt.Key.Key_Delete:
                self.request_delete(self.lst_notes.currentRow())
                return True
        return False

    # RENDERING --------------------------------------------------------------------------------------------------------

    def reload(self) -> None:
        self.lst_notes.clear()
        for row in self.controller.rows:
            self.lst_notes.addItem(self.make_item(row))

    def make_item(self, row: NoteRowViewModel) -> QListWidgetItem:
        lines = [row.title or 'Untitled', row.text.splitlines()[0] if row.text else '']
        if row.date_modified:
            lines.append(row.date_modified)
        item = QListWidgetItem('\n'.join(lines))
        item.setToolTip('Created {}'.format(row.date_created) if row.date_created else '')
        return item

    def remove_row(self, index: int) -> None:
        self.lst_notes.takeItem(index)
        self.save_notes()

    def apply_layout(self, layout: str) -> None:
        gallery = layout == NotesScreenController.LAYOUT_GALLERY
        self.btn_gallery.setChecked(gallery)
        self.btn_list.setChecked(not gallery)
        if gallery:
            self.lst_notes.setViewMode(QListView.ViewMode.IconMode)
            self.lst_notes.setGridSize(QSize(200, 120))
            self.lst_notes.setWordWrap(True)
            self.lst_notes.setResizeMode(QListView.ResizeMode.Adjust)
        else:
            self.lst_notes.setViewMode(QListView.ViewMode.ListMode)
            self.lst_notes.setGridSize(QSize())

    def layout_changed(self, layout: str) -> None:
        self.apply_layout(layout)
        self.settings['layout'] = layout
        helpers.save_settings(self.settings)

    def highlight_row(self, index: int) -> None:
        item = self.lst_notes.item(index)
        if item is None:
            return
        self.clear_highlight()
        item.setBackground(QColor('#5a1f1f') if darkdetect.isDark() else QColor('#f6d5d5'))
        QTimer.singleShot(NotesWindow.SWIPE_HIGHLIGHT_MS, self.controller.on_delete_confirm_requested)

    def clear_highlight(self) -> None:
        for idx in range(self.lst_notes.count()):
            self.lst_notes.item(idx).setBackground(QColor(Qt.GlobalColor.transparent))

    # USER ACTIONS -----------------------------------------------------------------------------------------------------

    def toggle_layout(self, layout: str) -> None:
        self.controller.on_layout_toggled(layout)
        # Clicking the active button unchecks it, so always resync with the controller
        self.apply_layout(self.controller.layout)

    def show_row_menu(self, pos: QPoint) -> None:
        item = self.lst_notes.itemAt(pos)
        if item is None:
            return
        menu = QMenu(self)
        act_delete = QAction('Delete', menu)
        act_delete.triggered.connect(lambda: self.request_delete(self.lst_notes.row(item)))
        menu.addAction(act_delete)
        menu.exec(self.lst_notes.mapToGlobal(pos))

    def request_delete(self, index: int) -> None:
        self.controller.on_swipe(index if index >= 0 else None)

    def confirm_delete(self, title: str, message: str) -> None:
        ask = QMessageBox(self)
        ask.setIcon(QMessageBox.Icon.Warning)
        ask.setWindowTitle(title)
        ask.setText(message)
        ask.setStandardButtons(QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.Cancel)
        btn_delete = ask.button(QMessageBox.StandardButton.Yes)
        btn_delete.setText('Delete')
        ask.exec()
        if ask.clickedButton() == btn_delete:
            self.controller.on_delete_confirmed()
        else:
            self.controller.on_delete_cancelled()

    def open_edit_flow(self, note: Note | None) -> None:
        dialog = EditNoteDialog(note, self)
        dialog.exec()
        if dialog.outcome is None:
            return
        self.controller.on_edit_flow_completed(dialog.outcome)
        self.save_notes()

    def save_notes(self) -> None:
        success, data = self.service.save_notes(self.controller.store.notes)
        if not success:
            self.controller.on_edit_flow_completed(EditFailed(data))
            return
        logging.debug(data)

    def show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, NotesWindow.STATUS_MESSAGE_MS)

    def display_error(self, message: str) -> None:
        msg = QMessageBox(self)
        msg.setIcon(QMessageBox.Icon.Critical)
        msg.setWindowTitle('Error')
        msg.setText(message)
        msg.setStandardButtons(QMessageBox.StandardButton.Ok)
        msg.exec()
