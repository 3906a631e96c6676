"""
Contains the ``EditNoteDialog`` class - the edit flow for creating or changing a single note.
"""

from __future__ import annotations

from datetime import datetime

from PyQt6.QtWidgets import QDialog, QDialogButtonBox, QLineEdit, QPlainTextEdit, QPushButton, QVBoxLayout

from notesboard.notes.model.editoutcome import EditOutcome, NoteCreated, NoteDeleted, NoteUpdated
from notesboard.notes.model.note import Note


# noinspection PyUnresolvedReferences
class EditNoteDialog(QDialog):
    """
    Edits a note. After the dialog closes, :py:attr:`outcome` holds what happened, or None if the user cancelled or
    saved a new note without any text.
    """

    def __init__(self, note: Note | None = None, *args, **kwargs):
        """
        :param note: the note to edit, or None to create a new note.
        """
        super().__init__(*args, **kwargs)
        self.note: Note | None = note
        self.outcome: EditOutcome | None = None
        self.setWindowTitle('New Note' if note is None else 'Edit Note')
        self.resize(420, 360)

        self.txt_title = QLineEdit(note.title if note else '')
        self.txt_title.setPlaceholderText('Title')
        self.txt_content = QPlainTextEdit(note.content if note else '')

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.save)
        buttons.rejected.connect(self.reject)
        if note is not None:
            btn_delete = QPushButton('Delete')
            btn_delete.clicked.connect(self.delete)
            buttons.addButton(btn_delete, QDialogButtonBox.ButtonRole.DestructiveRole)

        layout = QVBoxLayout(self)
        layout.addWidget(self.txt_title)
        layout.addWidget(self.txt_content)
        layout.addWidget(buttons)

    def save(self) -> None:
        title = self.txt_title.text().strip()
        content = self.txt_content.toPlainText()
        now = datetime.now()
        if self.note is None:
            if title or content.strip():
                self.outcome = NoteCreated(Note(title=title, content=content, created_date=now, modified_date=now))
        elif title != self.note.title or content != self.note.content:
            self.outcome = NoteUpdated(self.note.uuid, title, content, now)
        self.accept()

    def delete(self) -> None:
        self.outcome = NoteDeleted(self.note.uuid)
        self.accept()
