import datetime

import pytest

from notesboard.notes.model.note import Note
from notesboard.notes.model.notestore import DuplicateNoteError, NoteNotFoundError, NoteStore


def modified(day: int) -> datetime.datetime:
    return datetime.datetime(2024, 1, day, 12, 0, 0)


class TestNoteStore:

    @staticmethod
    def _titles(store: NoteStore):
        return [note.title for note in store.notes]

    @staticmethod
    def _assert_rows_match(store: NoteStore):
        assert len(store.rows) == len(store.notes)
        for note, row in zip(store.notes, store.rows):
            assert row.title == note.title
            assert row.text == note.content

    def test_header_text(self):
        assert NoteStore.header_text(0) == "0 Notes"
        assert NoteStore.header_text(1) == "1 Note"
        assert NoteStore.header_text(2) == "2 Notes"
        assert NoteStore.header_text(5) == "5 Notes"

    def test_empty(self):
        store = NoteStore()
        assert store.count == 0
        assert len(store) == 0
        assert store.rows == []

    def test_load(self):
        store = NoteStore()
        store.load([Note(title='A', modified_date=modified(1)), Note(title='B', modified_date=modified(3))])
        assert store.count == 2
        assert TestNoteStore._titles(store) == ['B', 'A']
        TestNoteStore._assert_rows_match(store)

        store.load([Note(title='C')])
        assert TestNoteStore._titles(store) == ['C']
        TestNoteStore._assert_rows_match(store)

    def test_load_keeps_undated_notes_in_place(self):
        store = NoteStore()
        store.load([
            Note(title='Undated', modified_date=None),
            Note(title='Old', modified_date=modified(1)),
            Note(title='Middle', modified_date=modified(2)),
            Note(title='Undated 2', modified_date=None),
            Note(title='New', modified_date=modified(3)),
        ])
        assert TestNoteStore._titles(store) == ['Undated', 'New', 'Middle', 'Undated 2', 'Old']
        TestNoteStore._assert_rows_match(store)

    def test_load_ties_are_stable(self):
        store = NoteStore()
        store.load([Note(title=str(i), modified_date=modified(1)) for i in range(4)])
        assert TestNoteStore._titles(store) == ['0', '1', '2', '3']

    def test_insert(self):
        store = NoteStore()
        store.load([Note(title='A', modified_date=modified(5))])
        store.insert(Note(title='Older', modified_date=modified(1)))
        # Inserting never re-sorts
        assert TestNoteStore._titles(store) == ['Older', 'A']
        assert store.rows[0].title == 'Older'
        assert store.count == 2

    def test_load_repeated_id(self):
        store = NoteStore()
        store.load([Note(title='A', uuid='x'), Note(title='B', uuid='x')])
        assert store.count == 2
        assert store.get(0).uuid == 'x'
        assert store.get(1).uuid != 'x'
        assert store.index_of(store.get(1).uuid) == 1
        assert store.delete_at(0).title == 'A'
        assert store.delete_at(0).title == 'B'
        assert store.count == 0
        assert store.rows == []

    def test_insert_repeated_id(self):
        store = NoteStore()
        store.load([Note(title='A', uuid='x')])
        with pytest.raises(DuplicateNoteError):
            store.insert(Note(title='B', uuid='x'))
        assert TestNoteStore._titles(store) == ['A']
        assert store.delete('x').title == 'A'
        assert store.count == 0

    def test_insert_then_delete(self):
        store = NoteStore()
        store.load([Note(title=t, modified_date=modified(d)) for t, d in (('A', 1), ('B', 2), ('C', 3))])
        before = list(store.notes)
        note = Note(title='D', modified_date=modified(4))
        store.insert(note)
        removed = store.delete(note.uuid)
        assert removed is note
        assert store.notes == before
        assert store.count == 3
        TestNoteStore._assert_rows_match(store)

    def test_update(self):
        a = Note(title='A', content='a', modified_date=modified(1))
        b = Note(title='B', content='b', modified_date=modified(3))
        store = NoteStore()
        store.load([a, b])

        assert store.update(a.uuid, 'A2', 'a2', modified(5)) is True
        assert TestNoteStore._titles(store) == ['A2', 'B']
        assert a.content == 'a2'
        assert a.modified_date == modified(5)
        assert store.rows[0].title == 'A2'
        assert store.rows[0].text == 'a2'
        assert store.rows[0].date_modified == '05.01.2024 12:00'
        TestNoteStore._assert_rows_match(store)

    def test_update_keeps_sort_order(self):
        notes = [Note(title=str(d), modified_date=modified(d)) for d in (2, 9, 4, 7, 1)]
        store = NoteStore()
        store.load(notes)
        for note, day in zip(notes, (6, 3, 10, 8, 5)):
            store.update(note.uuid, note.title, '', modified(day))
            index = store.index_of(note.uuid)
            for later in store.notes[index + 1:]:
                assert store.notes[index].modified_date >= later.modified_date
        TestNoteStore._assert_rows_match(store)

    def test_update_missing(self):
        store = NoteStore()
        store.load([Note(title='A', modified_date=modified(1))])
        assert store.update('missing', 'X', 'x', modified(2)) is False
        assert TestNoteStore._titles(store) == ['A']

    def test_delete_missing(self):
        store = NoteStore()
        store.load([Note(title='A', modified_date=modified(1))])
        with pytest.raises(NoteNotFoundError):
            store.delete('missing')
        with pytest.raises(NoteNotFoundError):
            store.delete_at(1)
        with pytest.raises(NoteNotFoundError):
            store.delete_at(-1)
        assert store.count == 1

    def test_delete_at(self):
        store = NoteStore()
        store.load([Note(title=t, modified_date=modified(d)) for t, d in (('A', 1), ('B', 2), ('C', 3))])
        removed = store.delete_at(1)
        assert removed.title == 'B'
        assert TestNoteStore._titles(store) == ['C', 'A']
        TestNoteStore._assert_rows_match(store)
        with pytest.raises(NoteNotFoundError):
            store.index_of(removed.uuid)

    def test_get(self):
        store = NoteStore()
        store.load([Note(title='A')])
        assert store.get(0).title == 'A'
        with pytest.raises(NoteNotFoundError):
            store.get(1)

    def test_scenario(self):
        a = Note(title='A', modified_date=modified(1))
        b = Note(title='B', modified_date=modified(3))
        store = NoteStore()
        store.load([a, b])
        assert store.notes == [b, a]

        store.update(a.uuid, a.title, a.content, modified(5))
        assert store.notes == [a, b]

        store.delete(b.uuid)
        assert store.notes == [a]
        assert NoteStore.header_text(store.count) == "1 Note"
