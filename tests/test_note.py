import datetime

from notesboard.notes.model.note import Note, NoteRowViewModel


class TestNote:
    CREATED = datetime.datetime(2023, 2, 9, 10, 30, 0)
    MODIFIED = datetime.datetime(2023, 2, 10, 18, 5, 12)

    @staticmethod
    def _create_note() -> Note:
        return Note(title='Shopping', content='Milk\nEggs', created_date=TestNote.CREATED,
                    modified_date=TestNote.MODIFIED, uuid='note-1')

    def test_new_note_gets_uuid(self):
        note_one = Note()
        note_two = Note()
        assert len(note_one.uuid) == 36
        assert note_one.uuid != note_two.uuid
        assert note_one.title == ''
        assert note_one.content == ''
        assert note_one.created_date is None
        assert note_one.modified_date is None

    def test_to_dict(self):
        data = TestNote._create_note().to_dict()
        assert data == {
            'uuid': 'note-1',
            'title': 'Shopping',
            'content': 'Milk\nEggs',
            'created_date': '2023-02-09 10:30:00',
            'modified_date': '2023-02-10 18:05:12'
        }

    def test_from_dict(self):
        note = Note.from_dict(TestNote._create_note().to_dict())
        assert note.uuid == 'note-1'
        assert note.title == 'Shopping'
        assert note.content == 'Milk\nEggs'
        assert note.created_date == TestNote.CREATED
        assert note.modified_date == TestNote.MODIFIED

    def test_from_dict_missing_dates(self):
        note = Note.from_dict({'uuid': 'note-2', 'title': 'Undated', 'modified_date': 'yesterday'})
        assert note.uuid == 'note-2'
        assert note.content == ''
        assert note.created_date is None
        assert note.modified_date is None

        no_dates = Note(title='Undated').to_dict()
        assert no_dates['created_date'] is None
        assert no_dates['modified_date'] is None

    def test_equality(self):
        note = TestNote._create_note()
        same = Note(title='Renamed', uuid='note-1')
        assert note == same
        assert hash(note) == hash(same)
        assert note != Note(title='Shopping')
        assert str(note) == 'Shopping'


class TestNoteRowViewModel:

    def test_from_note(self):
        note = Note(title='Shopping', content='Milk', created_date=datetime.datetime(2023, 2, 9, 10, 30),
                    modified_date=datetime.datetime(2023, 2, 10, 18, 5))
        row = NoteRowViewModel.from_note(note)
        assert row.title == 'Shopping'
        assert row.text == 'Milk'
        assert row.date_created == '09.02.2023 10:30'
        assert row.date_modified == '10.02.2023 18:05'

    def test_from_note_without_dates(self):
        row = NoteRowViewModel.from_note(Note(title='Draft'))
        assert row.date_created is None
        assert row.date_modified is None

    def test_update_data(self):
        row = NoteRowViewModel('Old', 'old text', '09.02.2023 10:30', None)
        row.update_data('New', 'new text', '11.02.2023 08:00')
        assert row.title == 'New'
        assert row.text == 'new text'
        assert row.date_created == '09.02.2023 10:30'
        assert row.date_modified == '11.02.2023 08:00'
