"""
Main application entry point. Loads settings, sets up logging and displays the notes window.
"""
import argparse
import sys

from PyQt6.QtWidgets import QApplication

from notesboard import helpers
from notesboard.gui.viewmodel.notesscreen import NotesScreenController
from notesboard.gui.viewmodel.noteswindow import NotesWindow
from notesboard.notes.service import JsonNoteService


def main() -> int:
    parser = argparse.ArgumentParser(prog='notesboard', description='A simple note-taking app.')
    parser.add_argument('--notes-file', help='path to the notes file (overrides the setting)')
    parser.add_argument('--log-level', choices=list(helpers.LOG_LEVELS), help='logging level (overrides the setting)')
    parser.add_argument('--log-stdout', action='store_true', help='also log to standard out')
    args, qt_args = parser.parse_known_args()

    settings = helpers.load_settings()
    helpers.setup_logging(args.log_level or settings['log_level'], log_stdout=args.log_stdout)

    app = QApplication([sys.argv[0]] + qt_args)
    service = JsonNoteService(args.notes_file or settings['notes_file'] or None)
    controller = NotesScreenController(service, layout=settings['layout'])
    window = NotesWindow(controller, service, settings)
    # Log records can come from the fetch thread, so they reach the status bar through a signal
    helpers.add_log_function(window.log_signal.emit)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
