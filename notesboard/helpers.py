"""
Helpers shared by the note model, the screen controller and the GUI.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable

DATA_LOCATION: Path = Path.home() / ".local" / "share" / "NotesBoard"  #: Location where application data is stored.
LOG_LOCATION: Path = DATA_LOCATION / "logs"  #: Location where log files are written.

#: Default application settings, written to ``conf.json`` when it doesn't exist.
DEFAULT_SETTINGS = {
    'layout': 'list',
    'log_level': 'info',
    'notes_file': ''
}

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'critical': logging.CRITICAL
}


def get_uuid() -> str:
    """
    Generates a UUID.

    :return: a UUID.
    """
    return str(uuid.uuid4())


def settings_folder() -> Path:
    """
    Get the location of the Application Data folder for NotesBoard

    :return: path to the Application Data folder.
    """
    folder = DATA_LOCATION
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def notes_file() -> Path:
    """
    Get the default location of the notes file.

    :return: path to ``notes.json`` in the Application Data folder.
    """
    return settings_folder() / 'notes.json'


def load_settings() -> dict:
    """
    Load settings from the configuration file, creating it with :py:data:`DEFAULT_SETTINGS` if it doesn't exist.
    Keys missing from the file are filled in from the defaults.

    :return: the settings dictionary.
    """
    conf_file = settings_folder() / 'conf.json'
    if not conf_file.exists():
        save_settings(DEFAULT_SETTINGS)
        return dict(DEFAULT_SETTINGS)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(conf_file) as fp:
            settings.update(json.load(fp))
    except (OSError, ValueError) as e:
        logging.warning('Could not read settings from {0}, using defaults: {1}'.format(conf_file, e))
    return settings


def save_settings(settings: dict) -> None:
    """
    Save settings to the configuration file.

    :param settings: the settings dictionary to save.
    """
    with open(settings_folder() / 'conf.json', 'w') as fp:
        json.dump(settings, fp)


def setup_logging(logging_level: str, log_stdout: bool = False, log_file: bool = True,
                  log_func: Callable | None = None) -> logging.Logger:
    """
    Sets up the root logger.

    :param logging_level: the logging level which can be `debug`, `info`, `warning` or `critical`.
    :param log_stdout: if True, logs are sent to standard out.
    :param log_file: if True, logs are sent to a dated file in :py:data:`LOG_LOCATION`.
    :param log_func: if given, formatted log messages are also passed to this function.

    :return: the root logger.
    """
    log_level = LOG_LEVELS.get(logging_level, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s: %(message)s',
    )
    logger = logging.getLogger()
    logger.setLevel(log_level)
    if log_file:
        LOG_LOCATION.mkdir(parents=True, exist_ok=True)
        file_name = datetime.now().strftime("NotesBoard_%Y%m%d-%H%M%S") + '.log'
        logger.addHandler(logging.FileHandler(LOG_LOCATION / file_name))
    if log_stdout:
        logger.addHandler(logging.StreamHandler(sys.stdout))
    if log_func is not None:
        add_log_function(log_func)
    return logger


def add_log_function(func: Callable, level: int = logging.INFO) -> FunctionHandler:
    """
    Sends log messages at or above a level to a function, such as one which shows them in the GUI.

    :param func: called with each formatted log message.
    :param level: the lowest level passed to the function.

    :return: the handler added to the root logger.
    """
    func_handler = FunctionHandler(func)
    func_handler.setLevel(level)
    func_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.getLogger().addHandler(func_handler)
    return func_handler


class DateUtil:
    """
    Utility class for converting between the date/time formats used by notes.
    """

    #: Format used for dates shown in note rows.
    DISPLAY_DATETIME = "%d.%m.%Y %H:%M"
    #: Format used for dates stored in the notes file.
    STORAGE_DATETIME = "%Y-%m-%d %H:%M:%S"

    @staticmethod
    def convert(source_format: str,
                obj: str | datetime | None,
                required_format: str = '') -> str | datetime | None:
        """
        Convert one date/datetime format to another.

        :param source_format: the format of the source date/datetime. Can be left empty if ``obj`` is a
        :py:class:`datetime` object.
        :param obj: what to convert from. Can either be a string, or a :py:class:`datetime` object.
        :param required_format: the format required if the required output is of type :py:class:`str`.

        :return: the converted value, or None if ``obj`` is empty or can't be converted.
        """
        if obj is None or obj == '':
            return None
        if isinstance(obj, str):
            try:
                obj = datetime.strptime(obj, source_format)
            except ValueError:
                logging.warning('Could not parse date {0} with format {1}'.format(obj, source_format))
                return None
        if required_format == '':
            return obj
        return obj.strftime(required_format)

    @staticmethod
    def display(obj: datetime | None) -> str | None:
        """
        Format a date for display in a note row.

        :param obj: the date to format.

        :return: the formatted date, or None if there is no date.
        """
        return DateUtil.convert('', obj, DateUtil.DISPLAY_DATETIME)


class FunctionHandler(logging.Handler):
    def __init__(self, func: Callable):
        logging.Handler.__init__(self)
        self.func = func

    def emit(self, record):
        msg = self.format(record)
        self.func(msg)
