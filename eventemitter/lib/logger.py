import logging
from pathlib import Path

from eventemitter import PACKAGE  # Because __package__ will return eventemitter.lib


class PaddedLevelFormatter(logging.Formatter):
    """Formatter that pads level names so messages line up in columns."""

    def __init__(self, fmt=None, datefmt=None, width: int = 8):
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record):
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = record.levelname.ljust(self.width)
        return super().format(record)


def configure_logger(log_level: int = logging.DEBUG, log_file: Path | None = None) -> logging.Logger:
    """Routes the emitter's debug output to the console and optionally a file

    The emitter never configures logging itself. Hosts that want to trace bind, unbind and
    dispatch activity call this once at startup. Calling it again replaces the handlers
    installed by the previous call.

    Args:
        log_level (int): The log level to log at. Defaults to logging.DEBUG.
        log_file (Path | None): File to append log records to, with timestamps. Defaults to none.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(PACKAGE)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(PaddedLevelFormatter("%(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(exist_ok=True, parents=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            PaddedLevelFormatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger
