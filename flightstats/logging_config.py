import logging
import sys
from typing import TextIO

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

REPORT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
REPORT_DATE_FORMAT = '%H:%M:%S'

# ANSI colour per level name; the report itself goes to stdout uncoloured.
_LEVEL_COLORS = dict(zip(LOG_LEVELS, ('\033[36m', '\033[32m', '\033[33m', '\033[31m', '\033[1;35m')))


class _LevelColorFormatter(logging.Formatter):
    def formatMessage(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().formatMessage(record)
        shown = logging.makeLogRecord(record.__dict__)
        shown.levelname = f"{color}{record.levelname}\033[0m"
        return super().formatMessage(shown)


def setup_logging(level: str = 'INFO', stream: TextIO | None = None) -> logging.Handler:
    """Route log records of a report run to a single console handler.

    level is one of LOG_LEVELS (any case). Records are written to stream (stdout by default)
    and their level names are coloured only when that stream is a terminal.
    Calling it again replaces the handler installed by the previous call.
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}")
    stream = stream or sys.stdout

    handler = logging.StreamHandler(stream)
    formatter_class = _LevelColorFormatter if stream.isatty() else logging.Formatter
    handler.setFormatter(formatter_class(REPORT_LOG_FORMAT, datefmt=REPORT_DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler
