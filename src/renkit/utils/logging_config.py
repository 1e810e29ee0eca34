"""
Logging configuration for renkit.

`setup_logging` is called once by the command line entry point after the
settings are loaded. Library modules only create loggers.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import AppSettings
    from ..settings.logging import LoggingSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
FILE_MAX_BYTES = 10 * 1024 * 1024
FILE_BACKUPS = 5

# Third-party loggers that are too chatty at DEBUG.
QUIET_LOGGERS = ("PIL", "PIL.PngImagePlugin")


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for console output."""

    RESET = "\033[0m"
    LEVEL_COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if color is None:
            return formatted
        # First occurrence is the level column; the message may repeat the name.
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """Semicolon-separated rows: time; level; uptime; logger; line; message."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        fields = [
            f'"{self.formatTime(record, self.datefmt)}"',
            record.levelname.ljust(8),
            f'"{int(record.relativeCreated)} ms"',
            f'"{record.name}"',
            f'"{record.lineno}"',
            '"{}"'.format(message.replace('"', '""')),
        ]
        return ";".join(fields)


def _console_handler(log_settings: "LoggingSettings") -> logging.Handler:
    if log_settings.console_use_colors:
        formatter: logging.Formatter = ColoredFormatter(
            fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT
        )
    else:
        formatter = logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)

    handler = logging.StreamHandler()
    level_name = log_settings.console_log_level.upper()
    handler.setLevel(getattr(logging, level_name, logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=FILE_MAX_BYTES,
        backupCount=FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATEFMT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Configure the root logger from the logging settings.

    Any handlers already on the root logger are replaced. A log file that
    cannot be opened only costs the file handler.

    Args:
        settings: AppSettings instance for all logging configuration
    """
    log_settings = settings.logging

    # Root captures all levels; handlers filter
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger("renkit").setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    if log_settings.console_logging:
        root_logger.addHandler(_console_handler(log_settings))

    log_path: Optional[Path] = None
    if log_settings.file_logging:
        log_path = Path(log_settings.log_file_path)
        try:
            root_logger.addHandler(_file_handler(log_path))
        except OSError as e:
            root_logger.warning(f"Could not setup file logging: {e}")
            log_path = None

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging initialized (console: {log_settings.console_logging}, "
        f"level {log_settings.console_log_level})"
    )
    if log_path is not None:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
