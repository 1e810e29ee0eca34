"""
Logging-related settings for renkit.
"""

import logging

from .base import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/renkit.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsSection):
    """Console and file logging options read by `setup_logging`."""

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Level name of the console handler."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Ignoring unknown log level {value!r}, keeping {self.console_log_level}"
            )
            return
        self._set("logging/console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("logging/console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Write CSV log rows to `log_file_path` as well."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        # Fixed location, relative to the working directory.
        return LOG_FILE_PATH
