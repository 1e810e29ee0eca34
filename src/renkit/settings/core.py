"""
Core settings management for renkit.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigError, ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .render import RenderSettings
from .logging import LoggingSettings
from .base import SettingsSection

logger = logging.getLogger(__name__)

ORGANIZATION = "renkit"
APPLICATION = "renkit"


class _AppSection(SettingsSection):
    """Bookkeeping keys under `app/`."""

    @property
    def first_run(self) -> bool:
        return self._get_bool("app/first_run", True)

    @first_run.setter
    def first_run(self, value: bool) -> None:
        self._set("app/first_run", value)

    @property
    def version(self) -> str:
        return self._get_str("app/version", ConfigVersion.CURRENT.value)


def _open_store(settings_file: Optional[Path]) -> QSettings:
    if settings_file is None:
        return QSettings(ORGANIZATION, APPLICATION)
    return QSettings(str(settings_file), QSettings.Format.IniFormat)


class AppSettings:
    """
    Persistent renkit configuration.

    Values live in the platform settings store, or in an INI file when one
    is given, under a group named after the profile. Related keys are
    exposed through the `paths`, `render` and `logging` subsystems.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[Path] = None):
        """Open the settings of a profile and bring them to the current version.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Use this INI file instead of the platform store

        Raises:
            ConfigError: If the settings storage cannot be read
        """
        self.profile = profile
        self.settings = _open_store(settings_file)
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            raise ConfigError(f"Cannot read settings from {self.settings.fileName()}: {status}")

        self.settings.beginGroup(profile)
        self._app = _AppSection(self.settings)
        self._paths = PathSettings(self.settings)
        self._render = RenderSettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._validator = SettingsValidator(self)

        SettingsMigrator(self.settings).ensure_version()
        logger.debug(f"Settings profile {profile!r} opened from {self.settings.fileName()}")

    @property
    def paths(self) -> PathSettings:
        return self._paths

    @property
    def render(self) -> RenderSettings:
        return self._render

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    @property
    def is_first_run(self) -> bool:
        """True until `set_first_run_complete` is called for this profile."""
        return self._app.first_run

    def set_first_run_complete(self) -> None:
        self._app.first_run = False

    @property
    def version(self) -> str:
        """Configuration layout version stored for this profile."""
        return self._app.version

    def validate(self) -> ValidationResult:
        """Check the configured paths."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Location of the settings storage."""
        return self.settings.fileName()
