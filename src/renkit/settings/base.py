"""
Shared access helpers for settings subsystems.
"""

from typing import Any, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

_TRUE_STRINGS = ("true", "1", "yes")


class SettingsSection:
    """A group of keys stored in the application's QSettings.

    INI-backed QSettings hands every value back as a string, so reads go
    through the typed getters below.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in _TRUE_STRINGS
        return bool(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    def _set(self, key: str, value: Any) -> None:
        """Store a value and flush it to disk."""
        self.settings.setValue(key, value)
        self.settings.sync()
