"""
Settings package for renkit.

Profiles of paths, render and logging options stored through QSettings.

Usage:
    from renkit.settings import AppSettings

    settings = AppSettings(settings_file=Path("renkit.ini"))
    settings.render.strict_grid = True
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
]
