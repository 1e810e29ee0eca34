"""
Settings migration system for renkit.

Each step upgrades a stored profile by one version; steps are chained until
the profile reaches `ConfigVersion.CURRENT`.
"""

import logging
from typing import Callable, Dict, Tuple, TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


def _split_assets_path(settings: "QSettings") -> None:
    """1.0 read chunks from and wrote layers to `paths/assets`.

    Both new keys take the old value unless they are already set.
    """
    old_assets = str(settings.value("paths/assets", ""))
    if not old_assets:
        return
    for key in ("paths/chunks", "paths/output"):
        if not str(settings.value(key, "")):
            settings.setValue(key, old_assets)
            logger.info(f"Migrated {key} from paths/assets: {old_assets}")
    settings.remove("paths/assets")


# from_version -> (to_version, step)
MIGRATIONS: Dict[str, Tuple[str, Callable[["QSettings"], None]]] = {
    ConfigVersion.V1_0.value: (ConfigVersion.V1_1.value, _split_assets_path),
}


class SettingsMigrator:
    """Brings a stored profile up to the current configuration version."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp new profiles, migrate old ones."""
        stored = str(self.settings.value("app/version", ""))
        if not stored:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
            return
        if stored != ConfigVersion.CURRENT.value:
            self.migrate(stored)

    def migrate(self, from_version: str) -> None:
        """Apply every step from `from_version` up to the current version."""
        version = from_version
        while version in MIGRATIONS:
            to_version, step = MIGRATIONS[version]
            logger.info(f"Migrating configuration from {version} to {to_version}")
            step(self.settings)
            version = to_version

        if version != ConfigVersion.CURRENT.value:
            logger.warning(
                f"No migration path from {version} to {ConfigVersion.CURRENT.value}, "
                "keeping stored values"
            )
        self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
