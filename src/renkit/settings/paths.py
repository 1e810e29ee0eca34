"""
Path-related settings for renkit.
"""

from pathlib import Path
from typing import Optional

from .base import SettingsSection

# Defaults match the directory names used by the extraction scripts.
DEFAULT_CHUNKS_DIR = "pillars_assets"
DEFAULT_OUTPUT_DIR = "_assets_"


class PathSettings(SettingsSection):
    """Input, output and area table locations."""

    @property
    def chunks_dir(self) -> Path:
        """Directory holding the extracted chunk images."""
        return Path(self._get_str("paths/chunks", DEFAULT_CHUNKS_DIR))

    @chunks_dir.setter
    def chunks_dir(self, value: Path) -> None:
        self._set("paths/chunks", str(value))

    @property
    def output_dir(self) -> Path:
        """Directory receiving composited layer files."""
        return Path(self._get_str("paths/output", DEFAULT_OUTPUT_DIR))

    @output_dir.setter
    def output_dir(self, value: Path) -> None:
        self._set("paths/output", str(value))

    @property
    def areas_file(self) -> Optional[Path]:
        """User area table; None selects the builtin table."""
        path_str = self._get_str("paths/areas_file", "")
        return Path(path_str) if path_str else None

    @areas_file.setter
    def areas_file(self, value: Optional[Path]) -> None:
        self._set("paths/areas_file", str(value) if value else "")
