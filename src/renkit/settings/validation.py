"""
Settings validation system for renkit.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        paths = self.settings.paths
        if not paths.chunks_dir.exists():
            errors.append(f"Chunks directory does not exist: {paths.chunks_dir}")
        elif not paths.chunks_dir.is_dir():
            errors.append(f"Chunks path is not a directory: {paths.chunks_dir}")

        if not paths.output_dir.exists():
            warnings.append(f"Output directory will be created: {paths.output_dir}")

        areas_file = paths.areas_file
        if areas_file is not None and not areas_file.exists():
            warnings.append(
                f"Area table not found, loading areas will fail: {areas_file}"
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
