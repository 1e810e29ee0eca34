"""
Render-related settings for renkit.
"""

from .base import SettingsSection

MIN_WORKERS = 1
MAX_WORKERS = 32


def _clamp_workers(value: int) -> int:
    return max(MIN_WORKERS, min(MAX_WORKERS, value))


class RenderSettings(SettingsSection):
    """Compositing and chunk loading options."""

    @property
    def strict_grid(self) -> bool:
        """Check per-cell chunk alignment before compositing."""
        return self._get_bool("render/strict_grid", False)

    @strict_grid.setter
    def strict_grid(self, value: bool) -> None:
        self._set("render/strict_grid", value)

    @property
    def loader_workers(self) -> int:
        """Number of threads decoding chunk images."""
        return _clamp_workers(self._get_int("render/loader_workers", 4))

    @loader_workers.setter
    def loader_workers(self, value: int) -> None:
        self._set("render/loader_workers", _clamp_workers(value))

    @property
    def dump_thumbnail(self) -> bool:
        """Write the area thumbnail next to the composited layers."""
        return self._get_bool("render/dump_thumbnail", False)

    @dump_thumbnail.setter
    def dump_thumbnail(self, value: bool) -> None:
        self._set("render/dump_thumbnail", value)
