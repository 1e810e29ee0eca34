"""Writing of composited area layers to the output directory."""

import logging
from pathlib import Path
from typing import List

from .models import AreaLayers


class LayerWriter:
    """Stores the layers of an area as `<area>_<kind name>.png` files."""

    def __init__(self, output_dir: Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.output_dir = Path(output_dir)

    def dump(self, layers: AreaLayers) -> List[Path]:
        """Write every present layer (thumbnail included) and return the paths."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for kind, image in layers.items():
            path = self.output_dir / layers.area.layer_file_name(kind)
            self.logger.info(f"creating {str(path)!r}")
            image.save(path, format="PNG")
            written.append(path)
        return written
