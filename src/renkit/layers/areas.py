"""Static area table.

Each area is described by its name and the shape of its chunk grid. The
builtin table ships as `renkit/resources/areas.json`; a user file in the
same format can replace it.
"""

import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import orjson

from .models import Area


class AreaSchema:
    """Validation of area table JSON."""

    REQUIRED_ROOT_FIELDS = {"version", "areas"}
    REQUIRED_AREA_FIELDS = {"name", "rows", "cols"}

    @staticmethod
    def validate_area(data: Any) -> List[str]:
        """Validate one area entry. Returns a list of error messages."""
        if not isinstance(data, dict):
            return [f"area entry must be an object, got {type(data).__name__}"]

        errors: List[str] = []
        missing = AreaSchema.REQUIRED_AREA_FIELDS - data.keys()
        if missing:
            errors.append(f"Missing required fields: {sorted(missing)}")
            return errors

        name = data["name"]
        if not isinstance(name, str) or not name:
            errors.append(f"'name' must be a non-empty string, got {name!r}")
        for field in ("rows", "cols"):
            value = data[field]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(f"'{field}' must be a positive integer, got {value!r}")
        return errors

    @staticmethod
    def validate_table(data: Any) -> List[str]:
        """Validate a complete area table. Returns all error messages."""
        if not isinstance(data, dict):
            return ["area table must be a JSON object"]

        missing = AreaSchema.REQUIRED_ROOT_FIELDS - data.keys()
        if missing:
            return [f"Missing required fields: {sorted(missing)}"]
        if not isinstance(data["areas"], list):
            return ["'areas' must be an array"]

        errors: List[str] = []
        seen: set[str] = set()
        for idx, entry in enumerate(data["areas"]):
            entry_errors = AreaSchema.validate_area(entry)
            errors.extend(f"Area {idx}: {err}" for err in entry_errors)
            if not entry_errors:
                if entry["name"] in seen:
                    errors.append(f"Area {idx}: duplicate name {entry['name']!r}")
                seen.add(entry["name"])
        return errors


class AreaTable:
    """Ordered lookup of areas by name."""

    def __init__(self, areas: List[Area]):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._areas: Dict[str, Area] = {area.name: area for area in areas}

    @classmethod
    def from_bytes(cls, raw: bytes, source: str = "<memory>") -> "AreaTable":
        """Parse and validate an area table.

        Raises:
            ValueError: If the JSON is malformed or does not match the schema
        """
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON from {source}: {e}") from e

        errors = AreaSchema.validate_table(data)
        if errors:
            error_msg = "\n  - ".join(errors)
            raise ValueError(f"Invalid area table in {source}:\n  - {error_msg}")

        return cls(
            [
                Area(name=entry["name"], rows=entry["rows"], cols=entry["cols"])
                for entry in data["areas"]
            ]
        )

    @classmethod
    def load(cls, path: Path) -> "AreaTable":
        """Load an area table from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the content is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Area table not found: {path}")
        table = cls.from_bytes(path.read_bytes(), source=str(path))
        table.logger.info(f"Loaded {len(table)} areas from {path}")
        return table

    @classmethod
    def builtin(cls) -> "AreaTable":
        """Load the area table bundled with the package."""
        raw = files("renkit.resources").joinpath("areas.json").read_bytes()
        return cls.from_bytes(raw, source="builtin areas.json")

    @classmethod
    def from_settings(cls, areas_file: Optional[Path]) -> "AreaTable":
        """User table when configured, builtin table otherwise."""
        if areas_file:
            return cls.load(areas_file)
        return cls.builtin()

    def get(self, name: str) -> Area:
        """Return an area by name.

        Raises:
            KeyError: If the area is unknown
        """
        try:
            return self._areas[name]
        except KeyError:
            raise KeyError(f"unknown area: {name!r}") from None

    def names(self) -> List[str]:
        return list(self._areas)

    def __contains__(self, name: object) -> bool:
        return name in self._areas

    def __iter__(self) -> Iterator[Area]:
        return iter(self._areas.values())

    def __len__(self) -> int:
        return len(self._areas)
