"""Loading of animation clip definitions from JSON files."""

import logging
from pathlib import Path
from typing import Any, Dict, List

import orjson

from .models import AnimationClip, PlaybackPolicy


class ClipSchema:
    """Validation of clip table JSON."""

    REQUIRED_CLIP_FIELDS = {"name", "first_frame", "frame_count", "duration", "policy"}
    VALID_POLICIES = {policy.value for policy in PlaybackPolicy}

    @staticmethod
    def validate_clip(data: Any) -> List[str]:
        """Validate one clip entry. Returns a list of error messages."""
        if not isinstance(data, dict):
            return [f"clip entry must be an object, got {type(data).__name__}"]

        missing = ClipSchema.REQUIRED_CLIP_FIELDS - data.keys()
        if missing:
            return [f"Missing required fields: {sorted(missing)}"]

        errors: List[str] = []
        if not isinstance(data["name"], str) or not data["name"]:
            errors.append(f"'name' must be a non-empty string, got {data['name']!r}")
        if not isinstance(data["first_frame"], int) or data["first_frame"] < 0:
            errors.append(f"'first_frame' must be a non-negative integer, got {data['first_frame']!r}")
        if not isinstance(data["frame_count"], int) or data["frame_count"] < 1:
            errors.append(f"'frame_count' must be a positive integer, got {data['frame_count']!r}")
        if not isinstance(data["duration"], (int, float)) or data["duration"] < 0:
            errors.append(f"'duration' must be a non-negative number, got {data['duration']!r}")

        policy = data["policy"]
        if policy not in ClipSchema.VALID_POLICIES:
            errors.append(
                f"Unknown policy {policy!r}, expected one of {sorted(ClipSchema.VALID_POLICIES)}"
            )
        increment = data.get("increment", 1)
        if increment not in (1, -1):
            errors.append(f"'increment' must be 1 or -1, got {increment!r}")
        return errors

    @staticmethod
    def validate_table(data: Any) -> List[str]:
        """Validate a complete clip table. Returns all error messages."""
        if not isinstance(data, dict) or not isinstance(data.get("clips"), list):
            return ["clip table must be an object with a 'clips' array"]

        errors: List[str] = []
        seen: set[str] = set()
        for idx, entry in enumerate(data["clips"]):
            entry_errors = ClipSchema.validate_clip(entry)
            errors.extend(f"Clip {idx}: {err}" for err in entry_errors)
            if not entry_errors:
                if entry["name"] in seen:
                    errors.append(f"Clip {idx}: duplicate name {entry['name']!r}")
                seen.add(entry["name"])
        return errors


class ClipLoader:
    """Loads animation clips from JSON files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_from_json(self, path: Path) -> Dict[str, AnimationClip]:
        """Load all clips of a clip table, keyed by name.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Clip table not found: {path}")

        try:
            data = orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON from {path}: {e}") from e

        errors = ClipSchema.validate_table(data)
        if errors:
            error_msg = "\n  - ".join(errors)
            raise ValueError(f"Invalid clip table in {path}:\n  - {error_msg}")

        clips = {entry["name"]: AnimationClip.from_dict(entry) for entry in data["clips"]}
        self.logger.info(f"Loaded {len(clips)} animation clip(s) from {path}")
        return clips
