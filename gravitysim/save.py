"""Saved worlds: the list of bodies stored in a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gravitysim.body import Body

logger = logging.getLogger(__name__)


@dataclass
class Save:
    """A saved set of bodies."""

    bodies: list[Body] = field(default_factory=list)

    @classmethod
    def _from_data(cls, data: Any) -> Save:
        if not isinstance(data, dict):
            raise ValueError(f"save must be an object, got {type(data).__name__}")
        if "bodies" not in data:
            raise ValueError("missing field 'bodies'")
        bodies = data["bodies"]
        if not isinstance(bodies, list):
            raise ValueError("bodies must be a list")
        return cls([Body.from_dict(item) for item in bodies])

    @classmethod
    def from_file(cls, name: str | Path) -> Save:
        """Load a save, falling back to an empty one if the file is unreadable or invalid."""
        logger.debug("Save name: %s", name)

        try:
            text = Path(name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("Failed to read save: %s", error)
            text = ""
        logger.log(5, "Save str: %s", text)

        try:
            return cls._from_data(json.loads(text))
        except ValueError as error:
            logger.warning("Failed to deserialize save: %s", error)
            return cls()

    def to_json(self) -> str:
        """Pretty-printed JSON form of the save."""
        return json.dumps({"bodies": [body.to_dict() for body in self.bodies]}, indent=2)

    def write(self, name: str | Path) -> None:
        """Write the save to a file."""
        Path(name).write_text(self.to_json(), encoding="utf-8")