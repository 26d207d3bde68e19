"""Simulation settings loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_NAME = "config.json"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Settings of a simulation run."""

    is_gravity_enabled: bool = False
    save_file_name: str = ""

    @classmethod
    def _from_data(cls, data: Any) -> Config:
        if not isinstance(data, dict):
            raise ValueError(f"config must be an object, got {type(data).__name__}")
        for name in ("is_gravity_enabled", "save_file_name"):
            if name not in data:
                raise ValueError(f"missing field {name!r}")
        gravity = data["is_gravity_enabled"]
        save_name = data["save_file_name"]
        if not isinstance(gravity, bool):
            raise ValueError(f"is_gravity_enabled must be a boolean, got {gravity!r}")
        if not isinstance(save_name, str):
            raise ValueError(f"save_file_name must be a string, got {save_name!r}")
        return cls(is_gravity_enabled=gravity, save_file_name=save_name)

    @classmethod
    def from_file(cls, name: str | Path | None = None) -> Config:
        """Load settings, falling back to defaults if the file is unreadable or invalid."""
        config_name = name if name is not None else DEFAULT_CONFIG_NAME
        logger.debug("Config name: %s", config_name)

        try:
            text = Path(config_name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("Failed to read config: %s", error)
            text = ""
        logger.debug("Config str: %s", text)

        try:
            return cls._from_data(json.loads(text))
        except ValueError as error:
            logger.warning("Failed to deserialize config: %s", error)
            return cls()