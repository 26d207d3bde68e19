"""The simulation state, built from configuration and a saved world."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gravitysim.config import Config
from gravitysim.physics import Physics
from gravitysim.save import Save
from gravitysim.universe import Universe
from gravitysim.vector import Vec2

DEFAULT_SAVE_PATH = "save.json"


@dataclass
class Model:
    """Holds the universe being simulated."""

    universe: Universe = field(default_factory=Universe)

    @classmethod
    def from_config(cls, config_name: str | Path | None = None) -> Model:
        """Load the configuration, then the save file it names."""
        config = Config.from_file(config_name)
        save = Save.from_file(config.save_file_name)
        physics = Physics(gravity_enabled=config.is_gravity_enabled)
        return cls(Universe(save.bodies, physics))

    def shapes(self) -> list[tuple[Vec2, float]]:
        """Position and radius of every body."""
        return self.universe.shapes()

    def update(self, delta_time_sec: float) -> None:
        """Advance the simulation by one time step."""
        self.universe.update(delta_time_sec)

    def save(self, path: str | Path = DEFAULT_SAVE_PATH) -> None:
        """Write the current bodies to a save file."""
        Save([body for body in self.universe.bodies]).write(path)