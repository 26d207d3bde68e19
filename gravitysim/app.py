"""The application: simulation model plus the camera looking at it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from gravitysim.camera import Camera
from gravitysim.model import Model
from gravitysim.vector import Vec2

PAN_STEP = 20.0
ZOOM_FACTOR = 4.0 / 3.0


class Key(str, Enum):
    """Keys the application reacts to."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    ZOOM_IN = "y"
    ZOOM_OUT = "t"


_PAN_DIRECTIONS = {
    Key.RIGHT: Vec2(1.0, 0.0),
    Key.LEFT: Vec2(-1.0, 0.0),
    Key.UP: Vec2(0.0, 1.0),
    Key.DOWN: Vec2(0.0, -1.0),
}


@dataclass
class App:
    """Simulation state and view state together."""

    model: Model = field(default_factory=Model.from_config)
    camera: Camera = field(default_factory=Camera)

    def shapes(self) -> list[tuple[Vec2, float]]:
        """Position and radius of every body in world coordinates."""
        return self.model.shapes()

    def update(self, delta_time_sec: float) -> None:
        """Advance the simulation by one time step."""
        self.model.update(delta_time_sec)

    def world_to_camera(self, body: tuple[Vec2, float]) -> tuple[Vec2, float]:
        """Transform a (position, radius) pair into view coordinates."""
        return self.camera.world_to_camera(body)

    def handle_key(self, key: Key | str) -> None:
        """Pan or zoom the camera; unknown keys are ignored."""
        try:
            key = Key(key)
        except ValueError:
            return
        if key in _PAN_DIRECTIONS:
            step = _PAN_DIRECTIONS[key] * (PAN_STEP / self.camera.zoom)
            self.camera.position = self.camera.position + step
        elif key is Key.ZOOM_IN:
            self.camera.zoom = self.camera.zoom * 4.0 / 3.0
        elif key is Key.ZOOM_OUT:
            self.camera.zoom = self.camera.zoom * 3.0 / 4.0