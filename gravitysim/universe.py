"""The set of bodies being simulated."""

from __future__ import annotations

from dataclasses import dataclass, field

from gravitysim.body import Body
from gravitysim.physics import Physics
from gravitysim.vector import Vec2


@dataclass
class Universe:
    """Bodies together with the physics that moves them."""

    bodies: list[Body] = field(default_factory=list)
    physics: Physics = field(default_factory=Physics)

    def shapes(self) -> list[tuple[Vec2, float]]:
        """Position and radius of every body, in order."""
        return [(body.position, body.radius) for body in self.bodies]

    def update(self, delta_time_sec: float) -> None:
        """Advance the simulation by one time step."""
        self.physics.update(self.bodies, delta_time_sec)