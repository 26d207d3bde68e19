"""A point mass with a radius, moving through the universe."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gravitysim.vector import Vec2

_FIELDS = ("position", "radius", "mass", "velocity")


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    return float(value)


@dataclass
class Body:
    """A round body with position, radius, mass and velocity."""

    position: Vec2 = Vec2()
    radius: float = 0.0
    mass: float = 0.0
    velocity: Vec2 = Vec2()

    def to_dict(self) -> dict[str, Any]:
        """Serialised form of the body."""
        return {
            "position": self.position.to_list(),
            "radius": self.radius,
            "mass": self.mass,
            "velocity": self.velocity.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Body:
        """Build a body from its serialised form; every field is required."""
        if not isinstance(data, dict):
            raise ValueError(f"body must be an object, got {data!r}")
        missing = [name for name in _FIELDS if name not in data]
        if missing:
            raise ValueError(f"missing field {missing[0]!r}")
        return cls(
            position=Vec2.from_list(data["position"]),
            radius=_number(data["radius"], "radius"),
            mass=_number(data["mass"], "mass"),
            velocity=Vec2.from_list(data["velocity"]),
        )