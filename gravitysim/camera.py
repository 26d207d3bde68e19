"""Mapping from world coordinates to the view."""

from __future__ import annotations

from dataclasses import dataclass

from gravitysim.vector import Vec2


@dataclass
class Camera:
    """A zoomable, movable view onto the world."""

    zoom: float = 1.0
    position: Vec2 = Vec2()

    def world_to_camera(self, body: tuple[Vec2, float]) -> tuple[Vec2, float]:
        """Transform a (position, radius) pair into view coordinates."""
        position, radius = body
        return (position - self.position) * self.zoom, radius * self.zoom