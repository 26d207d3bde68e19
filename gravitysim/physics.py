"""Gravitational interaction and motion integration."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

from gravitysim.body import Body
from gravitysim.vector import Vec2

SOFTENING = 300.0
MAX_DELTA_SPEED = 400.0


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: dividing by zero yields inf or nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, low), high)


def delta_velocities(body1: Body, body2: Body, delta_time_sec: float) -> tuple[Vec2, Vec2]:
    """Velocity changes that two bodies impart on each other over one time step."""
    diff = body2.position - body1.position
    force = _divide(body1.mass * body2.mass, diff.length() ** 2 + SOFTENING)

    speed1 = _clamp(_divide(force, body1.mass) * delta_time_sec, 0.0, MAX_DELTA_SPEED)
    speed2 = _clamp(_divide(force, body2.mass) * delta_time_sec, 0.0, MAX_DELTA_SPEED)

    direction = diff.normalize_or_zero()
    return direction * speed1, -direction * speed2


def update_positions(bodies: Iterable[Body], delta_time_sec: float) -> None:
    """Move every body along its velocity for one time step."""
    for body in bodies:
        body.position = body.position + body.velocity * delta_time_sec


@dataclass
class Physics:
    """Advances a set of bodies in time, with optional mutual gravity."""

    gravity_enabled: bool = False

    def update(self, bodies: list[Body], delta_time_sec: float) -> None:
        """Apply gravity (if enabled) to velocities, then move the bodies."""
        deltas = [Vec2() for _ in bodies]

        if self.gravity_enabled:
            for (i, first), (j, second) in combinations(enumerate(bodies), 2):
                delta1, delta2 = delta_velocities(first, second, delta_time_sec)
                deltas[i] = deltas[i] + delta1
                deltas[j] = deltas[j] + delta2

        for body, delta in zip(bodies, deltas):
            body.velocity = body.velocity + delta

        update_positions(bodies, delta_time_sec)