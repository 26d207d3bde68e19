"""Two-dimensional vectors used for positions and velocities."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vec2:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize_or_zero(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector if that is undefined."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def to_list(self) -> list[float]:
        """Serialised form: ``[x, y]``."""
        return [self.x, self.y]

    @classmethod
    def from_list(cls, data: Any) -> Vec2:
        """Build a vector from its ``[x, y]`` form."""
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise ValueError(f"vector must be a sequence of two numbers, got {data!r}")
        if len(data) != 2:
            raise ValueError(f"vector must have exactly two components, got {len(data)}")
        x, y = data
        return cls(_number(x, "x"), _number(y, "y"))