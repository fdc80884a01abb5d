from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector2

from ..utils.math2d import _clamp_value


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def direction_to(self, other: "Point") -> float:
        """Bearing in radians from this point towards ``other`` (atan2 convention)."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def offset(self, direction: float, distance: float) -> "Point":
        return Point(self.x + math.cos(direction) * distance, self.y + math.sin(direction) * distance)

    def clamped(self, bounds: "Point") -> "Point":
        return Point(_clamp_value(self.x, 0.0, bounds.x), _clamp_value(self.y, 0.0, bounds.y))

    def to_vector(self) -> Vector2:
        return Vector2(self.x, self.y)

