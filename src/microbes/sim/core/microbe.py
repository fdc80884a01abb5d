from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple

from ..utils.math2d import _wrap_clamp
from .brain import DIRECTION, PRIORITY, SPEED, Brain
from .geometry import Point

if TYPE_CHECKING:
    from .randomizer import Randomizer

Color = Tuple[int, int, int]


@dataclass(frozen=True, slots=True, eq=False)
class Microbe:
    """A single organism. Every operation returns a new microbe; none mutate this one."""

    position: Point
    size: float
    brain: Brain
    color: Color

    def sense(self, other: "Microbe") -> Tuple[float, float, float, float, float]:
        return (
            self.position.x,
            self.position.y,
            other.size / self.size,
            self.position.distance_to(other.position),
            self.position.direction_to(other.position),
        )

    def decide(self, population: Sequence["Microbe"]) -> Optional[Tuple[float, ...]]:
        """Return the brain output with the highest priority over all neighbors.

        Ties keep the first neighbor seen. ``None`` when there are no neighbors.
        """
        if not population:
            raise ValueError("Microbe.move needs a non-empty population")
        choice: Optional[Tuple[float, ...]] = None
        found_self = False
        for other in population:
            if other is self:
                found_self = True
                continue
            output = self.brain.think(self.sense(other))
            if choice is None or output[PRIORITY] > choice[PRIORITY]:
                choice = output
        if not found_self:
            raise ValueError("Microbe.move expects the population snapshot to contain the moving microbe")
        return choice

    def move(self, population: Sequence["Microbe"], randomizer: "Randomizer") -> "Microbe":
        choice = self.decide(population)
        if choice is None:
            # Alone in the arena: hold position.
            direction, speed = 0.0, 0.0
        else:
            direction, speed = choice[DIRECTION], choice[SPEED]
        return self.advance(direction, speed, randomizer)

    def advance(self, direction: float, speed: float, randomizer: "Randomizer") -> "Microbe":
        config = randomizer.config.microbe
        size = self.size - self.size / config.energy_divisor
        if size <= config.viable_size:
            return randomizer.random_microbe()
        heading = _wrap_clamp(direction, config.direction_modulus)
        distance = _wrap_clamp(speed, config.max_speed)
        position = self.position.offset(heading, distance).clamped(randomizer.bounds)
        return Microbe(position, size, self.brain, self.color)

    def collides(self, other: "Microbe") -> bool:
        return self.position.distance_to(other.position) < self.size + other.size

    def eat(self, other: "Microbe", max_size: float = 100.0) -> "Microbe":
        return Microbe(self.position, min(self.size + other.size, max_size), self.brain, self.color)

    def reproduce(self, at: Point, randomizer: "Randomizer") -> "Microbe":
        config = randomizer.config
        brain = self.brain.mutate(randomizer.rng, config.brain)
        return Microbe(at, config.microbe.starting_size, brain, self.color)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "size": self.size,
            "color": list(self.color),
        }
