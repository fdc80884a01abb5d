from __future__ import annotations

import colorsys

from ...config import SimulationConfig
from ...rng import SimulationRng
from .brain import Brain
from .geometry import Point
from .microbe import Color, Microbe
from .neuron import NeuralUnit

_COLOR_LIGHTNESS = 0.55
_COLOR_SATURATION = 0.85


class Randomizer:
    """Builds random points, neural units, brains and microbes inside the arena."""

    def __init__(self, config: SimulationConfig, rng: SimulationRng):
        self.config = config
        self.rng = rng
        self.bounds = Point(config.arena.width, config.arena.height)

    def random_point(self) -> Point:
        return Point(self.rng.next_float() * self.bounds.x, self.rng.next_float() * self.bounds.y)

    def random_neuron(self) -> NeuralUnit:
        size = self.config.brain.neuron_size
        limit = self.config.brain.weight_range
        return NeuralUnit([[self.rng.next_range(-limit, limit) for _ in range(size)] for _ in range(size)])

    def random_brain(self) -> Brain:
        return Brain([self.random_neuron() for _ in range(self.config.brain.brain_size)])

    def random_color(self) -> Color:
        r, g, b = colorsys.hls_to_rgb(self.rng.next_float(), _COLOR_LIGHTNESS, _COLOR_SATURATION)
        return (int(r * 255), int(g * 255), int(b * 255))

    def random_microbe(self) -> Microbe:
        return Microbe(
            self.random_point(),
            self.config.microbe.starting_size,
            self.random_brain(),
            self.random_color(),
        )
