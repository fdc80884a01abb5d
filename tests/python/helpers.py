from __future__ import annotations

from typing import Iterable, Sequence

from microbes.config import ArenaConfig, SimulationConfig
from microbes.rng import SimulationRng
from microbes.sim.core.brain import Brain
from microbes.sim.core.geometry import Point
from microbes.sim.core.microbe import Microbe
from microbes.sim.core.neuron import NeuralUnit
from microbes.sim.core.randomizer import Randomizer


class ScriptedRng(SimulationRng):
    """Replays fixed ``next_float`` draws; ``next_range`` returns its midpoint."""

    def __init__(self, floats: Iterable[float]):
        super().__init__(0)
        self._floats = list(floats)

    def next_float(self) -> float:
        return self._floats.pop(0)

    def next_range(self, low: float, high: float) -> float:
        return (low + high) / 2.0


def single_unit_brain(cells: dict[tuple[int, int], float], size: int = 5) -> Brain:
    weights = [[0.0] * size for _ in range(size)]
    for (row, col), value in cells.items():
        weights[row][col] = value
    return Brain([NeuralUnit(weights)])


def zero_brain() -> Brain:
    return single_unit_brain({})


def make_microbe(x: float, y: float, size: float, brain: Brain | None = None, color=(200, 40, 40)) -> Microbe:
    return Microbe(Point(x, y), size, brain if brain is not None else zero_brain(), color)


def make_config(width: float = 100.0, height: float = 100.0, **kwargs) -> SimulationConfig:
    return SimulationConfig(arena=ArenaConfig(width=width, height=height), **kwargs)


def make_randomizer(seed: int = 1, width: float = 100.0, height: float = 100.0) -> Randomizer:
    return Randomizer(make_config(width, height), SimulationRng(seed))


def states(microbes: Sequence[Microbe]) -> list[tuple[float, float, float, tuple[int, int, int]]]:
    return [(m.position.x, m.position.y, m.size, m.color) for m in microbes]
