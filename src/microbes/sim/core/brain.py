from __future__ import annotations

from typing import Sequence, Tuple

from ...config import BrainConfig
from ...rng import SimulationRng
from .neuron import NeuralUnit

# Output layout read by microbes: [priority, direction, speed, ...unused].
PRIORITY = 0
DIRECTION = 1
SPEED = 2


class Brain:
    """Feed-forward chain of neural units evaluated left to right."""

    __slots__ = ("_units",)

    def __init__(self, units: Sequence[NeuralUnit]):
        if not units:
            raise ValueError("Brain needs at least one neural unit")
        self._units: Tuple[NeuralUnit, ...] = tuple(units)

    @property
    def units(self) -> Tuple[NeuralUnit, ...]:
        return self._units

    def think(self, inputs: Sequence[float]) -> Tuple[float, ...]:
        signal = tuple(inputs)
        for unit in self._units:
            signal = unit.evaluate(signal)
        return signal

    def mutate(self, rng: SimulationRng, config: BrainConfig) -> "Brain":
        units = []
        for unit in self._units:
            if rng.next_float() > config.brain_mutation_rate:
                units.append(unit.mutate(rng, config.neuron_mutation_rate, config.neuron_mutation_magnitude))
            else:
                units.append(unit)
        return Brain(units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"Brain(units={len(self._units)})"
