from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class ArenaConfig:
    width: float = 800.0
    height: float = 600.0


@dataclass
class BrainConfig:
    brain_size: int = 5
    neuron_size: int = 5
    weight_range: float = 100.0
    # Probability that a unit/weight is copied unchanged on reproduction.
    brain_mutation_rate: float = 0.5
    neuron_mutation_rate: float = 0.3
    neuron_mutation_magnitude: float = 5.0


@dataclass
class MicrobeConfig:
    starting_size: float = 5.0
    max_size: float = 100.0
    viable_size: float = 1.0
    energy_divisor: float = 1000.0
    max_speed: float = 10.0
    # Brain output is radians but wrapped against 360; set to math.tau for a consistent radian wrap.
    direction_modulus: float = 360.0


@dataclass
class SimulationConfig:
    microbe_count: int = 80
    tick_rate: float = 30.0
    seed: Optional[int] = None
    config_version: str = "v1"
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    brain: BrainConfig = field(default_factory=BrainConfig)
    microbe: MicrobeConfig = field(default_factory=MicrobeConfig)

    @property
    def time_step(self) -> float:
        return 1.0 / self.tick_rate

    def validate(self) -> "SimulationConfig":
        if self.arena.width <= 0 or self.arena.height <= 0:
            raise ValueError(f"Arena must have positive dimensions, got {self.arena.width}x{self.arena.height}")
        if self.microbe_count < 0:
            raise ValueError(f"microbe_count must be non-negative, got {self.microbe_count}")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.brain.brain_size < 1 or self.brain.neuron_size < 1:
            raise ValueError("brain_size and neuron_size must be at least 1")
        # Each neighbor is sensed as five values, fed straight into the first unit.
        if self.brain.neuron_size != 5:
            raise ValueError(f"neuron_size must be 5 to match the sensory input, got {self.brain.neuron_size}")
        for name in ("brain_mutation_rate", "neuron_mutation_rate"):
            rate = getattr(self.brain, name)
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {rate}")
        microbe = self.microbe
        if not 0 < microbe.viable_size < microbe.starting_size <= microbe.max_size:
            raise ValueError("Expected 0 < viable_size < starting_size <= max_size")
        if microbe.energy_divisor <= 0 or microbe.max_speed <= 0 or microbe.direction_modulus <= 0:
            raise ValueError("energy_divisor, max_speed and direction_modulus must be positive")
        return self

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> SimulationConfig:
    arena = ArenaConfig(**raw.get("arena", {}))
    brain = BrainConfig(**raw.get("brain", {}))
    microbe = MicrobeConfig(**raw.get("microbe", {}))
    sim_values = {k: v for k, v in raw.items() if k not in {"arena", "brain", "microbe"}}
    return SimulationConfig(arena=arena, brain=brain, microbe=microbe, **sim_values).validate()
