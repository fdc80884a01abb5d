from __future__ import annotations

import random
from typing import Optional


class SimulationRng:
    """Random source threaded through every stochastic operation.

    A ``None`` seed draws fresh entropy from the OS, so unseeded runs differ.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        # Half-open [low, high), unlike random.uniform.
        return low + (high - low) * self._random.random()

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)
