from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    births: int
    eaten: int
    respawns: int
    average_size: float
    max_size: float
    tick_duration_ms: float = 0.0
