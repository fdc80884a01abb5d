from __future__ import annotations

from typing import Sequence

from ..core.microbe import Microbe
from ..types.metrics import TickMetrics


def create_metrics(
    tick: int,
    population: Sequence[Microbe],
    births: int,
    eaten: int,
    respawns: int,
    duration_ms: float,
) -> TickMetrics:
    count = len(population)
    sizes = [microbe.size for microbe in population]
    return TickMetrics(
        tick=tick,
        population=count,
        births=births,
        eaten=eaten,
        respawns=respawns,
        average_size=sum(sizes) / count if count else 0.0,
        max_size=max(sizes) if sizes else 0.0,
        tick_duration_ms=duration_ms,
    )
