from __future__ import annotations

import logging
from time import perf_counter
from typing import List, Optional, Sequence

from ...config import SimulationConfig
from ...rng import SimulationRng
from ..systems import collisions, metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld
from .microbe import Microbe
from .randomizer import Randomizer

logger = logging.getLogger(__name__)


class World:
    """Owns the microbe population and advances it one tick at a time."""

    def __init__(self, config: SimulationConfig, agents: Optional[Sequence[Microbe]] = None):
        self._config = config.validate()
        self._rng = SimulationRng(config.seed)
        self._randomizer = Randomizer(config, self._rng)
        self._agents: List[Microbe] = []
        self._metrics: TickMetrics | None = None
        if agents is None:
            self._bootstrap_population()
        else:
            self._agents = list(agents)

    @property
    def agents(self) -> List[Microbe]:
        return self._agents

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def randomizer(self) -> Randomizer:
        return self._randomizer

    def reset(self) -> None:
        self._rng.reset()
        self._metrics = None
        self._bootstrap_population()

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        snapshot = tuple(self._agents)
        moves = [microbe.move(snapshot, self._randomizer) for microbe in snapshot]
        respawns = sum(1 for before, after in zip(snapshot, moves) if after.brain is not before.brain)

        result = collisions.resolve_collisions(collisions.sort_by_size(moves), self._randomizer)
        self._agents = result.living

        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            tick, self._agents, result.births, result.eaten, respawns, duration_ms
        )
        logger.debug(
            "tick %d: population=%d births=%d eaten=%d respawns=%d",
            tick,
            self._metrics.population,
            result.births,
            result.eaten,
            respawns,
        )
        return self._metrics

    def snapshot(self, tick: int) -> Snapshot:
        config = self._config
        return Snapshot(
            tick=tick,
            metrics=self._metrics,
            agents=[microbe.to_payload() for microbe in self._agents],
            world=SnapshotWorld(width=config.arena.width, height=config.arena.height),
            metadata=SnapshotMetadata(
                tick_rate=config.tick_rate,
                seed=config.seed,
                config_version=config.config_version,
            ),
        )

    def _bootstrap_population(self) -> None:
        self._agents = [self._randomizer.random_microbe() for _ in range(self._config.microbe_count)]
        logger.info(
            "Seeded %d microbes in a %gx%g arena (seed=%s)",
            len(self._agents),
            self._config.arena.width,
            self._config.arena.height,
            self._config.seed,
        )
