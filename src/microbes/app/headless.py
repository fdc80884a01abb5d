from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from pathlib import Path
from typing import Optional

from ..config import SimulationConfig
from ..sim.core.world import World
from ..sim.types.metrics import TickMetrics

logger = logging.getLogger(__name__)

_BASIC_HEADER = [
    "tick",
    "population",
    "births",
    "eaten",
    "respawns",
    "avg_size",
    "max_size",
    "tick_ms",
]

_DETAILED_HEADER = _BASIC_HEADER + [
    "births_per_agent",
    "respawns_per_agent",
    "tick_ms_per_agent",
    "min_size",
    "median_size",
    "lineages",
    "largest_lineage",
    "population_density",
]


def _format_basic_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        metrics.births,
        metrics.eaten,
        metrics.respawns,
        f"{metrics.average_size:.4f}",
        f"{metrics.max_size:.4f}",
        f"{tick_ms:.3f}",
    ]


def _format_detailed_row(world: World, metrics: TickMetrics, tick_ms: float) -> list[object]:
    population = metrics.population
    if population <= 0:
        births_per_agent = 0.0
        respawns_per_agent = 0.0
        tick_ms_per_agent = 0.0
        min_size = 0.0
        median_size = 0.0
        lineages = 0
        largest_lineage = 0
        population_density = 0.0
    else:
        births_per_agent = metrics.births / population
        respawns_per_agent = metrics.respawns / population
        tick_ms_per_agent = tick_ms / population

        sizes = sorted(microbe.size for microbe in world.agents)
        min_size = sizes[0]
        median_size = _percentile(sizes, 0.50)

        # Offspring inherit their parent's color, so colors track lineages.
        lineage_sizes: dict[tuple[int, int, int], int] = {}
        for microbe in world.agents:
            lineage_sizes[microbe.color] = lineage_sizes.get(microbe.color, 0) + 1
        lineages = len(lineage_sizes)
        largest_lineage = max(lineage_sizes.values())

        arena = world.config.arena
        population_density = population / (arena.width * arena.height)

    return _format_basic_row(metrics, tick_ms) + [
        f"{births_per_agent:.4f}",
        f"{respawns_per_agent:.4f}",
        f"{tick_ms_per_agent:.4f}",
        f"{min_size:.4f}",
        f"{median_size:.4f}",
        lineages,
        largest_lineage,
        f"{population_density:.6f}",
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p95": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(sum(values) / len(values)),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p95": _percentile(sorted_values, 0.95),
        "p99": _percentile(sorted_values, 0.99),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    log_format: str = "detailed",
    summary_path: Optional[Path] = None,
    summary_window: int = 5000,
    config_path: Optional[Path] = None,
) -> World:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")

    world = World(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if log_mode == "detailed" else _BASIC_HEADER)

    tick_ms_series: list[float] = []
    population_series: list[int] = []
    average_size_series: list[float] = []
    births_total = 0
    respawns_total = 0
    max_population = (-1, -1)
    max_size = (-1.0, -1)

    try:
        for tick in range(steps):
            metrics = world.step(tick)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms

            tick_ms_series.append(tick_ms)
            population_series.append(metrics.population)
            average_size_series.append(metrics.average_size)
            births_total += metrics.births
            respawns_total += metrics.respawns
            if metrics.population > max_population[0]:
                max_population = (metrics.population, tick)
            if metrics.max_size > max_size[0]:
                max_size = (metrics.max_size, tick)

            if writer:
                if log_mode == "detailed":
                    writer.writerow(_format_detailed_row(world, metrics, tick_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    logger.info(
        "Ran %d ticks: final population=%d, births=%d, respawns=%d",
        steps,
        len(world.agents),
        births_total,
        respawns_total,
    )

    if summary_path:
        window = max(1, int(summary_window))
        tail_slice = slice(max(0, len(tick_ms_series) - window), len(tick_ms_series))
        summary = {
            "steps": steps,
            "seed": config.seed,
            "log_format": log_mode,
            "deterministic_log": deterministic_log,
            "births": births_total,
            "respawns": respawns_total,
            "tick_ms": _summary_stats(tick_ms_series),
            "population": _summary_stats([float(v) for v in population_series]),
            "average_size": _summary_stats(average_size_series),
            "peaks": {
                "population": {"value": max_population[0], "tick": max_population[1]},
                "max_size": {"value": float(max_size[0]), "tick": max_size[1]},
            },
            "tail_window": {
                "window": window,
                "tick_ms": _summary_stats(tick_ms_series[tail_slice]),
                "population": _summary_stats([float(v) for v in population_series[tail_slice]]),
                "average_size": _summary_stats(average_size_series[tail_slice]),
            },
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))

    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless microbe simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--log-format",
        choices=["basic", "detailed"],
        default="detailed",
        help="CSV format to write when --log is provided.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--summary-window",
        type=int,
        default=5000,
        help="Tail window size (ticks) for summary stats.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        log_format=args.log_format,
        summary_path=args.summary,
        summary_window=args.summary_window,
        config_path=args.config,
    )


if __name__ == "__main__":
    main()
