from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

import pygame

from ..config import SimulationConfig
from ..sim.core.microbe import Microbe
from ..sim.core.world import World

logger = logging.getLogger(__name__)

BACKGROUND = (14, 14, 18)


def draw_microbes(surface: pygame.Surface, microbes: Iterable[Microbe], background=BACKGROUND) -> None:
    """Clear ``surface`` and draw each microbe as a filled circle of radius ``size``."""
    surface.fill(background)
    for microbe in microbes:
        pygame.draw.circle(surface, microbe.color, microbe.position.to_vector(), microbe.size)


def run_viewer(config: SimulationConfig, max_ticks: Optional[int] = None) -> World:
    """Open a window the size of the arena and step the world at ``config.tick_rate``."""
    world = World(config)
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(config.arena.width), int(config.arena.height)))
        pygame.display.set_caption("Microbes")
        clock = pygame.time.Clock()
        tick = 0
        running = True
        while running and (max_ticks is None or tick < max_ticks):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    world.reset()
                    tick = 0
            world.step(tick)
            tick += 1
            draw_microbes(screen, world.agents)
            pygame.display.flip()
            clock.tick(config.tick_rate)
        logger.info("Viewer stopped after %d ticks with %d microbes", tick, len(world.agents))
    finally:
        pygame.quit()
    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Watch microbes evolve in a pygame window")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--width", type=float, default=None, help="Arena width in pixels")
    parser.add_argument("--height", type=float, default=None, help="Arena height in pixels")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    if args.width is not None:
        config.arena.width = args.width
    if args.height is not None:
        config.arena.height = args.height
    run_viewer(config)


if __name__ == "__main__":
    main()
