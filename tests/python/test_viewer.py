from __future__ import annotations

import pygame

from microbes.app.viewer import BACKGROUND, draw_microbes, run_viewer

from helpers import make_config, make_microbe


def test_draw_microbes_fills_circles_on_cleared_surface():
    surface = pygame.Surface((60, 60))
    surface.fill((255, 255, 255))
    microbes = [make_microbe(15.0, 15.0, 6.0, color=(200, 40, 40)), make_microbe(45.0, 40.0, 4.0, color=(40, 200, 40))]

    draw_microbes(surface, microbes)

    assert tuple(surface.get_at((15, 15)))[:3] == (200, 40, 40)
    assert tuple(surface.get_at((45, 40)))[:3] == (40, 200, 40)
    assert tuple(surface.get_at((58, 2)))[:3] == BACKGROUND


def test_draw_microbes_does_not_touch_state():
    surface = pygame.Surface((20, 20))
    microbe = make_microbe(10.0, 10.0, 3.0)
    draw_microbes(surface, [microbe])
    assert microbe.size == 3.0
    assert (microbe.position.x, microbe.position.y) == (10.0, 10.0)


def test_run_viewer_steps_world_with_dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    config = make_config(width=80.0, height=60.0, microbe_count=6, seed=3, tick_rate=1000.0)

    world = run_viewer(config, max_ticks=3)

    assert world.metrics is not None
    assert world.metrics.tick == 2
    assert len(world.agents) == 6
