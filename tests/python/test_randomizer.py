from __future__ import annotations

from microbes.config import ArenaConfig, BrainConfig, SimulationConfig
from microbes.rng import SimulationRng
from microbes.sim.core.randomizer import Randomizer

from helpers import states


def test_random_points_stay_inside_arena():
    randomizer = Randomizer(SimulationConfig(arena=ArenaConfig(width=40.0, height=10.0)), SimulationRng(9))
    for _ in range(200):
        point = randomizer.random_point()
        assert 0.0 <= point.x < 40.0
        assert 0.0 <= point.y < 10.0


def test_random_neuron_weights_in_range():
    randomizer = Randomizer(SimulationConfig(brain=BrainConfig(weight_range=100.0)), SimulationRng(3))
    unit = randomizer.random_neuron()
    assert unit.size == 5
    assert all(len(row) == 5 for row in unit.weights)
    assert all(-100.0 <= w < 100.0 for row in unit.weights for w in row)


def test_random_brain_has_independent_units():
    randomizer = Randomizer(SimulationConfig(), SimulationRng(3))
    brain = randomizer.random_brain()
    assert len(brain) == 5
    assert len({unit.weights for unit in brain.units}) == 5


def test_random_microbe_uses_starting_size_and_rgb_color():
    randomizer = Randomizer(SimulationConfig(), SimulationRng(3))
    microbe = randomizer.random_microbe()
    assert microbe.size == 5.0
    assert len(microbe.color) == 3
    assert all(0 <= channel <= 255 for channel in microbe.color)


def test_same_seed_produces_same_microbes():
    config = SimulationConfig()
    first = Randomizer(config, SimulationRng(21))
    second = Randomizer(config, SimulationRng(21))
    a = [first.random_microbe() for _ in range(5)]
    b = [second.random_microbe() for _ in range(5)]
    assert states(a) == states(b)
    assert [m.brain.units[0].weights for m in a] == [m.brain.units[0].weights for m in b]
