import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from toruslife.utils.game_of_life import GameOfLife, new_grid, seed_grid


@pytest.fixture
def gol():
    return GameOfLife((10, 10))


@pytest.fixture
def make_grid():
    """Build a seeded grid: make_grid((rows, cols), cells)."""

    def _make(shape, cells=()):
        grid = new_grid(*shape)
        seed_grid(grid, cells)
        return grid

    return _make


@pytest.fixture
def random_grid():
    def _random(shape, density=0.35, seed=0):
        rng = np.random.default_rng(seed)
        return (rng.random(shape) < density).astype(np.uint8)

    return _random
