"""Conway's Game of Life on a torus, updated by flipping only the cells that change."""
import logging
import numbers
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from toruslife.errors import DimensionMismatch
from toruslife.utils.topology import (
    Coordinate,
    NeighborTopology,
    check_coordinate,
    check_dimensions,
    grid_shape,
)

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = (10, 10)
DEFAULT_GENERATIONS = 11

FlipSet = List[Coordinate]


def new_grid(rows: int, cols: int) -> np.ndarray:
    """Return an all-dead grid with the given dimensions."""
    rows, cols = check_dimensions(rows, cols)
    return np.zeros((rows, cols), dtype=np.uint8)


def compute_updates(grid, topology: NeighborTopology) -> FlipSet:
    """
    Return the cells whose state changes in the next generation.

    Every neighbor count is taken from the grid as passed in, so the result
    describes one complete transition and the grid itself is never modified.

    Args:
        grid: State array (H x W) of 0/1 values
        topology: Neighbor table built for the same (H, W)

    Returns:
        Coordinates to toggle, in row-major order, each at most once
    """
    topology.check_grid(grid)
    state = np.asarray(grid)

    # (H, W, 8) neighbor states summed to (H, W) live-neighbor counts
    counts = state[topology.rows, topology.cols].sum(axis=-1)

    alive = state == 1
    birth = ~alive & (counts == 3)
    death = alive & (counts != 2) & (counts != 3)

    return [Coordinate(int(i), int(j)) for i, j in np.argwhere(birth | death)]


def apply_flips(grid, coords: Iterable) -> int:
    """
    Toggle each listed cell of grid in place.

    Every coordinate is bounds-checked before the first toggle, so a bad
    coordinate leaves the grid untouched. Duplicates toggle twice.

    Returns:
        Number of toggles applied
    """
    shape = grid_shape(grid, ("rows", "cols"))
    if len(shape) != 2:
        raise DimensionMismatch(shape, ("rows", "cols"))
    checked = [check_coordinate(coord, shape) for coord in coords]
    for i, j in checked:
        grid[i][j] = 1 - grid[i][j]
    return len(checked)


# Seeding is a flip from the all-dead state.
seed_grid = apply_flips


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


class GameOfLife:
    """Game of Life simulator with periodic boundary conditions."""

    def __init__(self, grid_size: Tuple[int, int] = DEFAULT_GRID_SIZE):
        """Create simulator with the given grid dimensions."""
        self.height, self.width = check_dimensions(*grid_size)
        self.topology = NeighborTopology.build(self.height, self.width)

    @property
    def grid_size(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def new_grid(self) -> np.ndarray:
        return new_grid(self.height, self.width)

    def updates(self, state) -> FlipSet:
        """Return the flip set for the provided grid."""
        return compute_updates(state, self.topology)

    def advance(self, grid: np.ndarray) -> FlipSet:
        """Move grid forward one generation in place and return the applied flips."""
        flips = compute_updates(grid, self.topology)
        apply_flips(grid, flips)
        return flips

    def step(self, state) -> np.ndarray:
        """Compute the next state for the provided grid."""
        next_state = np.array(state, dtype=np.uint8)
        self.advance(next_state)
        return next_state

    def run(self,
            grid: np.ndarray,
            num_generations: int,
            render: Optional[Callable[[np.ndarray], None]] = None) -> List[int]:
        """
        Advance grid in place for exactly num_generations generations.

        render, if given, is called with the grid before each generation is
        computed. The loop never stops early, even once the grid stops changing.

        Returns:
            Number of cells flipped at each generation
        """
        num_generations = _check_count("num_generations", num_generations)
        self.topology.check_grid(grid)

        flip_counts = []
        for _ in range(num_generations):
            if render is not None:
                render(grid)
            flip_counts.append(len(self.advance(grid)))

        logger.debug("Ran %d generations on %dx%d grid, %d total flips",
                     num_generations, self.height, self.width, sum(flip_counts))
        return flip_counts

    def simulate(self, initial_state, num_steps: int) -> np.ndarray:
        """Simulate evolution for multiple steps and return the full trajectory."""
        num_steps = _check_count("num_steps", num_steps)
        self.topology.check_grid(initial_state)

        trajectory = np.zeros((num_steps + 1, self.height, self.width), dtype=np.uint8)
        current_state = np.array(initial_state, dtype=np.uint8)
        trajectory[0] = current_state
        for t in range(1, num_steps + 1):
            self.advance(current_state)
            trajectory[t] = current_state
        return trajectory
