"""Metrics for checking simulated trajectories against a dense reference."""
from typing import List

import numpy as np

from toruslife.utils.topology import Coordinate


def reference_step(state: np.ndarray) -> np.ndarray:
    """Compute the next state by rolling the whole grid, without a neighbor table."""
    state = np.asarray(state)
    neighbors = np.zeros(state.shape, dtype=int)
    for di in [-1, 0, 1]:
        for dj in [-1, 0, 1]:
            if di == 0 and dj == 0:
                continue
            neighbors += np.roll(np.roll(state, di, axis=0), dj, axis=1)
    next_state = ((state == 1) & ((neighbors == 2) | (neighbors == 3))) | \
                 ((state == 0) & (neighbors == 3))
    return next_state.astype(np.uint8)


def population(state: np.ndarray) -> int:
    """Return the number of live cells."""
    return int(np.count_nonzero(np.asarray(state) == 1))


def live_cells(state: np.ndarray) -> List[Coordinate]:
    """Return live-cell coordinates in row-major order."""
    return [Coordinate(int(i), int(j)) for i, j in np.argwhere(np.asarray(state) == 1)]


def hamming_distance(a: np.ndarray, b: np.ndarray) -> int:
    """Return the number of cells that differ between two states."""
    a, b = np.asarray(a), np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare states of shape {a.shape} and {b.shape}")
    return int(np.count_nonzero(a != b))


def flip_activity(trajectory: np.ndarray) -> np.ndarray:
    """Return the number of cells that changed at each transition of a (T, H, W) trajectory."""
    trajectory = np.asarray(trajectory)
    if len(trajectory) < 2:
        return np.zeros(0, dtype=int)
    changed = trajectory[1:] != trajectory[:-1]
    return changed.reshape(len(changed), -1).sum(axis=1)


def matches_reference(trajectory: np.ndarray) -> bool:
    """Return True if every frame is the reference successor of the one before it."""
    trajectory = np.asarray(trajectory)
    return all(np.array_equal(reference_step(prev), nxt)
               for prev, nxt in zip(trajectory[:-1], trajectory[1:]))
