"""Utility functions for Game of Life simulation and visualization"""

from .topology import Coordinate, NeighborTopology
from .game_of_life import (
    GameOfLife,
    new_grid,
    compute_updates,
    apply_flips,
    seed_grid,
)
from .patterns import get_pattern, get_all_patterns, place_pattern, PATTERN_CATEGORIES
from .visualization import (
    format_grid,
    print_grid,
    visualize_state,
    visualize_trajectory,
    create_animation,
)

__all__ = [
    'Coordinate',
    'NeighborTopology',
    'GameOfLife',
    'new_grid',
    'compute_updates',
    'apply_flips',
    'seed_grid',
    'get_pattern',
    'get_all_patterns',
    'place_pattern',
    'PATTERN_CATEGORIES',
    'format_grid',
    'print_grid',
    'visualize_state',
    'visualize_trajectory',
    'create_animation',
]
