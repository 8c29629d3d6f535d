"""Predefined Game of Life patterns as live-cell coordinates."""
from typing import Optional, Sequence, Tuple

import numpy as np

from toruslife.errors import OutOfBoundsCoordinate
from toruslife.utils.topology import Coordinate, check_dimensions

Pattern = Tuple[Coordinate, ...]


def _parse(picture: str) -> Pattern:
    """Read a picture drawn with 'O' for live cells and '.' for dead ones."""
    rows = [line.strip() for line in picture.strip().splitlines()]
    return tuple(Coordinate(i, j)
                 for i, line in enumerate(rows)
                 for j, char in enumerate(line) if char == 'O')


def pattern_from_array(array) -> Pattern:
    """Return the live cells of a 0/1 array, row-major."""
    return tuple(Coordinate(int(i), int(j)) for i, j in np.argwhere(np.asarray(array) == 1))


def pattern_size(pattern: Sequence) -> Tuple[int, int]:
    """Return the (height, width) of the pattern's bounding box from the origin."""
    if not pattern:
        return (0, 0)
    return (max(r for r, _ in pattern) + 1, max(c for _, c in pattern) + 1)


# Still lifes (period 1)
BLOCK = _parse("""
    OO
    OO
""")

BEEHIVE = _parse("""
    .OO.
    O..O
    .OO.
""")

BOAT = _parse("""
    OO.
    O.O
    .O.
""")

LOAF = _parse("""
    .OO.
    O..O
    .O.O
    ..O.
""")


# Oscillators (period 2)
BLINKER = _parse("OOO")

TOAD = _parse("""
    .OOO
    OOO.
""")

BEACON = _parse("""
    OO..
    OO..
    ..OO
    ..OO
""")


# Oscillators (period 3)
PULSAR = _parse("""
    ..OOO...OOO..
    .............
    O....O.O....O
    O....O.O....O
    O....O.O....O
    ..OOO...OOO..
    .............
    ..OOO...OOO..
    O....O.O....O
    O....O.O....O
    O....O.O....O
    .............
    ..OOO...OOO..
""")


# Spaceships (period 4)
GLIDER = _parse("""
    .O.
    ..O
    OOO
""")

LWSS = _parse("""
    .O..O
    O....
    O...O
    OOOO.
""")


# Glider Gun (period 30)
# Gosper's Glider Gun - emits one glider every 30 generations
GLIDER_GUN = _parse("""
    ........................O...........
    ......................O.O...........
    ............OO......OO............OO
    ...........O...O....OO............OO
    OO........O.....O...OO..............
    OO........O...O.OO....O.O...........
    ..........O.....O.......O...........
    ...........O...O....................
    ............OO......................
""")


DEFAULT_SEED = GLIDER

PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF,
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON,
    },
    'oscillators_p3': {
        'pulsar': PULSAR,
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS,
    },
    'guns': {
        'glider_gun': GLIDER_GUN,
    },
}


def get_pattern(name: str) -> Pattern:
    """Return the live-cell coordinates of the requested pattern by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name]

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES


def place_pattern(grid_size: Tuple[int, int],
                  pattern: Sequence,
                  position: Optional[Tuple[int, int]] = None,
                  wrap: bool = False) -> Pattern:
    """
    Translate a pattern onto a grid, centered by default or at a given corner.

    Args:
        grid_size: Grid dimensions (H, W)
        pattern: Live-cell coordinates relative to the pattern origin
        position: Grid cell for the pattern origin, None to center it
        wrap: Wrap cells past an edge onto the opposite edge instead of raising

    Returns:
        Seed coordinates within the grid
    """
    h, w = check_dimensions(*grid_size)
    ph, pw = pattern_size(pattern)
    if position is None:
        start_h = (h - ph) // 2
        start_w = (w - pw) // 2
    else:
        start_h, start_w = position

    placed = []
    for r, c in pattern:
        row, col = start_h + r, start_w + c
        if wrap:
            row, col = row % h, col % w
        elif not (0 <= row < h and 0 <= col < w):
            raise OutOfBoundsCoordinate((row, col), (h, w))
        placed.append(Coordinate(row, col))
    # A wrapped pattern larger than the grid overlaps itself; seed each cell once.
    return tuple(dict.fromkeys(placed))
