"""Precomputed toroidal Moore neighborhoods for a fixed grid size."""
import logging
import numbers
from functools import lru_cache
from typing import List, NamedTuple, Tuple

import numpy as np

from toruslife.errors import DimensionMismatch, InvalidDimensions, OutOfBoundsCoordinate

logger = logging.getLogger(__name__)

NUM_NEIGHBORS = 8


class Coordinate(NamedTuple):
    """A (row, col) cell position, 0-indexed."""

    row: int
    col: int


def check_dimensions(height, width) -> Tuple[int, int]:
    """Return (height, width) as ints, raising InvalidDimensions if either is < 1."""
    for value in (height, width):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
            raise InvalidDimensions(height, width)
    return int(height), int(width)


def check_coordinate(coord, shape: Tuple[int, int]) -> Coordinate:
    """Return coord as a Coordinate, raising OutOfBoundsCoordinate if it is off the grid."""
    try:
        row, col = coord
    except (TypeError, ValueError):
        raise OutOfBoundsCoordinate((coord,), shape) from None
    height, width = shape
    if not (isinstance(row, numbers.Integral) and isinstance(col, numbers.Integral)):
        raise OutOfBoundsCoordinate((row, col), shape)
    if not (0 <= row < height and 0 <= col < width):
        raise OutOfBoundsCoordinate((row, col), shape)
    return Coordinate(int(row), int(col))


def grid_shape(grid, expected) -> Tuple[int, ...]:
    """Return np.shape(grid), raising DimensionMismatch for ragged nested lists."""
    try:
        return tuple(np.shape(grid))
    except ValueError:
        raise DimensionMismatch(("ragged",), expected) from None


class NeighborTopology:
    """
    The 8 wrapped neighbors of every cell on an H x W torus.

    Neighbors of (i, j) are stored in the fixed order

        (up, left), (up, j), (up, right),
        (i, left),           (i, right),
        (down, left), (down, j), (down, right)

    where up/down and left/right wrap around the grid edges. The tables are
    read-only numpy arrays:

        rows, cols: (H, W, 8) neighbor row and column indices
        flat:       (H*W, 8) neighbor indices as row * W + col

    Instances are shared between simulators of the same size, so none of
    these attributes can be reassigned.
    """

    __slots__ = ('_height', '_width', '_rows', '_cols', '_flat')

    def __init__(self, height: int, width: int):
        self._height, self._width = check_dimensions(height, width)
        self._rows, self._cols = self._build_tables(self._height, self._width)
        self._flat = (self._rows * self._width + self._cols).reshape(
            self._height * self._width, NUM_NEIGHBORS)
        for table in (self._rows, self._cols, self._flat):
            table.setflags(write=False)
        logger.debug("Built neighbor topology for %dx%d grid", self._height, self._width)

    @classmethod
    def build(cls, height: int, width: int) -> "NeighborTopology":
        """Return the shared topology for the given size."""
        height, width = check_dimensions(height, width)
        return _cached_topology(height, width)

    @staticmethod
    def _build_tables(height, width):
        i = np.arange(height)
        j = np.arange(width)
        up = (i - 1 + height) % height
        down = (i + 1) % height
        left = (j - 1 + width) % width
        right = (j + 1) % width

        # Row index depends only on i and column index only on j.
        row_index = np.stack([up, up, up, i, i, down, down, down], axis=-1)
        col_index = np.stack([left, j, right, left, right, left, j, right], axis=-1)

        shape = (height, width, NUM_NEIGHBORS)
        rows = np.broadcast_to(row_index[:, np.newaxis, :], shape).copy()
        cols = np.broadcast_to(col_index[np.newaxis, :, :], shape).copy()
        return rows, cols

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def rows(self) -> np.ndarray:
        return self._rows

    @property
    def cols(self) -> np.ndarray:
        return self._cols

    @property
    def flat(self) -> np.ndarray:
        return self._flat

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._height, self._width)

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        """Return the 8 neighbors of (row, col) in canonical order."""
        row, col = check_coordinate((row, col), self.shape)
        return [Coordinate(int(r), int(c))
                for r, c in zip(self.rows[row, col], self.cols[row, col])]

    def __getitem__(self, coord) -> List[Coordinate]:
        return self.neighbors(*coord)

    def to_list(self):
        """Return the table as nested lists: [row][col] -> tuple of 8 (r, c) pairs."""
        pairs = np.stack([self.rows, self.cols], axis=-1).tolist()
        return [[tuple(tuple(p) for p in cell) for cell in row] for row in pairs]

    def check_grid(self, grid) -> Tuple[int, int]:
        """Raise DimensionMismatch unless grid is 2-D with this topology's shape."""
        shape = grid_shape(grid, self.shape)
        if len(shape) != 2 or shape != self.shape:
            raise DimensionMismatch(shape, self.shape)
        return self.shape

    def __eq__(self, other):
        if not isinstance(other, NeighborTopology):
            return NotImplemented
        return self.shape == other.shape

    def __hash__(self):
        return hash((NeighborTopology, self.shape))

    def __repr__(self):
        return f"NeighborTopology(height={self.height}, width={self.width})"


@lru_cache(maxsize=32)
def _cached_topology(height, width):
    return NeighborTopology(height, width)
