"""Exceptions raised when grids, topologies or coordinates are invalid."""


class LifeError(Exception):
    """Base class for all simulator errors."""


class InvalidDimensions(LifeError, ValueError):
    """Grid or topology requested with a non-positive height or width."""

    def __init__(self, height, width):
        self.height = height
        self.width = width
        super().__init__(
            f"Grid dimensions must be positive integers, got {height}x{width}"
        )


class OutOfBoundsCoordinate(LifeError, IndexError):
    """Coordinate lies outside [0, H) x [0, W)."""

    def __init__(self, coord, shape):
        self.coord = tuple(coord)
        self.shape = tuple(shape)
        super().__init__(
            f"Coordinate {self.coord} is outside a {shape[0]}x{shape[1]} grid"
        )


class DimensionMismatch(LifeError, ValueError):
    """Grid and neighbor topology were built for different sizes."""

    def __init__(self, grid_shape, topology_shape):
        self.grid_shape = tuple(grid_shape)
        self.topology_shape = tuple(topology_shape)
        super().__init__(
            f"Grid shape {self.grid_shape} does not match "
            f"expected shape {self.topology_shape}"
        )
