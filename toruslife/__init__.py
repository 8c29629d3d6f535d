"""Conway's Game of Life on a toroidal grid with precomputed neighborhoods."""

__version__ = "0.1.0"
