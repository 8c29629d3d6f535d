import numpy as np
import pytest

from toruslife.errors import DimensionMismatch, InvalidDimensions, OutOfBoundsCoordinate
from toruslife.utils.topology import Coordinate, NeighborTopology


def test_corner_neighbors_wrap_in_canonical_order():
    topo = NeighborTopology(10, 10)

    assert topo.neighbors(0, 0) == [
        (9, 9), (9, 0), (9, 1),
        (0, 9), (0, 1),
        (1, 9), (1, 0), (1, 1),
    ]


def test_interior_neighbors():
    topo = NeighborTopology(10, 10)

    assert topo.neighbors(4, 5) == [
        (3, 4), (3, 5), (3, 6),
        (4, 4), (4, 6),
        (5, 4), (5, 5), (5, 6),
    ]


def test_non_square_grid_wraps_rows_and_columns_separately():
    topo = NeighborTopology(3, 5)

    assert topo.shape == (3, 5)
    assert topo.neighbors(0, 0) == [
        (2, 4), (2, 0), (2, 1),
        (0, 4), (0, 1),
        (1, 4), (1, 0), (1, 1),
    ]
    assert topo.neighbors(2, 4) == [
        (1, 3), (1, 4), (1, 0),
        (2, 3), (2, 0),
        (0, 3), (0, 4), (0, 0),
    ]


def test_neighbors_are_coordinates():
    topo = NeighborTopology(4, 4)

    first = topo[(1, 1)][0]
    assert isinstance(first, Coordinate)
    assert (first.row, first.col) == (0, 0)


def test_single_cell_grid_is_its_own_neighbor():
    topo = NeighborTopology(1, 1)

    assert topo.neighbors(0, 0) == [(0, 0)] * 8


def test_single_row_grid():
    topo = NeighborTopology(1, 3)

    assert topo.neighbors(0, 1) == [
        (0, 0), (0, 1), (0, 2),
        (0, 0), (0, 2),
        (0, 0), (0, 1), (0, 2),
    ]


def test_build_is_deterministic():
    a = NeighborTopology(7, 9)
    b = NeighborTopology(7, 9)

    assert a.to_list() == b.to_list()
    assert np.array_equal(a.rows, b.rows)
    assert np.array_equal(a.cols, b.cols)
    assert a == b
    assert hash(a) == hash(b)
    assert a != NeighborTopology(9, 7)


@pytest.mark.parametrize("shape", [(1, 1), (1, 6), (6, 1), (2, 2), (5, 8), (12, 12)])
def test_every_cell_has_eight_in_bounds_neighbors(shape):
    height, width = shape
    topo = NeighborTopology(height, width)
    table = topo.to_list()

    assert len(table) == height
    for row in table:
        assert len(row) == width
        for cell in row:
            assert len(cell) == 8
            for r, c in cell:
                assert 0 <= r < height
                assert 0 <= c < width


def test_flat_table_uses_row_major_indices():
    topo = NeighborTopology(4, 6)

    assert topo.flat.shape == (24, 8)
    assert np.array_equal(topo.flat.reshape(4, 6, 8), topo.rows * 6 + topo.cols)
    assert list(topo.flat[0]) == [23, 18, 19, 5, 1, 11, 6, 7]


def test_tables_are_read_only():
    topo = NeighborTopology(3, 3)

    with pytest.raises(ValueError):
        topo.rows[0, 0, 0] = 2
    with pytest.raises(ValueError):
        topo.flat[0, 0] = 2


@pytest.mark.parametrize("name", ["height", "width", "rows", "cols", "flat"])
def test_attributes_cannot_be_reassigned(name):
    topo = NeighborTopology.build(4, 4)

    with pytest.raises(AttributeError):
        setattr(topo, name, 1)
    with pytest.raises(AttributeError):
        topo.extra = 1

    assert NeighborTopology.build(4, 4).shape == (4, 4)


def test_build_shares_topology_per_shape():
    assert NeighborTopology.build(6, 4) is NeighborTopology.build(6, 4)
    assert NeighborTopology.build(6, 4) is not NeighborTopology.build(4, 6)


@pytest.mark.parametrize("height, width", [(0, 5), (5, 0), (-1, 3), (2.5, 3), (3, "4"), (True, 3)])
def test_invalid_dimensions(height, width):
    with pytest.raises(InvalidDimensions):
        NeighborTopology(height, width)
    with pytest.raises(ValueError):
        NeighborTopology.build(height, width)


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (3, 0), (0, 4), (1.0, 2)])
def test_neighbors_rejects_out_of_bounds(coord):
    topo = NeighborTopology(3, 4)

    with pytest.raises(OutOfBoundsCoordinate):
        topo.neighbors(*coord)


def test_check_grid():
    topo = NeighborTopology(3, 4)

    assert topo.check_grid(np.zeros((3, 4))) == (3, 4)
    with pytest.raises(DimensionMismatch):
        topo.check_grid(np.zeros((4, 3)))
    with pytest.raises(DimensionMismatch):
        topo.check_grid(np.zeros((3, 4, 1)))
