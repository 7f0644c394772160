# tests/test_grid_core.py
import random

import pytest

from grid_core import Cell, Grid, InvalidDimensionsError


def _neighbour_structure(grid):
    return [
        (cell.coords, tuple(sorted((d, i) for d, i in cell.neighbour_ids.items() if i is not None)))
        for cell in grid.get_all_cells()
    ]


def test_new_grid_is_empty():
    grid = Grid(5, 10)
    assert grid.width == 5
    assert grid.height == 10
    assert grid.cells == []
    assert grid.size() == 0


@pytest.mark.parametrize("width,height", [(5, 5), (7, 3), (3, 7), (1, 1), (1, 6), (6, 1)])
def test_init_populates_row_major(width, height):
    grid = Grid.create(width, height)

    assert len(grid.cells) == height
    assert all(len(row) == width for row in grid.cells)
    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            assert cell.coords == (r, c)
            assert cell.index == r * width + c
            assert cell.id == f"{r},{c}"


@pytest.mark.parametrize("width,height", [(5, 5), (7, 3), (3, 7), (1, 1), (2, 9)])
def test_boundary_cells_lack_outside_neighbours(width, height):
    grid = Grid.create(width, height)

    for cell in grid.get_all_cells():
        assert (cell.top is None) == (cell.row == 0)
        assert (cell.bottom is None) == (cell.row == height - 1)
        assert (cell.left is None) == (cell.col == 0)
        assert (cell.right is None) == (cell.col == width - 1)


def test_interior_cells_have_four_neighbours():
    grid = Grid.create(6, 4)
    for cell in grid.get_all_cells():
        if 0 < cell.row < 3 and 0 < cell.col < 5:
            assert len(cell.neighbours()) == 4


def test_non_square_grid_wires_matching_axes():
    grid = Grid.create(7, 3)
    corner = grid.get_cell(2, 6)
    assert corner.bottom is None
    assert corner.right is None
    assert corner.top == grid.get_cell(1, 6)
    assert corner.left == grid.get_cell(2, 5)


def test_neighbours_are_symmetric():
    grid = Grid.create(5, 4)
    for cell in grid.get_all_cells():
        if cell.right is not None:
            assert cell.right.left is cell
        if cell.bottom is not None:
            assert cell.bottom.top is cell


def test_neighbours_enumeration_order(grid_5x5):
    cell = grid_5x5.get_cell(2, 2)
    assert [n.coords for n in cell.neighbours()] == [(1, 2), (3, 2), (2, 1), (2, 3)]

    corner = grid_5x5.get_cell(0, 4)
    assert [n.coords for n in corner.neighbours()] == [(1, 4), (0, 3)]


def test_reinitialization_is_idempotent():
    grid = Grid.create(4, 6)
    first = _neighbour_structure(grid)
    grid.get_cell(0, 0).link(grid.get_cell(0, 1))

    grid.init_grid()

    assert _neighbour_structure(grid) == first
    assert _neighbour_structure(Grid.create(4, 6)) == first
    assert not any(cell.has_passages() for cell in grid.get_all_cells())


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (0, 0), (-1, 3), (2.5, 3), (True, 3)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensionsError):
        Grid.create(width, height)


def test_random_cell_on_zero_dimension_grid():
    with pytest.raises(InvalidDimensionsError):
        Grid(0, 4).random_cell()


def test_random_cell_in_bounds(grid_5x5):
    for _ in range(50):
        cell = grid_5x5.random_cell()
        assert 0 <= cell.row < 5
        assert 0 <= cell.col < 5


def test_random_cell_uses_injected_source():
    grid = Grid.create(9, 7)
    a = [grid.random_cell(random.Random(3)).coords for _ in range(5)]
    b = [grid.random_cell(random.Random(3)).coords for _ in range(5)]
    assert a == b


def test_link_is_one_directional(grid_5x5):
    a = grid_5x5.get_cell(1, 1)
    b = grid_5x5.get_cell(1, 2)

    a.link(b)

    assert a.is_linked_to(b)
    assert not b.is_linked_to(a)
    assert a.has_passages()
    assert not b.has_passages()
    assert a.linked_cells() == [b]


def test_link_ignores_multiplicity(grid_5x5):
    a = grid_5x5.get_cell(0, 0)
    b = grid_5x5.get_cell(0, 1)
    a.link(b)
    a.link(b)
    assert len(a.passages) == 1


def test_self_link_rejected(grid_5x5):
    cell = grid_5x5.get_cell(2, 2)
    with pytest.raises(ValueError):
        cell.link(cell)
    assert not cell.has_passages()


def test_is_linked_to_compares_by_position(grid_5x5):
    a = grid_5x5.get_cell(3, 3)
    b = grid_5x5.get_cell(3, 4)
    a.link(b)

    other_grid = Grid.create(5, 5)
    assert a.is_linked_to(other_grid.get_cell(3, 4))
    assert not a.is_linked_to(None)
    assert Cell(3, 4, 0, []) == b


def test_clear_passages(grid_5x5):
    grid_5x5.get_cell(0, 0).link(grid_5x5.get_cell(1, 0))
    grid_5x5.clear_passages()
    assert not any(c.has_passages() for c in grid_5x5.get_all_cells())


def test_get_cell_out_of_bounds(grid_5x5):
    assert grid_5x5.get_cell(5, 0) is None
    assert grid_5x5.get_cell(0, -1) is None
