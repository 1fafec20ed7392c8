from __future__ import annotations

import pytest

from grid import (
    EAST,
    NORTH,
    SOUTH,
    WEST,
    InvalidDimensions,
    MazeError,
    NotAdjacent,
    new_grid,
)


def test_new_grid_is_fully_walled_and_unvisited():
    grid = new_grid(3, 2)
    cells = list(grid.cells())
    assert len(cells) == 6
    assert all(not c.visited for c in cells)
    assert all(c.walls == [True, True, True, True] for c in cells)
    assert grid.edge_count() == 0


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (5, -1)])
def test_new_grid_rejects_non_positive_sizes(width, height):
    with pytest.raises(InvalidDimensions):
        new_grid(width, height)


def test_invalid_dimensions_is_a_value_error():
    with pytest.raises(ValueError):
        new_grid(0, 1)


@pytest.mark.parametrize("value", [2.5, "3", True, None])
def test_new_grid_rejects_non_int_sizes(value):
    with pytest.raises(InvalidDimensions):
        new_grid(value, 3)


def test_cells_are_addressed_by_x_then_y():
    grid = new_grid(4, 3)
    c = grid.cell(3, 2)
    assert (c.x, c.y) == (3, 2)
    with pytest.raises(IndexError):
        grid.cell(4, 0)


def test_neighbors_at_corner_and_center():
    grid = new_grid(3, 3)
    corner = grid.neighbors_in_bounds(grid.cell(0, 0))
    assert [(d, n.pos) for d, n in corner] == [(NORTH, (0, 1)), (EAST, (1, 0))]

    center = grid.neighbors_in_bounds(grid.cell(1, 1))
    assert [(d, n.pos) for d, n in center] == [
        (NORTH, (1, 2)),
        (EAST, (2, 1)),
        (SOUTH, (1, 0)),
        (WEST, (0, 1)),
    ]


def test_single_cell_has_no_neighbors():
    grid = new_grid(1, 1)
    assert grid.neighbors_in_bounds(grid.cell(0, 0)) == []


def test_remove_wall_clears_both_sides():
    grid = new_grid(2, 2)
    a, b = grid.cell(0, 0), grid.cell(0, 1)
    assert grid.remove_wall_between(a, b) is True
    assert a.walls[NORTH] is False
    assert b.walls[SOUTH] is False
    assert a.walls[EAST] and b.walls[EAST]

    c = grid.cell(1, 1)
    grid.remove_wall_between(c, b)
    assert c.walls[WEST] is False
    assert b.walls[EAST] is False
    assert grid.edge_count() == 2


def test_remove_open_wall_again_is_a_no_op():
    grid = new_grid(2, 1)
    a, b = grid.cell(0, 0), grid.cell(1, 0)
    assert grid.remove_wall_between(a, b) is True
    assert grid.remove_wall_between(b, a) is False
    assert grid.edge_count() == 1


@pytest.mark.parametrize("b_pos", [(1, 1), (2, 0), (0, 0)])
def test_remove_wall_between_non_adjacent_cells(b_pos):
    grid = new_grid(3, 3)
    a = grid.cell(0, 0)
    with pytest.raises(NotAdjacent):
        grid.remove_wall_between(a, grid.cell(*b_pos))
    assert a.walls == [True, True, True, True]


def test_not_adjacent_is_an_assertion_error():
    grid = new_grid(3, 3)
    with pytest.raises(AssertionError):
        grid.remove_wall_between(grid.cell(0, 0), grid.cell(2, 2))
    assert issubclass(NotAdjacent, MazeError)


def test_passages_and_open_neighbors():
    grid = new_grid(2, 2)
    grid.remove_wall_between(grid.cell(0, 0), grid.cell(1, 0))
    grid.remove_wall_between(grid.cell(1, 0), grid.cell(1, 1))
    assert sorted(grid.passages()) == [((0, 0), (1, 0)), ((1, 0), (1, 1))]
    assert [n.pos for n in grid.open_neighbors(grid.cell(1, 0))] == [(1, 1), (0, 0)]


def test_adjacent_pair_count():
    assert new_grid(5, 5).adjacent_pair_count() == 40
    assert new_grid(1, 1).adjacent_pair_count() == 0
    assert new_grid(3, 1).adjacent_pair_count() == 2
