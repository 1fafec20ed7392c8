from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from game_types import Coord

NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

# (dx, dy) per direction index; North is +Y.
OFFSETS = {
    NORTH: (0, 1),
    EAST: (1, 0),
    SOUTH: (0, -1),
    WEST: (-1, 0),
}
OPPOSITE = {NORTH: SOUTH, EAST: WEST, SOUTH: NORTH, WEST: EAST}


class MazeError(Exception):
    """Base class for maze generation errors."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class NotAdjacent(MazeError, AssertionError):
    """Raised when a wall is removed between cells that do not share one."""


@dataclass
class Cell:
    x: int
    y: int
    visited: bool = False
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)


class Grid:
    """W x H cells with per-side wall flags, addressed as (x, y)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self._cells[y][x]

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row from y=0."""
        for row in self._cells:
            yield from row

    def neighbors_in_bounds(self, cell: Cell) -> List[Tuple[int, Cell]]:
        """Return (direction, neighbor) pairs in N, E, S, W order."""
        out: List[Tuple[int, Cell]] = []
        for direction in DIRECTIONS:
            dx, dy = OFFSETS[direction]
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                out.append((direction, self._cells[ny][nx]))
        return out

    def remove_wall_between(self, a: Cell, b: Cell) -> bool:
        """Open the wall shared by two adjacent cells on both sides.

        Returns:
            True if the wall was standing, False if it was already open.

        Raises:
            NotAdjacent: If a and b do not differ by exactly one step on one axis.
        """
        direction = direction_between(a, b)
        was_standing = a.walls[direction]
        a.walls[direction] = False
        b.walls[OPPOSITE[direction]] = False
        return was_standing

    def open_neighbors(self, cell: Cell) -> List[Cell]:
        return [n for d, n in self.neighbors_in_bounds(cell) if not cell.walls[d]]

    def passages(self) -> List[Tuple[Coord, Coord]]:
        """Every open edge exactly once, scanning only North and East sides."""
        edges: List[Tuple[Coord, Coord]] = []
        for c in self.cells():
            if c.y + 1 < self.height and not c.walls[NORTH]:
                edges.append((c.pos, (c.x, c.y + 1)))
            if c.x + 1 < self.width and not c.walls[EAST]:
                edges.append((c.pos, (c.x + 1, c.y)))
        return edges

    def edge_count(self) -> int:
        return len(self.passages())

    def adjacent_pair_count(self) -> int:
        return self.width * (self.height - 1) + self.height * (self.width - 1)

    def wall_signature(self) -> Tuple[bool, ...]:
        return tuple(flag for c in self.cells() for flag in c.walls)


def direction_between(a: Cell, b: Cell) -> int:
    """Direction index from a to b; raises NotAdjacent otherwise."""
    delta = (b.x - a.x, b.y - a.y)
    for direction, offset in OFFSETS.items():
        if offset == delta:
            return direction
    raise NotAdjacent(f"cells {a.pos} and {b.pos} are not grid-adjacent")


def new_grid(width: int, height: int) -> Grid:
    """Allocate a fully walled, unvisited grid.

    Raises:
        InvalidDimensions: If width or height is not a positive integer.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensions(f"{name} must be an int, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{name} must be > 0, got {value}")
    return Grid(width, height)
