"""
maze_generator.py

Builds mazes over a rectangular grid in two passes:

- GrowingTreeCarver: randomized growing-tree spanning tree from (0, 0).
  branching_probability=0 always extends the newest frontier cell (long
  corridors, backtracker-like); 1 always picks a random frontier cell
  (short branches, Prim-like).
- LoopInjector: knocks out extra interior walls to add alternate routes.

Every step draws from the random.Random passed in, so a seeded instance
reproduces the same walls for the same parameters.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import List, Set, Tuple

from game_types import Coord
from grid import EAST, NORTH, OPPOSITE, Cell, Grid, new_grid

logger = logging.getLogger(__name__)


def _check_probability(p: float) -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"branching_probability must be in [0, 1], got {p}")
    return p


# ----------------------------
# Spanning tree
# ----------------------------


class GrowingTreeCarver:
    """Carves a perfect maze (exactly one path between any two cells)."""

    def __init__(self, rng: random.Random, branching_probability: float = 0.5) -> None:
        self.rng = rng
        self.branching_probability = _check_probability(branching_probability)

    def carve(self, grid: Grid) -> Grid:
        start = grid.cell(0, 0)
        start.visited = True
        frontier: List[Cell] = [start]
        carved = 0

        while frontier:
            if self.rng.random() < self.branching_probability:
                idx = self.rng.randrange(len(frontier))
            else:
                idx = len(frontier) - 1
            cell = frontier[idx]

            candidates = [n for _, n in grid.neighbors_in_bounds(cell) if not n.visited]
            if candidates:
                nxt = self.rng.choice(candidates)
                grid.remove_wall_between(cell, nxt)
                nxt.visited = True
                frontier.append(nxt)
                carved += 1
            else:
                # dead cell: order of the rest matters for "pick last"
                frontier.pop(idx)

        logger.debug(
            "carved %sx%s maze: %s passages (p=%s)",
            grid.width,
            grid.height,
            carved,
            self.branching_probability,
        )
        return grid


# ----------------------------
# Loops
# ----------------------------


class LoopInjector:
    """Removes extra interior walls from a finished spanning tree."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def candidate_walls(self, grid: Grid) -> List[Tuple[Cell, Cell]]:
        """Standing interior walls, each listed once via its North/East side."""
        walls: List[Tuple[Cell, Cell]] = []
        for c in grid.cells():
            if c.walls[NORTH] and c.y + 1 < grid.height:
                walls.append((c, grid.cell(c.x, c.y + 1)))
            if c.walls[EAST] and c.x + 1 < grid.width:
                walls.append((c, grid.cell(c.x + 1, c.y)))
        return walls

    def inject(self, grid: Grid, loop_count: int) -> int:
        """Draw loop_count candidates with replacement and open them.

        Redrawing a wall that is already open does nothing, so the number of
        walls actually opened can be lower than loop_count.

        Returns:
            How many walls were opened.
        """
        if loop_count < 0:
            raise ValueError(f"loop_count must be >= 0, got {loop_count}")

        walls = self.candidate_walls(grid)
        opened = 0
        for _ in range(loop_count):
            if not walls:
                break
            a, b = self.rng.choice(walls)
            if grid.remove_wall_between(a, b):
                opened += 1

        logger.debug(
            "loops: requested=%s candidates=%s opened=%s", loop_count, len(walls), opened
        )
        return opened


# ----------------------------
# Validation
# ----------------------------


class ConnectivityValidator:
    """Graph checks over the open-wall structure of a grid."""

    def reachable_from(self, grid: Grid, start: Coord = (0, 0)) -> Set[Coord]:
        q = deque([grid.cell(*start)])
        seen = {start}
        while q:
            cell = q.popleft()
            for n in grid.open_neighbors(cell):
                if n.pos not in seen:
                    seen.add(n.pos)
                    q.append(n)
        return seen

    def is_connected(self, grid: Grid) -> bool:
        return len(self.reachable_from(grid)) == grid.width * grid.height

    def is_perfect(self, grid: Grid) -> bool:
        # connected with V-1 edges means no cycles
        return self.is_connected(grid) and grid.edge_count() == grid.width * grid.height - 1

    def walls_symmetric(self, grid: Grid) -> bool:
        for c in grid.cells():
            for direction, n in grid.neighbors_in_bounds(c):
                if c.walls[direction] != n.walls[OPPOSITE[direction]]:
                    return False
        return True


# ----------------------------
# Pipeline
# ----------------------------


class MazeGenerator:
    """Runs grid allocation, carving and loop injection from scratch."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.loops = LoopInjector(rng)

    def generate(
        self,
        width: int,
        height: int,
        branching_probability: float = 0.5,
        loop_count: int = 0,
    ) -> Grid:
        if loop_count < 0:
            raise ValueError(f"loop_count must be >= 0, got {loop_count}")
        carver = GrowingTreeCarver(self.rng, branching_probability)

        grid = new_grid(width, height)
        carver.carve(grid)
        self.loops.inject(grid, loop_count)
        return grid


def generate_maze(
    width: int,
    height: int,
    branching_probability: float,
    loop_count: int,
    rng: random.Random,
) -> Grid:
    """Build a fresh maze; calling again with new sizes is how levels grow."""
    return MazeGenerator(rng).generate(width, height, branching_probability, loop_count)
