from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import pygame

from game_types import Color
from grid import EAST, NORTH, SOUTH, WEST, Grid
from models import RenderStyle

logger = logging.getLogger(__name__)


def fit_pixels_per_cell(
    grid_w: int, grid_h: int, canvas: Tuple[int, int], margin_cells: float
) -> float:
    """Scale that frames the whole maze plus margin, top-down orthographic style."""
    canvas_w, canvas_h = canvas
    aspect = canvas_w / canvas_h
    half_w = grid_w * 0.5 + margin_cells
    half_h = grid_h * 0.5 + margin_cells
    ortho_size = max(half_h, half_w / aspect)
    return canvas_h / (2.0 * ortho_size)


class MazeRenderer:
    """Draws a finished grid off-screen: floor per cell, a segment per standing wall."""

    def __init__(self, style: RenderStyle) -> None:
        self.style = style

    def render(self, grid: Grid) -> pygame.Surface:
        canvas_w, canvas_h = self.style.canvas
        surf = pygame.Surface((canvas_w, canvas_h))
        surf.fill(self.style.bg)

        ppc = fit_pixels_per_cell(grid.width, grid.height, self.style.canvas, self.style.margin_cells)
        to_rect = self._projector(grid, ppc)
        t = self.style.wall_thickness
        half = t / 2.0
        goal = (grid.width - 1, grid.height - 1)

        for c in grid.cells():
            pygame.draw.rect(surf, self._floor_color(c.pos, goal), to_rect(c.x, c.y, c.x + 1, c.y + 1))

        # walls after floors so neighbors' floors never cover them
        for c in grid.cells():
            x, y = c.x, c.y
            if c.walls[NORTH]:
                pygame.draw.rect(surf, self.style.wall, to_rect(x - half, y + 1 - half, x + 1 + half, y + 1 + half))
            if c.walls[EAST]:
                pygame.draw.rect(surf, self.style.wall, to_rect(x + 1 - half, y - half, x + 1 + half, y + 1 + half))
            if c.walls[SOUTH]:
                pygame.draw.rect(surf, self.style.wall, to_rect(x - half, y - half, x + 1 + half, y + half))
            if c.walls[WEST]:
                pygame.draw.rect(surf, self.style.wall, to_rect(x - half, y - half, x + half, y + 1 + half))

        logger.debug("rendered %sx%s maze at %.1f px/cell", grid.width, grid.height, ppc)
        return surf

    def cell_center_px(self, grid: Grid, x: int, y: int) -> Tuple[int, int]:
        """Screen position of a cell's center, e.g. for spawn markers."""
        ppc = fit_pixels_per_cell(grid.width, grid.height, self.style.canvas, self.style.margin_cells)
        return self._projector(grid, ppc)(x, y, x + 1, y + 1).center

    def _floor_color(self, pos: Tuple[int, int], goal: Tuple[int, int]) -> Color:
        if pos == (0, 0):
            return self.style.spawn
        if pos == goal:
            return self.style.goal
        return self.style.floor

    def _projector(self, grid: Grid, ppc: float):
        canvas_w, canvas_h = self.style.canvas
        cx, cy = canvas_w / 2.0, canvas_h / 2.0
        mid_x, mid_y = grid.width / 2.0, grid.height / 2.0

        def to_rect(x0: float, y0: float, x1: float, y1: float) -> pygame.Rect:
            left = cx + (x0 - mid_x) * ppc
            right = cx + (x1 - mid_x) * ppc
            # +Y is north, which is up on screen
            top = cy - (y1 - mid_y) * ppc
            bottom = cy - (y0 - mid_y) * ppc
            return pygame.Rect(
                int(round(left)),
                int(round(top)),
                max(1, int(round(right - left))),
                max(1, int(round(bottom - top))),
            )

        return to_rect


def save_png(surf: pygame.Surface, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surf, str(path))


def ascii_rows(grid: Grid) -> List[str]:
    """Text view of the maze, north at the top.

    Cells sit on odd rows/columns of a (2W+1) x (2H+1) board; '#' is wall,
    '.' is floor, 'S' the spawn cell and 'G' the goal cell.
    """
    cols, rows = grid.width * 2 + 1, grid.height * 2 + 1
    board = [["#"] * cols for _ in range(rows)]

    for c in grid.cells():
        col = 2 * c.x + 1
        row = 2 * (grid.height - 1 - c.y) + 1
        board[row][col] = "."
        if not c.walls[NORTH]:
            board[row - 1][col] = "."
        if not c.walls[EAST]:
            board[row][col + 1] = "."
        if not c.walls[SOUTH]:
            board[row + 1][col] = "."
        if not c.walls[WEST]:
            board[row][col - 1] = "."

    board[rows - 2][1] = "S"
    board[1][cols - 2] = "G"
    return ["".join(r) for r in board]
