from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from game_types import Color, Coord
from grid import Grid
from utils import as_color, as_float, as_int, as_optional_int, clamp_float


@dataclass(frozen=True)
class MazeConfig:
    width: int
    height: int
    branching_probability: float
    loops_to_add: int
    size_increment: int
    seed: Optional[int]

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "MazeConfig":
        if not isinstance(raw, dict):
            raw = {}
        return MazeConfig(
            width=max(1, as_int(raw.get("width"), 5)),
            height=max(1, as_int(raw.get("height"), 5)),
            branching_probability=clamp_float(
                as_float(raw.get("branching_probability"), 0.5), 0.0, 1.0
            ),
            loops_to_add=max(0, as_int(raw.get("loops_to_add"), 2)),
            size_increment=max(0, as_int(raw.get("size_increment"), 1)),
            seed=as_optional_int(raw.get("seed")),
        )


@dataclass(frozen=True)
class RenderStyle:
    canvas: Tuple[int, int]
    margin_cells: float
    wall_thickness: float  # fraction of a cell
    bg: Color
    floor: Color
    wall: Color
    spawn: Color
    goal: Color

    @staticmethod
    def from_dict(raw: Dict[str, Any]) -> "RenderStyle":
        if not isinstance(raw, dict):
            raw = {}
        canvas_raw = raw.get("canvas", [800, 800])
        if isinstance(canvas_raw, (list, tuple)) and len(canvas_raw) >= 2:
            canvas = (max(16, as_int(canvas_raw[0], 800)), max(16, as_int(canvas_raw[1], 800)))
        else:
            canvas = (800, 800)
        return RenderStyle(
            canvas=canvas,
            margin_cells=max(0.0, as_float(raw.get("margin_cells"), 0.5)),
            wall_thickness=clamp_float(as_float(raw.get("wall_thickness"), 0.1), 0.01, 0.5),
            bg=as_color(raw.get("bg"), (18, 20, 28)),
            floor=as_color(raw.get("floor"), (128, 128, 128)),
            wall=as_color(raw.get("wall"), (235, 240, 255)),
            spawn=as_color(raw.get("spawn"), (0, 200, 0)),
            goal=as_color(raw.get("goal"), (220, 0, 0)),
        )


@dataclass
class MazeLevel:
    index: int
    grid: Grid
    spawn: Coord
    goal: Coord

    @property
    def size(self) -> Coord:
        return (self.grid.width, self.grid.height)
