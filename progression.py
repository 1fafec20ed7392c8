from __future__ import annotations

import logging
import random
from typing import Optional

from maze_generator import MazeGenerator
from models import MazeConfig, MazeLevel

logger = logging.getLogger(__name__)


class LevelProgression:
    """Keeps the current maze level and rebuilds a larger one when the goal is reached."""

    def __init__(self, cfg: MazeConfig, rng: random.Random) -> None:
        self.cfg = cfg
        self.rng = rng
        self.generator = MazeGenerator(rng)
        self.width = cfg.width
        self.height = cfg.height
        self._current: Optional[MazeLevel] = None
        self._index = 0

    @property
    def current(self) -> MazeLevel:
        if self._current is None:
            raise RuntimeError("No level generated yet; call start() first.")
        return self._current

    def start(self) -> MazeLevel:
        """Generate level 1 at the configured size."""
        self.width = self.cfg.width
        self.height = self.cfg.height
        self._index = 0
        return self._build()

    def regenerate(self, width_delta: int, height_delta: int) -> MazeLevel:
        """Grow the dimensions and build the next level from scratch."""
        self.width = max(1, self.width + width_delta)
        self.height = max(1, self.height + height_delta)
        return self._build()

    def next_level(self) -> MazeLevel:
        return self.regenerate(self.cfg.size_increment, self.cfg.size_increment)

    def on_cell_entered(self, x: int, y: int) -> bool:
        """Finish trigger: entering the goal cell advances to the next level."""
        if (x, y) != self.current.goal:
            return False
        logger.info("goal reached on level %s", self.current.index)
        self.next_level()
        return True

    def _build(self) -> MazeLevel:
        grid = self.generator.generate(
            self.width,
            self.height,
            branching_probability=self.cfg.branching_probability,
            loop_count=self.cfg.loops_to_add,
        )
        self._index += 1
        self._current = MazeLevel(
            index=self._index,
            grid=grid,
            spawn=(0, 0),
            goal=(grid.width - 1, grid.height - 1),
        )
        logger.info("level %s: %sx%s", self._index, grid.width, grid.height)
        return self._current
