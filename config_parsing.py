from __future__ import annotations

from typing import Any, Dict, Optional

from models import MazeConfig, RenderStyle
from utils import deep_get, deep_merge


def parse_maze_config(cfg: Dict[str, Any]) -> MazeConfig:
    """Parse the "maze" section of the config.

    Args:
        cfg: Whole config dict.

    Returns:
        MazeConfig with defaults applied and values clamped.
    """
    return MazeConfig.from_dict(deep_get(cfg, "maze", {}))


def parse_render_style(cfg: Dict[str, Any]) -> RenderStyle:
    """Parse the "render" section of the config."""
    return RenderStyle.from_dict(deep_get(cfg, "render", {}))


def apply_cli_overrides(cfg: Dict[str, Any], overrides: Dict[str, Optional[Any]]) -> Dict[str, Any]:
    """
    Lay command-line values over the "maze" section.
    Keys whose value is None were not given on the command line and are skipped:
      {"width": 9, "seed": None} -> only maze.width changes
    """
    given = {k: v for k, v in overrides.items() if v is not None}
    if not given:
        return cfg
    return deep_merge(cfg, {"maze": given})
