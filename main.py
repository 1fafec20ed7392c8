#!/usr/bin/env python3
"""
main.py

Generates a run of growing maze levels from the command line.

Level 1 uses the configured size; each following level is what the finish
trigger would produce: the same pipeline rerun with width and height grown
by size_increment. Optional outputs per level:
- --ascii: text view on stdout
- --out DIR: DIR/level{k}.png top-down render
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from config_io import load_json_config
from config_parsing import apply_cli_overrides, parse_maze_config, parse_render_style
from grid import MazeError
from maze_generator import ConnectivityValidator
from models import MazeLevel
from progression import LevelProgression
from rendering import MazeRenderer, ascii_rows, save_png

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate growing-tree maze levels.")
    p.add_argument("count", type=int, help="How many levels to generate.")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON config file (default: config.json if present)",
    )
    p.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible mazes.")
    p.add_argument("--width", type=int, default=None, help="Width of the first level.")
    p.add_argument("--height", type=int, default=None, help="Height of the first level.")
    p.add_argument(
        "--branching",
        type=float,
        default=None,
        help="Chance of growing from a random frontier cell instead of the newest (0..1).",
    )
    p.add_argument("--loops", type=int, default=None, help="Extra walls to knock out per level.")
    p.add_argument("--out", type=str, default=None, help="Write level PNGs into this folder.")
    p.add_argument("--ascii", action="store_true", help="Print each maze as text.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p.parse_args(argv)


def load_config(path_arg: Optional[str]) -> Dict[str, Any]:
    if path_arg is not None:
        return load_json_config(Path(path_arg))
    default = Path("config.json")
    return load_json_config(default) if default.exists() else {}


def describe(level: MazeLevel, validator: ConnectivityValidator) -> str:
    grid = level.grid
    tree_edges = grid.width * grid.height - 1
    loops = grid.edge_count() - tree_edges
    return (
        f"Generated level{level.index}: {grid.width}x{grid.height} | "
        f"passages={grid.edge_count()} loops={loops} connected={validator.is_connected(grid)}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.count <= 0:
        raise SystemExit("count must be > 0")

    cfg = apply_cli_overrides(
        load_config(args.config),
        {
            "width": args.width,
            "height": args.height,
            "branching_probability": args.branching,
            "loops_to_add": args.loops,
            "seed": args.seed,
        },
    )
    maze_cfg = parse_maze_config(cfg)
    rng = random.Random(maze_cfg.seed)
    progression = LevelProgression(maze_cfg, rng)
    validator = ConnectivityValidator()

    out_dir = Path(args.out) if args.out else None
    renderer = MazeRenderer(parse_render_style(cfg)) if out_dir is not None else None

    try:
        level = progression.start()
        for i in range(args.count):
            if i > 0:
                level = progression.next_level()
            print(describe(level, validator))
            if args.ascii:
                print("\n".join(ascii_rows(level.grid)))
            if renderer is not None and out_dir is not None:
                path = out_dir / f"level{level.index}.png"
                save_png(renderer.render(level.grid), path)
                logger.debug("wrote %s", path)
    except MazeError as e:
        raise SystemExit(f"ERROR: {e}")


if __name__ == "__main__":
    main()
