#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_astar.py
------------
Compute one A* path and report SUCCESS / FAIL.
- Grid comes from a text file (whitespace-separated ints, one row per line,
  '#' starts a comment) or is generated at random (--size/--density/--seed)
- Prints the path and its number of moves; --show draws an ASCII overlay

Example:
    python -m cli.run_astar --grid maze.txt --start 1,1 --end 1,3 --show
    python -m cli.run_astar --size 30x30 --density 0.25 --seed 0 \
        --start 0,0 --end 29,29 --heuristic diagonal

Exit status: 0 path found, 1 no path, 2 bad arguments.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

import numpy as np

from grids import Grid, generate_grid
from planners import HEURISTICS, get_planner, solid_value

logger = logging.getLogger(__name__)

# -------------------- helpers -------------------- #

def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    if "x" not in token:
        raise ValueError(f"Bad size '{s}', expected like 30x30")
    h, w = token.split("x")
    return int(h), int(w)


def _parse_pos(s: str) -> Tuple[int, int]:
    parts = [p.strip() for p in s.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Bad position '{s}', expected like 3,4")
    return int(parts[0]), int(parts[1])


def parse_grid_text(text: str) -> Grid:
    rows: List[List[int]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            rows.append([int(tok) for tok in line.split()])
        except ValueError as e:
            raise ValueError(f"Line {lineno}: {e}") from e
    return Grid.from_rows(rows)


def render_ascii(grid: Grid,
                 path: Optional[Sequence[Tuple[int, int]]],
                 start: Tuple[int, int],
                 end: Tuple[int, int],
                 is_solid) -> str:
    cells = grid.to_list()
    canvas = np.full(grid.shape, ".", dtype="<U1")
    for r in range(grid.height):
        for c in range(grid.width):
            if is_solid(r, c, cells):
                canvas[r, c] = "#"
    for r, c in path or []:
        canvas[r, c] = "*"
    for (r, c), ch in ((start, "S"), (end, "E")):
        if grid.in_bounds(r, c):
            canvas[r, c] = ch
    return "\n".join("".join(row) for row in canvas)


# ---------------------- main ---------------------- #

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Find a shortest 4-connected path with A*.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--grid", type=str, default=None, help="Grid text file (0 free, 1 blocked)")
    src.add_argument("--size", type=str, default="20x20", help="Random grid size HxW")
    ap.add_argument("--density", type=float, default=0.25, help="Obstacle density for random grids")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for random grids")
    ap.add_argument("--start", type=str, default="0,0", help="Start cell 'row,col'")
    ap.add_argument("--end", type=str, default=None, help="Goal cell 'row,col' (default: bottom-right)")
    ap.add_argument("--heuristic", type=str, default="manhattan", choices=sorted(HEURISTICS),
                    help="Heuristic for A*")
    ap.add_argument("--solid-value", type=int, nargs="+", default=[1],
                    help="Cell value(s) treated as blocked")
    ap.add_argument("--show", action="store_true", help="Print an ASCII overlay of the path")
    ap.add_argument("--log-level", type=str, default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        start = _parse_pos(args.start)
        if args.grid:
            with open(args.grid, "r", encoding="utf-8") as fh:
                grid = parse_grid_text(fh.read())
            logger.info("Loaded %dx%d grid from %s", grid.height, grid.width, args.grid)
        else:
            H, W = _parse_size(args.size)
            goal = _parse_pos(args.end) if args.end else None
            grid = generate_grid(H, W, density=args.density, start=start, goal=goal,
                                 rng=np.random.default_rng(args.seed))
            logger.info("Generated %dx%d grid (density=%.2f, seed=%d)", H, W, args.density, args.seed)
        end = _parse_pos(args.end) if args.end else (grid.height - 1, grid.width - 1)
    except (OSError, ValueError) as e:
        ap.error(str(e))

    is_solid = solid_value(*args.solid_value)
    planner = get_planner("a_star", heuristic=args.heuristic, is_solid=is_solid)
    res = planner.plan(grid, start, end)
    logger.info("Expanded %d nodes in %.4fs", res['expanded'], res['time_sec'])

    if res['success']:
        path = res['path']
        print(f"SUCCESS: {len(path) - 1} moves")
        print(" ".join(f"({r},{c})" for r, c in path))
    else:
        print("FAIL: no path")

    if args.show:
        print(render_ascii(grid, res['path'], start, end, is_solid))

    return 0 if res['success'] else 1


if __name__ == "__main__":
    sys.exit(main())
