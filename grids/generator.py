#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random occupancy grids and free-space connectivity queries.

- Obstacles are sampled cell-by-cell with probability `density`.
- Start and goal cells are always kept free.
- Connectivity is 4-neighbour (no diagonal moves), matching the planners.
- Reproducibility: explicit np.random.Generator.

Dependencies:
    numpy
    scipy.ndimage   (connected-component labeling of free space)
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .grid import Grid

logger = logging.getLogger(__name__)

# 4-connected structuring element (cross)
STRUCTURE_4 = np.array([
    [0, 1, 0],
    [1, 1, 1],
    [0, 1, 0],
], dtype=np.uint8)


def _as_blocked_mask(cells, solid_value: int = 1) -> np.ndarray:
    if isinstance(cells, Grid):
        cells = cells.to_array()
    return np.asarray(cells) == solid_value


def free_components(cells, solid_value: int = 1) -> Tuple[np.ndarray, int]:
    """
    Label 4-connected components of free space.

    Returns (labels, n): labels is an int32 (H, W) map with 0 on blocked cells
    and 1..n on free cells.
    """
    free = ~_as_blocked_mask(cells, solid_value)
    labels, n = cc_label(free.astype(np.uint8), structure=STRUCTURE_4)
    return labels.astype(np.int32), int(n)


def is_reachable(cells,
                 start: Tuple[int, int],
                 goal: Tuple[int, int],
                 solid_value: int = 1) -> bool:
    """True if start and goal are free, in bounds, and in the same free component."""
    labels, _ = free_components(cells, solid_value)
    H, W = labels.shape
    for r, c in (start, goal):
        if not (0 <= r < H and 0 <= c < W):
            return False
    a = labels[start[0], start[1]]
    b = labels[goal[0], goal[1]]
    return bool(a != 0 and a == b)


def generate_grid(
    height: int = 20,
    width: int = 20,
    *,
    density: float = 0.25,
    start: Tuple[int, int] = (0, 0),
    goal: Optional[Tuple[int, int]] = None,
    ensure_path: bool = False,
    rng: Optional[np.random.Generator] = None,
    max_tries: int = 100,
) -> Grid:
    """
    Create a random grid of 0 (free) / 1 (blocked) cells.

    ensure_path:
        False : no guarantee about path existence.
        True  : resample until goal is reachable from start; raises
                RuntimeError after `max_tries` attempts.
    """
    if height <= 0 or width <= 0:
        raise ValueError(f"Bad size {height}x{width}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    if goal is None:
        goal = (height - 1, width - 1)
    for name, (r, c) in (("start", start), ("goal", goal)):
        if not (0 <= r < height and 0 <= c < width):
            raise ValueError(f"{name} {(r, c)} outside {height}x{width} grid")

    rng = rng or np.random.default_rng()

    for attempt in range(1, max_tries + 1):
        cells = (rng.random((height, width)) < density).astype(int)
        cells[start] = 0
        cells[goal] = 0
        if not ensure_path or is_reachable(cells, start, goal):
            logger.debug("Generated %dx%d grid (density=%.2f, blocked=%d) after %d attempt(s)",
                         height, width, density, int(cells.sum()), attempt)
            return Grid.from_rows(cells)

    raise RuntimeError(
        f"Could not generate a solvable {height}x{width} grid at density {density} "
        f"in {max_tries} tries; lower the density"
    )
