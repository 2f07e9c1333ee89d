#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grid maps.
- `grid` is any row-major 2D indexable (list of lists, tuples, np.ndarray).
- A cell is blocked when `is_solid(row, col, grid)` is True; the default
  predicate treats value 1 as blocked.
- Edge cost: 1 per orthogonal step. Diagonal moves are never produced.
- Heap entries are (f, h, seq, (r,c)): lowest f first, then lowest h, then
  insertion order, so results are deterministic for identical inputs.

`astar` returns list[(r,c)] from start to goal inclusive, or None.
`AStarPlanner.plan` wraps it in the {'success': bool, 'path': ...} dict API.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple, Union
import heapq
import itertools
import logging
import math
import time

from .heuristics import Heuristic, get_heuristic, manhattan_distance

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
SolidPredicate = Callable[[int, int, Any], bool]

# Neighbour order is part of the contract: up, left, down, right.
DELTAS_4: Tuple[Position, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


# ------------------------------ predicates -------------------------------- #

def is_cell_solid(row: int, col: int, grid) -> bool:
    """Default solidity predicate: value 1 (or True) is blocked."""
    return grid[row][col] == 1


def solid_value(*values) -> SolidPredicate:
    """Predicate treating any of `values` as blocked, e.g. solid_value(1, 9)."""
    blocked = frozenset(values)

    def _is_solid(row: int, col: int, grid) -> bool:
        return grid[row][col] in blocked

    return _is_solid


# ------------------------------- helpers ---------------------------------- #

def _dims(grid) -> Tuple[int, int]:
    H = len(grid)
    W = len(grid[0]) if H else 0
    return H, W


def reconstruct_path(came_from: Mapping[Hashable, Hashable], current: Hashable) -> List:
    """
    Follow `came_from` links back from `current` to the root (the first node
    without an entry) and return the chain root -> current, both inclusive.

    >>> reconstruct_path({(1, 1): (1, 0), (1, 0): (0, 0), (0, 0): (0, 1)}, (1, 1))
    [(0, 1), (0, 0), (1, 0), (1, 1)]
    """
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def get_neighbors(row: int, col: int, grid, is_solid: SolidPredicate = is_cell_solid) -> List[Position]:
    """
    Orthogonal, in-bounds, non-solid neighbours of (row, col) in the order
    up, left, down, right. `is_solid` is only evaluated on in-bounds cells.
    """
    H, W = _dims(grid)
    out: List[Position] = []
    for dr, dc in DELTAS_4:
        nr, nc = row + dr, col + dc
        if nr < 0 or nr >= H or nc < 0 or nc >= W:
            continue
        if is_solid(nr, nc, grid):
            continue
        out.append((nr, nc))
    return out


def _search(start: Position,
            goal: Position,
            grid,
            heuristic: Heuristic,
            is_solid: SolidPredicate) -> Tuple[Optional[List[Position]], int]:
    """Core loop; returns (path or None, number of expanded nodes)."""
    H, W = _dims(grid)
    sr, sc = start
    gr, gc = goal

    # Validate start and goal positions
    if not (0 <= sr < H and 0 <= sc < W and 0 <= gr < H and 0 <= gc < W):
        logger.debug("Endpoint out of bounds: start=%s goal=%s grid=%dx%d", start, goal, H, W)
        return None, 0
    if is_solid(sr, sc, grid) or is_solid(gr, gc, grid):
        logger.debug("Endpoint is solid: start=%s goal=%s", start, goal)
        return None, 0

    start = (int(sr), int(sc))
    goal = (int(gr), int(gc))

    # Open set is the heap plus g_score; heap entries for closed nodes are stale
    closed_set = set()
    came_from: Dict[Position, Position] = {}
    g_score: Dict[Position, int] = {start: 0}
    h_start = heuristic(start, goal)
    f_score: Dict[Position, int] = {start: h_start}

    seq = itertools.count()
    pq: List[Tuple[int, int, int, Position]] = []
    heapq.heappush(pq, (h_start, h_start, next(seq), start))

    while pq:
        _, _, _, current = heapq.heappop(pq)

        # Stale entry for a node that was improved and already finalized
        if current in closed_set:
            continue

        if current == goal:
            return reconstruct_path(came_from, current), len(closed_set)

        closed_set.add(current)

        for neighbor in get_neighbors(current[0], current[1], grid, is_solid):
            if neighbor in closed_set:
                continue

            tentative_g = g_score[current] + 1
            if tentative_g >= g_score.get(neighbor, math.inf):
                continue

            h = heuristic(neighbor, goal)
            came_from[neighbor] = current
            g_score[neighbor] = tentative_g
            f_score[neighbor] = tentative_g + h
            heapq.heappush(pq, (f_score[neighbor], h, next(seq), neighbor))

    return None, len(closed_set)


def astar(start: Position,
          end: Position,
          grid,
          heuristic: Heuristic = manhattan_distance,
          is_solid: SolidPredicate = is_cell_solid) -> Optional[List[Position]]:
    """
    A* shortest path on a 2D grid.

    Args:
        start: (row, col) of the start cell
        end: (row, col) of the goal cell
        grid: row-major 2D grid of cell values
        heuristic: h(a, b) -> int, should be admissible for optimal paths
        is_solid: is_solid(row, col, grid) -> bool

    Returns:
        List of positions from start to end (inclusive), or None when the goal
        is unreachable or either endpoint is out of bounds or solid.

    >>> grid = [
    ...     [1, 1, 1, 1, 1],
    ...     [1, 0, 1, 0, 1],
    ...     [1, 0, 1, 0, 1],
    ...     [1, 0, 0, 0, 1],
    ...     [1, 1, 1, 1, 1],
    ... ]
    >>> astar((1, 1), (1, 3), grid)
    [(1, 1), (2, 1), (3, 1), (3, 2), (3, 3), (2, 3), (1, 3)]
    """
    path, expanded = _search(start, end, grid, heuristic, is_solid)
    logger.debug("A* %s -> %s: %s after %d expansions",
                 start, end, f"{len(path) - 1} moves" if path else "no path", expanded)
    return path


# ------------------------------ planner API ------------------------------- #

class AStarPlanner:
    """
    A* with the grid-planner API:
    planner.plan(grid, start, goal) -> {'success', 'path', 'expanded', 'time_sec'}
    """

    def __init__(self,
                 heuristic: Union[str, Heuristic] = "manhattan",
                 is_solid: Optional[SolidPredicate] = None):
        self.heuristic = get_heuristic(heuristic) if isinstance(heuristic, str) else heuristic
        self.is_solid = is_solid or is_cell_solid

    def plan(self, grid, start: Sequence[int], goal: Sequence[int]) -> Dict:
        # Grid objects expose to_list(); arrays and nested lists are used as-is
        cells = grid.to_list() if hasattr(grid, "to_list") else grid
        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))

        t0 = time.perf_counter()
        path, expanded = _search(start, goal, cells, self.heuristic, self.is_solid)
        elapsed = time.perf_counter() - t0

        return {
            'success': path is not None,
            'path': path,
            'expanded': expanded,
            'time_sec': elapsed,
        }
