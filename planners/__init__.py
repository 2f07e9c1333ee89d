# -*- coding: utf-8 -*-
"""
Planners on grid maps with a unified API:
planner.plan(grid, start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, 'expanded': int, 'time_sec': float}

The functional core (astar, get_neighbors, reconstruct_path) works on any
row-major nested sequence and is exported as well.
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .a_star import (
    AStarPlanner,
    astar,
    get_neighbors,
    reconstruct_path,
    is_cell_solid,
    solid_value,
)
from .heuristics import HEURISTICS, get_heuristic, manhattan_distance, diagonal_distance

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "a_star": AStarPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of the keys of PLANNERS ('a_star')
    kwargs : dict
        Passed to the planner constructor (e.g., heuristic="diagonal")
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "AStarPlanner",
    "astar",
    "get_neighbors",
    "reconstruct_path",
    "is_cell_solid",
    "solid_value",
    "HEURISTICS",
    "get_heuristic",
    "manhattan_distance",
    "diagonal_distance",
    "PLANNERS",
    "get_planner",
]
