# -*- coding: utf-8 -*-
"""
Distance heuristics for grid A*.

Both are admissible for 4-connected unit-cost movement; Manhattan is the
tighter bound and the default.
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple

Position = Tuple[int, int]
Heuristic = Callable[[Position, Position], int]


def manhattan_distance(a: Position, b: Position) -> int:
    """|drow| + |dcol|, e.g. (1, 1) -> (1, 3) is 2."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def diagonal_distance(a: Position, b: Position) -> int:
    """Chebyshev distance max(|drow|, |dcol|), e.g. (0, 0) -> (3, 4) is 4."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan_distance,
    "diagonal": diagonal_distance,
}


def get_heuristic(name: str) -> Heuristic:
    key = name.strip().lower()
    if key not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{name}'. Available: {sorted(HEURISTICS)}")
    return HEURISTICS[key]
