# -*- coding: utf-8 -*-
"""
Grid containers and random grid generation.
Exposes:
- Grid (bounds-checked 2D container)
- generate_grid(...)
- free_components(...), is_reachable(...)
"""

from __future__ import annotations

from .grid import Grid
from .generator import generate_grid, free_components, is_reachable

__all__ = [
    "Grid",
    "generate_grid",
    "free_components",
    "is_reachable",
]
