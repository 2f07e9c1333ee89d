#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Fixed-size 2D container for cell values, row-major, backed by a NumPy array.

Grid convention: grid[r][c] == 1 means blocked, 0 means free (the default
solidity predicate in planners.a_star reads it that way; the container itself
does not care what the values mean).

Accessors are bounds-checked and tolerant: out-of-range get/set return None
instead of raising, and negative indices are *not* wrapped around.
"""

from __future__ import annotations
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np


class Grid:
    """A width x height rectangular grid of homogeneous values."""

    def __init__(self, width: int, height: int, dtype=int, fill_value: Any = 0):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._cells = np.full((height, width), fill_value, dtype=dtype)

    # ------------------------------ construction ------------------------------ #

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype=None) -> "Grid":
        """
        Build a grid from a rectangular sequence of rows.

        width = length of the first row, height = number of rows. The input is
        copied; raises ValueError on an empty or ragged input.
        """
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2 or rows.shape[0] == 0 or rows.shape[1] == 0:
                raise ValueError(f"Expected a non-empty 2D array, got shape {rows.shape}")
            cells = np.array(rows, dtype=dtype, copy=True)
        else:
            rows = [list(r) for r in rows]
            if not rows or not rows[0]:
                raise ValueError("Cannot build a grid from an empty sequence")
            width = len(rows[0])
            for i, r in enumerate(rows):
                if len(r) != width:
                    raise ValueError(f"Row {i} has length {len(r)}, expected {width}")
            cells = np.array(rows, dtype=dtype)
        grid = cls.__new__(cls)
        grid._cells = cells
        return grid

    # ------------------------------- properties ------------------------------- #

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def dtype(self):
        return self._cells.dtype

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    # -------------------------------- access --------------------------------- #

    def get(self, row: int, col: int) -> Optional[Any]:
        if not self.in_bounds(row, col):
            return None
        return self._cells[row, col].item()

    def set(self, row: int, col: int, value: Any) -> Optional[Any]:
        """Store value at (row, col) and return the previous value; None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        old = self._cells[row, col].item()
        self._cells[row, col] = value
        return old

    def fill(self, value: Any) -> None:
        self._cells.fill(value)

    def __getitem__(self, row: int) -> np.ndarray:
        # Writable view: grid[r][c] = 1 toggles the cell in place.
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} out of range for height {self.height}")
        return self._cells[row]

    def __len__(self) -> int:
        return self.height

    # ------------------------------- conversion ------------------------------- #

    def to_list(self) -> List[List[Any]]:
        """Row-major nested list of Python scalars (what the planners consume)."""
        return self._cells.tolist()

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, dtype={self._cells.dtype})"
