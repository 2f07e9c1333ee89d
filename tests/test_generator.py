#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest
from grids import Grid, generate_grid, free_components, is_reachable
from planners import astar


def test_generate_is_reproducible_and_binary():
    g1 = generate_grid(12, 18, density=0.3, rng=np.random.default_rng(5))
    g2 = generate_grid(12, 18, density=0.3, rng=np.random.default_rng(5))
    assert g1 == g2
    assert (g1.height, g1.width) == (12, 18)
    assert set(np.unique(g1.to_array())) <= {0, 1}


def test_generate_keeps_start_and_goal_free():
    g = generate_grid(10, 10, density=1.0, start=(2, 3), goal=(7, 1), rng=np.random.default_rng(0))
    assert g.get(2, 3) == 0 and g.get(7, 1) == 0
    assert int(g.to_array().sum()) == 98


def test_generate_ensure_path_agrees_with_astar():
    rng = np.random.default_rng(11)
    for _ in range(10):
        g = generate_grid(20, 20, density=0.3, ensure_path=True, rng=rng)
        assert astar((0, 0), (19, 19), g.to_list()) is not None


def test_generate_ensure_path_gives_up():
    with pytest.raises(RuntimeError):
        generate_grid(10, 10, density=1.0, ensure_path=True, max_tries=3,
                      rng=np.random.default_rng(0))


def test_generate_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_grid(0, 5)
    with pytest.raises(ValueError):
        generate_grid(5, 5, density=1.5)
    with pytest.raises(ValueError):
        generate_grid(5, 5, start=(5, 0))


def test_free_components_uses_4_connectivity():
    cells = [
        [0, 1],
        [1, 0],
    ]
    labels, n = free_components(cells)
    assert n == 2
    assert labels[0, 0] != labels[1, 1]
    assert not is_reachable(cells, (0, 0), (1, 1))


def test_is_reachable_matches_astar_on_random_grids():
    rng = np.random.default_rng(2024)
    for _ in range(25):
        g = generate_grid(12, 12, density=0.35, rng=rng)
        reachable = is_reachable(g, (0, 0), (11, 11))
        assert reachable == (astar((0, 0), (11, 11), g.to_list()) is not None)


def test_is_reachable_out_of_bounds_and_blocked():
    g = Grid.from_rows([[0, 0], [0, 1]])
    assert not is_reachable(g, (0, 0), (2, 0))
    assert not is_reachable(g, (0, 0), (1, 1))
    assert is_reachable(g, (0, 0), (1, 0))
