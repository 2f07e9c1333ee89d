# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_astar         : compute one A* path on a grid file or a random grid
"""
__all__ = [
    "run_astar",
]
