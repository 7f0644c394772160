# tests/conftest.py
import os
import sys

os.environ.setdefault("MPLBACKEND", "Agg")

# Ensure project root (where grid_core.py lives) is on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from grid_core import Grid
from maze_gen import Algo, generate_maze


@pytest.fixture
def grid_5x5():
    return Grid.create(5, 5)


@pytest.fixture
def carved_maze():
    """A seeded 6x4 recursive-backtracking maze."""
    grid = Grid.create(6, 4)
    generate_maze(grid, Algo.RECURSIVE_BACKTRACKING, rng=1234)
    return grid
