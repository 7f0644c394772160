# mazegen.py
"""
Facade over the maze core.

A MazeGenerator owns one grid plus its render settings::

    gen = MazeGenerator(15, 50, seed=7)
    gen.build_with(Algo.SIDEWINDER)
    gen.img_config(20, 2)
    gen.save_as_img("maze_one")  # -> maze_one.png
"""
import numbers
from typing import List, Optional

import constants as const
from grid_core import Cell, Grid
from maze_gen import STRATEGIES, Algo, UnsupportedAlgorithmError, generate_maze
from mesh_builder import create_2d_maze_stl
from utils import RandomSource, make_rng
from visualization import find_solution_path, render_ascii, save_maze_image


class MazeGenerator:
    """Owns a grid, a random source and the image configuration."""

    def __init__(
        self,
        width: int = const.DEFAULT_WIDTH,
        height: int = const.DEFAULT_HEIGHT,
        seed: RandomSource = None,
        cell_size: int = const.DEFAULT_CELL_SIZE,
        wall_thickness: int = const.DEFAULT_WALL_THICKNESS,
    ):
        self.rng = make_rng(seed)
        self.algo: Optional[Algo] = None
        self.cell_size = const.DEFAULT_CELL_SIZE
        self.wall_thickness = const.DEFAULT_WALL_THICKNESS
        self.img_config(cell_size, wall_thickness)
        self.grid: Grid = self.init(width, height)

    # --- Geometry ---
    def init(self, width: int, height: int) -> Grid:
        """Replaces the grid with a fresh one of the given dimensions."""
        grid = Grid(width, height)
        grid.init_grid()
        self.grid = grid
        self.algo = None
        return grid

    def _reinit(self):
        self.init(self.grid.width, self.grid.height)

    # --- Generation ---
    def build(self, seed: RandomSource = None) -> Grid:
        """Generates a maze with the default algorithm (recursive backtracking)."""
        return self.build_with(Algo.RECURSIVE_BACKTRACKING, seed)

    def build_with(self, algo: Algo, seed: RandomSource = None) -> Grid:
        """
        Generates a new maze on a freshly wired grid. ``seed`` overrides the
        generator's own random source for this run only.
        """
        if isinstance(algo, str):
            algo = Algo.from_name(algo)
        if algo not in STRATEGIES:
            raise UnsupportedAlgorithmError(algo)
        self._reinit()
        rng = self.rng if seed is None else make_rng(seed)
        generate_maze(self.grid, algo, rng)
        self.algo = algo
        return self.grid

    def get_maze(self) -> Grid:
        """Returns the grid in its raw form, for renderers and solvers."""
        return self.grid

    # --- Output ---
    def img_config(self, cell_size: int, wall_thickness: int):
        """Configures the raster representation of the maze."""
        if (
            isinstance(cell_size, bool)
            or not isinstance(cell_size, numbers.Integral)
            or cell_size <= 0
        ):
            raise ValueError(f"Cell size must be a positive integer, got {cell_size!r}.")
        if (
            isinstance(wall_thickness, bool)
            or not isinstance(wall_thickness, numbers.Integral)
            or wall_thickness < 0
        ):
            raise ValueError(
                f"Wall thickness must be a non-negative integer, got {wall_thickness!r}."
            )
        self.cell_size = int(cell_size)
        self.wall_thickness = int(wall_thickness)

    def save_as_img(self, filename: str) -> str:
        """Saves the maze image; ``filename`` is given without its .png suffix."""
        return save_maze_image(
            self.grid,
            f"{filename}{const.IMAGE_FILE_SUFFIX}",
            self.cell_size,
            self.wall_thickness,
        )

    def save_as_stl(self, filename: str) -> str:
        """Saves a printable STL of the maze; ``filename`` is given without its suffix."""
        path = f"{filename}{const.MESH_FILE_SUFFIX}"
        create_2d_maze_stl(self.grid, path)
        return path

    def to_ascii(self) -> str:
        return render_ascii(self.grid)

    def print_to_console(self):
        print(self.to_ascii())

    def solve(
        self, start: Optional[Cell] = None, end: Optional[Cell] = None
    ) -> Optional[List[Cell]]:
        """Shortest passage path between two cells (default: opposite corners)."""
        return find_solution_path(self.grid, start, end)
