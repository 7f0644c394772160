# maze_gen.py
import random
from enum import Enum
from typing import Callable, Dict, List, Optional

# Import from other project modules
import constants as const
from grid_core import Cell, Grid
from utils import RandomSource, choose, count_passages, is_perfect_maze, make_rng


class Algo(Enum):
    """Closed set of maze generation algorithms (not all are implemented)."""

    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    RECURSIVE_BACKTRACKING = "recursive_backtracking"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    ELLER = "eller"
    HUNT_AND_KILL = "hunt_and_kill"
    ALDOUS_BRODER = "aldous_broder"
    WILSON = "wilson"
    RECURSIVE_DIVISION = "recursive_division"
    GROWING_TREE = "growing_tree"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def from_name(cls, name: str) -> "Algo":
        """Parses 'Sidewinder', 'recursive-backtracking', 'HuntAndKill', ..."""
        key = name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        for algo in cls:
            if algo.value.replace("_", "") == key:
                return algo
        raise ValueError(
            f"Unknown algorithm '{name}'. Choose from: {', '.join(a.value for a in cls)}"
        )


class UnsupportedAlgorithmError(NotImplementedError):
    """Raised when an Algo member has no implementation yet."""

    def __init__(self, algo):
        name = getattr(algo, "label", algo)
        super().__init__(f"Maze algorithm '{name}' is not implemented yet.")
        self.algo = algo


def _link_both(a: Cell, b: Cell):
    a.link(b)
    b.link(a)


def recursive_backtracking(grid: Grid, rng: random.Random):
    """
    Generates maze passages within the grid using the Recursive Backtracking algorithm.
    Expects a grid without passages; a cell with no passages counts as unvisited.
    """
    # Initialize stack and starting cell
    start_cell = grid.random_cell(rng)
    print(f"  Starting maze generation at cell: {start_cell.id}")
    stack: List[Cell] = [start_cell]

    # Main loop
    while stack:
        current_cell = stack[-1]
        unvisited_neighbours = [n for n in current_cell.neighbours() if not n.has_passages()]

        if unvisited_neighbours:
            next_cell = choose(rng, unvisited_neighbours)
            _link_both(current_cell, next_cell)
            stack.append(next_cell)
        else:
            # No unvisited neighbours, backtrack
            stack.pop()


def sidewinder(grid: Grid, rng: random.Random):
    """
    Generates maze passages within the grid using the Sidewinder algorithm.

    Each row is swept left to right, growing a run of cells linked eastward.
    A run is closed at the end of the row or, when the row has a row above
    it, at random; closing carves one passage north from a random run member.
    The top row therefore becomes a single corridor.
    """
    for row in grid.each_row():
        run: List[Cell] = []

        for cell in row:
            run.append(cell)

            at_eastern_boundary = cell.right is None
            close_run = at_eastern_boundary or (
                cell.top is not None
                and rng.random() < const.SIDEWINDER_CLOSE_PROBABILITY
            )

            if close_run:
                member = choose(rng, run)
                if member.top is not None:
                    _link_both(member, member.top)
                run.clear()
            else:
                _link_both(cell, cell.right)


STRATEGIES: Dict[Algo, Callable[[Grid, random.Random], None]] = {
    Algo.RECURSIVE_BACKTRACKING: recursive_backtracking,
    Algo.SIDEWINDER: sidewinder,
}


def generate_maze(
    grid: Grid,
    algo: Algo = Algo.RECURSIVE_BACKTRACKING,
    rng: RandomSource = None,
) -> Grid:
    """
    Carves a perfect maze into an initialized grid with the chosen algorithm.
    Replaces any passages left over from a previous run. ``rng`` may be a
    seed or a random.Random; None draws an unseeded source.
    """
    if isinstance(algo, str):
        algo = Algo.from_name(algo)
    strategy: Optional[Callable[[Grid, random.Random], None]] = (
        STRATEGIES.get(algo) if isinstance(algo, Algo) else None
    )
    if strategy is None:
        raise UnsupportedAlgorithmError(algo)
    if grid.size() == 0:
        raise RuntimeError("Grid has no cells; call init_grid() before generating.")

    print(f"--- Starting Maze Generation ({algo.label}) ---")
    # Reset previous maze state (if any)
    grid.clear_passages()

    strategy(grid, make_rng(rng))

    passages = count_passages(grid)
    print(f"--- Maze Generation Complete: Carved {passages} passages over {grid.size()} cells. ---")

    # Sanity check: connected, acyclic, one passage fewer than cells
    if not is_perfect_maze(grid):
        print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")
        print(f"ERROR: MAZE GENERATION DID NOT PRODUCE A SPANNING TREE ({passages} PASSAGES, EXPECTED {grid.size() - 1}).")
        print("This indicates an issue with neighbour linking or the grid structure.")
        print("!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!")
    return grid
