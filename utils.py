# utils.py
import random
from typing import FrozenSet, Sequence, Set, TypeVar, Union

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from grid_core import Grid

T = TypeVar("T")

RandomSource = Union[None, int, random.Random]


class EmptyCandidateSetError(AssertionError):
    """A random choice was attempted over zero candidates (an internal defect)."""


def make_rng(source: RandomSource = None) -> random.Random:
    """Returns a random.Random for a seed, an existing source, or None (unseeded)."""
    if isinstance(source, random.Random):
        return source
    return random.Random(source)


def choose(rng: random.Random, candidates: Sequence[T]) -> T:
    """Picks one candidate uniformly, refusing an empty sequence."""
    if not candidates:
        raise EmptyCandidateSetError("Random choice requested from an empty candidate set.")
    return rng.choice(candidates)


def passage_pairs(grid: Grid) -> Set[FrozenSet[int]]:
    """Returns every passage as an unordered pair of arena indices."""
    return {
        frozenset((cell.index, other))
        for cell in grid.get_all_cells()
        for other in cell.passages
    }


def count_passages(grid: Grid) -> int:
    """Counts undirected passages, a passage recorded from both sides counting once."""
    return len(passage_pairs(grid))


def passages_are_symmetric(grid: Grid) -> bool:
    """Checks that every recorded passage A->B has its companion B->A."""
    cells = list(grid.get_all_cells())
    return all(
        cell.index in cells[other].passages
        for cell in cells
        for other in cell.passages
    )


def passages_are_adjacent(grid: Grid) -> bool:
    """Checks that passages only join distinct, geometrically adjacent cells."""
    for cell in grid.get_all_cells():
        neighbour_ids = {i for i in cell.neighbour_ids.values() if i is not None}
        if cell.index in cell.passages or not cell.passages <= neighbour_ids:
            return False
    return True


def passage_adjacency(grid: Grid) -> coo_matrix:
    """Builds the passage graph as a sparse (size x size) adjacency matrix."""
    pairs = [tuple(pair) for pair in passage_pairs(grid)]
    n = grid.size()
    if not pairs:
        return coo_matrix((n, n), dtype=np.int8)
    rows = np.array([a for a, _ in pairs] + [b for _, b in pairs])
    cols = np.array([b for _, b in pairs] + [a for a, _ in pairs])
    data = np.ones(len(rows), dtype=np.int8)
    return coo_matrix((data, (rows, cols)), shape=(n, n))


def count_components(grid: Grid) -> int:
    """Number of connected components of the passage graph."""
    n_components, _ = connected_components(passage_adjacency(grid), directed=False)
    return int(n_components)


def is_perfect_maze(grid: Grid) -> bool:
    """
    Checks that the passage graph is a spanning tree: connected, with exactly
    size - 1 undirected edges, all between adjacent cells, recorded both ways.
    """
    if grid.size() == 0:
        return False
    return (
        count_passages(grid) == grid.size() - 1
        and passages_are_symmetric(grid)
        and passages_are_adjacent(grid)
        and count_components(grid) == 1
    )
