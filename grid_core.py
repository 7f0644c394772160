# grid_core.py
import numbers
import random
from typing import Dict, Iterator, List, Optional, Set

# Import from other project modules
import constants as const


class InvalidDimensionsError(ValueError):
    """Raised when a grid is given a zero, negative or non-integer dimension."""


class Cell:
    """Represents a single cell in the rectangular grid.

    Neighbour and passage relations are stored as integer indices into the
    owning grid's flat cell arena, so cells never hold references to each
    other directly.
    """

    def __init__(self, row: int, col: int, index: int, arena: List["Cell"]):
        self.row = row
        self.col = col
        self.id = f"{row},{col}"
        self.coords = (row, col)  # Store as tuple for convenience
        self.index = index  # Slot in the owning grid's arena (row-major)
        self._arena = arena

        # Static grid graph, wired once by Grid._link_neighbours()
        self.neighbour_ids: Dict[str, Optional[int]] = {
            const.DIR_TOP: None,
            const.DIR_BOTTOM: None,
            const.DIR_LEFT: None,
            const.DIR_RIGHT: None,
        }
        self.passages: Set[int] = set()  # Cells reachable through a carved opening

    def link(self, other_cell: "Cell"):
        """Records a passage from this cell to another.

        Only this side is recorded; callers link the reverse direction
        themselves to keep passages symmetric.
        """
        if other_cell.coords == self.coords:
            raise ValueError(f"Cell {self.id} cannot have a passage to itself.")
        self.passages.add(other_cell.index)

    def unlink_all(self):
        """Forgets every passage recorded on this cell."""
        self.passages.clear()

    def has_passages(self) -> bool:
        """Checks if at least one passage was recorded (the 'visited' marker)."""
        return bool(self.passages)

    def is_linked_to(self, other_cell: Optional["Cell"]) -> bool:
        """Checks if this cell has a passage to another cell."""
        if other_cell is None:
            return False
        return any(self._arena[i].coords == other_cell.coords for i in self.passages)

    def linked_cells(self) -> List["Cell"]:
        """Returns the cells this cell has passages to, in arena order."""
        return [self._arena[i] for i in sorted(self.passages)]

    def neighbour(self, direction: str) -> Optional["Cell"]:
        """Returns the adjacent cell in a direction, or None at the grid edge."""
        idx = self.neighbour_ids[direction]
        return None if idx is None else self._arena[idx]

    @property
    def top(self) -> Optional["Cell"]:
        return self.neighbour(const.DIR_TOP)

    @property
    def bottom(self) -> Optional["Cell"]:
        return self.neighbour(const.DIR_BOTTOM)

    @property
    def left(self) -> Optional["Cell"]:
        return self.neighbour(const.DIR_LEFT)

    @property
    def right(self) -> Optional["Cell"]:
        return self.neighbour(const.DIR_RIGHT)

    def neighbours(self) -> List["Cell"]:
        """Gets the present neighbours, ordered top, bottom, left, right."""
        return [
            self._arena[idx]
            for idx in (self.neighbour_ids[d] for d in const.DIRECTIONS)
            if idx is not None
        ]

    def __repr__(self) -> str:
        return f"Cell({self.id})"

    def __hash__(self):
        return hash(self.coords)

    def __eq__(self, other):
        return isinstance(other, Cell) and self.coords == other.coords


class Grid:
    """
    Represents a rectangular grid of cells, indexed cells[row][col].
    The grid owns a flat arena of cells; cells[row] hold the same objects.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._arena: List[Cell] = []
        self.cells: List[List[Cell]] = []

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        """Allocates and initializes a grid in one step."""
        grid = cls(width, height)
        grid.init_grid()
        return grid

    def init_grid(self):
        """Populates the grid with cells and wires their static adjacency."""
        self._validate_dimensions()
        print(f"--- Initializing Grid ({self.width}x{self.height}) ---")
        self._create_cells()
        self._link_neighbours()
        print(f"--- Grid Initialized: {self.size()} cells ---")

    def _validate_dimensions(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDimensionsError(
                    f"Grid {name} must be an integer, got {value!r}."
                )
            if value <= 0:
                raise InvalidDimensionsError(
                    f"Grid {name} must be positive, got {value}."
                )

    def _create_cells(self):
        """Instantiates all Cell objects in row-major order."""
        # Fresh arena on every call
        self._arena = []
        for row in range(self.height):
            for col in range(self.width):
                self._arena.append(Cell(row, col, len(self._arena), self._arena))
        self.cells = [
            self._arena[row * self.width : (row + 1) * self.width]
            for row in range(self.height)
        ]

    def _link_neighbours(self):
        """Determines and sets the four neighbour slots of every cell."""
        link_count = 0
        for cell in self._arena:
            row, col = cell.coords
            cell.neighbour_ids[const.DIR_TOP] = self._index_of(row - 1, col)
            cell.neighbour_ids[const.DIR_BOTTOM] = self._index_of(row + 1, col)
            cell.neighbour_ids[const.DIR_LEFT] = self._index_of(row, col - 1)
            cell.neighbour_ids[const.DIR_RIGHT] = self._index_of(row, col + 1)
            link_count += sum(1 for i in cell.neighbour_ids.values() if i is not None)

        # Each adjacency is seen from both of its cells
        print(f"  Neighbour linking complete. {link_count // 2} adjacencies.")

    def _index_of(self, row: int, col: int) -> Optional[int]:
        # Rows are bounded by height, columns by width
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        return None

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Safely retrieves a cell by row and column, None when out of bounds."""
        idx = self._index_of(row, col)
        if idx is None or idx >= len(self._arena):
            return None
        return self._arena[idx]

    def random_cell(self, rng: Optional[random.Random] = None) -> Cell:
        """Returns a uniformly chosen cell from the grid.

        Without an injected ``rng`` every call draws from its own fresh
        random source.
        """
        if not self.width or not self.height:
            raise InvalidDimensionsError(
                f"Cannot select a random cell from a {self.width}x{self.height} grid."
            )
        if not self._arena:
            raise RuntimeError("Grid is not initialized; call init_grid() first.")
        rng = rng if rng is not None else random.Random()
        row = rng.randrange(self.height)
        col = rng.randrange(self.width)
        return self.cells[row][col]

    def clear_passages(self):
        """Removes every carved passage, keeping the neighbour wiring."""
        for cell in self._arena:
            cell.unlink_all()

    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return len(self._arena)

    def get_all_cells(self) -> Iterator[Cell]:
        """Returns an iterator over all cells in row-major order."""
        yield from self._arena

    def each_row(self) -> Iterator[List[Cell]]:
        """Returns an iterator over the rows, top to bottom."""
        yield from self.cells

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
