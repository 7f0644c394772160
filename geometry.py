# geometry.py
from typing import List, Tuple, Union

# Import from other project modules
from grid_core import Grid

Number = Union[int, float]
WallRect = Tuple[Number, Number, Number, Number]  # (x, y, width, height)


def image_extent(count: int, cell_size: Number, wall_thickness: Number) -> Number:
    """Length covered by ``count`` cells with a wall before, between and after them."""
    return count * cell_size + (count + 1) * wall_thickness


def maze_extent(grid: Grid, cell_size: Number, wall_thickness: Number) -> Tuple[Number, Number]:
    """Returns (width, height) of the drawn maze in the same units as cell_size."""
    return (
        image_extent(grid.width, cell_size, wall_thickness),
        image_extent(grid.height, cell_size, wall_thickness),
    )


def extract_wall_rects(
    grid: Grid, cell_size: Number, wall_thickness: Number
) -> List[WallRect]:
    """
    Extracts the wall rectangles of a finished maze, top-left origin, x to
    the right and y downwards. Outer walls are always present; an interior
    wall is omitted where the two cells share a passage.

    Each cell emits its bottom and right walls; top and left walls only come
    from the first row and column, so no boundary is emitted twice.
    """
    pitch = cell_size + wall_thickness
    rects: List[WallRect] = []

    def horizontal(x1: Number, x2: Number, y: Number):
        rects.append((x1, y, (x2 - x1) + wall_thickness, wall_thickness))

    def vertical(x: Number, y1: Number, y2: Number):
        rects.append((x, y1, wall_thickness, (y2 - y1) + wall_thickness))

    for cell in grid.get_all_cells():
        x1 = cell.col * pitch
        y1 = cell.row * pitch
        x2 = (cell.col + 1) * pitch
        y2 = (cell.row + 1) * pitch

        if cell.top is None:
            horizontal(x1, x2, y1)
        if cell.left is None:
            vertical(x1, y1, y2)
        if not cell.is_linked_to(cell.bottom):
            horizontal(x1, x2, y2)
        if not cell.is_linked_to(cell.right):
            vertical(x2, y1, y2)

    return rects


def cell_center(cell_row: int, cell_col: int, cell_size: Number, wall_thickness: Number) -> Tuple[float, float]:
    """Centre (x, y) of a cell body in drawing units."""
    pitch = cell_size + wall_thickness
    return (
        cell_col * pitch + wall_thickness + cell_size / 2.0,
        cell_row * pitch + wall_thickness + cell_size / 2.0,
    )
