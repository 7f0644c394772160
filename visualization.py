# visualization.py
import matplotlib.pyplot as plt
import numpy as np
from collections import deque
from typing import Dict, List, Optional

# Import from other project modules
from grid_core import Grid, Cell
from geometry import cell_center, extract_wall_rects, maze_extent
import constants as const


# --- Pathfinding (Often used with visualization) ---
def find_solution_path(
    grid: Grid, start_cell: Optional[Cell] = None, end_cell: Optional[Cell] = None
) -> Optional[List[Cell]]:
    """
    Finds the shortest path between two cells using Breadth-First Search on passages.
    Defaults to the top-left and bottom-right corners.
    """
    if grid.size() == 0:
        print("ERROR: Grid has no cells, cannot solve.")
        return None
    start_cell = start_cell or grid.get_cell(0, 0)
    end_cell = end_cell or grid.get_cell(grid.height - 1, grid.width - 1)
    print(f"--- Finding path from {start_cell.id} to {end_cell.id} ---")
    if grid.get_cell(*start_cell.coords) is None or grid.get_cell(*end_cell.coords) is None:
        print("ERROR: Invalid start or end cell provided.")
        return None

    # BFS initialization
    queue = deque([start_cell])
    # Keep track of predecessors to reconstruct the path
    predecessor: Dict[str, Optional[Cell]] = {start_cell.id: None}
    path_found = False

    while queue:
        current_cell = queue.popleft()

        if current_cell == end_cell:
            path_found = True
            break

        # Explore linked neighbours
        for neighbour_cell in current_cell.linked_cells():
            if neighbour_cell.id not in predecessor:
                predecessor[neighbour_cell.id] = current_cell
                queue.append(neighbour_cell)

    if not path_found:
        print("  Path not found!")
        return None

    # Reconstruct path
    path_cells: List[Cell] = []
    curr: Optional[Cell] = current_cell
    while curr is not None:
        path_cells.append(curr)
        curr = predecessor[curr.id]
    path_cells.reverse()  # Reverse to get path from start to end

    print(f"  Path length: {len(path_cells)} cells.")
    return path_cells


# --- Console ---
def render_ascii(grid: Grid) -> str:
    """Draws the maze as fixed-width ASCII rows, one text row pair per grid row."""
    lines = [(const.ASCII_CORNER + const.ASCII_BOTTOM_WALL) * grid.width + const.ASCII_CORNER]

    for row in grid.each_row():
        line_one = const.ASCII_RIGHT_WALL
        line_two = const.ASCII_CORNER
        for cell in row:
            line_one += const.ASCII_BODY
            if cell.is_linked_to(cell.right):
                line_one += const.ASCII_RIGHT_PASSAGE
            else:
                line_one += const.ASCII_RIGHT_WALL

            if cell.is_linked_to(cell.bottom):
                line_two += const.ASCII_BOTTOM_PASSAGE
            else:
                line_two += const.ASCII_BOTTOM_WALL
            line_two += const.ASCII_CORNER
        lines.append(line_one)
        lines.append(line_two)

    return "\n".join(lines)


def print_to_console(grid: Grid):
    print(render_ascii(grid))


# --- Raster Image ---
def rasterize_maze(
    grid: Grid,
    cell_size: int = const.DEFAULT_CELL_SIZE,
    wall_thickness: int = const.DEFAULT_WALL_THICKNESS,
) -> np.ndarray:
    """Returns the maze as an (height, width, 3) uint8 RGB array."""
    width, height = maze_extent(grid, cell_size, wall_thickness)
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = const.IMG_BACKGROUND_COLOR

    for x, y, w, h in extract_wall_rects(grid, cell_size, wall_thickness):
        img[y : y + h, x : x + w] = const.IMG_WALL_COLOR
    return img


def save_maze_image(
    grid: Grid,
    filename: str,
    cell_size: int = const.DEFAULT_CELL_SIZE,
    wall_thickness: int = const.DEFAULT_WALL_THICKNESS,
) -> str:
    """Writes the rasterized maze to ``filename`` (format from its suffix) and returns it."""
    print(f"--- Saving Maze Image: {filename} ---")
    img = rasterize_maze(grid, cell_size, wall_thickness)
    plt.imsave(filename, img)
    print(f"  Image {img.shape[1]}x{img.shape[0]} px saved to {filename}")
    return filename


# --- Plots ---
def visualize_maze_links(grid: Grid, filename="maze_links.png"):
    """Visualizes the generated maze passages as lines between cell centres."""
    print(f"--- Generating Maze Links Visualization: {filename} ---")
    fig, ax = plt.subplots(figsize=(8, 8 * grid.height / grid.width))
    drawn = 0
    for cell in grid.get_all_cells():
        for linked_cell in cell.linked_cells():
            if linked_cell.index < cell.index:
                continue  # Drawn from the other side
            ax.plot(
                [cell.col, linked_cell.col],
                [cell.row, linked_cell.row],
                const.VIS_LINK_LINE_STYLE,
                lw=const.VIS_LINK_LINE_LW,
                alpha=const.VIS_LINK_LINE_ALPHA,
            )
            drawn += 1
    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(grid.height - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_axis_off()
    ax.set_title(f"Maze Links ({drawn} Passages)")
    plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Links visualization saved to {filename}")
    return drawn


def visualize_maze_solution(
    grid: Grid,
    filename="maze_solution.png",
    cell_size: int = const.DEFAULT_CELL_SIZE,
    wall_thickness: int = const.DEFAULT_WALL_THICKNESS,
) -> Optional[List[Cell]]:
    """Finds and draws the corner-to-corner solution path over the maze raster."""
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    solution_path = find_solution_path(grid)
    if not solution_path:
        print("  Could not find solution path, cannot visualize.")
        return None

    fig, ax = plt.subplots(figsize=(8, 8 * grid.height / grid.width))
    ax.imshow(rasterize_maze(grid, cell_size, wall_thickness))

    centers = [cell_center(c.row, c.col, cell_size, wall_thickness) for c in solution_path]
    xs = [x for x, _ in centers]
    ys = [y for _, y in centers]
    print(f"  Visualizing solution path ({len(solution_path)} cells)...")
    ax.plot(
        xs,
        ys,
        const.VIS_SOLUTION_LINE_STYLE,
        lw=const.VIS_SOLUTION_LINE_LW,
        alpha=const.VIS_SOLUTION_LINE_ALPHA,
    )
    ax.plot(xs[0], ys[0], const.VIS_ENTRY_MARKER, markersize=const.VIS_MARKER_SIZE, label="Entry")
    ax.plot(xs[-1], ys[-1], const.VIS_EXIT_MARKER, markersize=const.VIS_MARKER_SIZE, label="Exit")
    ax.set_axis_off()
    ax.set_title("Maze Solution Path")
    plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Solution visualization saved to {filename}")
    return solution_path
