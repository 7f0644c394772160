# mesh_builder.py
import numpy as np
import trimesh
import trimesh.creation
import trimesh.transformations
import trimesh.util
from typing import List

# Import from other project modules
import constants as const
from grid_core import Grid
from geometry import WallRect, extract_wall_rects, maze_extent


def _box_from_rect(rect: WallRect, z_bottom: float, height: float) -> trimesh.Trimesh:
    """Creates an axis-aligned box over a 2D rectangle, spanning z_bottom..z_bottom+height."""
    x, y, w, h = rect
    center = [x + w / 2.0, y + h / 2.0, z_bottom + height / 2.0]
    return trimesh.creation.box(
        extents=[w, h, height],
        transform=trimesh.transformations.translation_matrix(center),
    )


def build_2d_maze_mesh(
    grid: Grid,
    cell_size: float = const.MAZE_2D_CELL_SIZE,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """
    Builds a printable mesh of the maze: one box per wall on top of a solid
    rectangular base plate. The base top sits at z=0 and walls rise from it.
    Wall layout matches the raster image (y grows with the row index).
    """
    if cell_size <= 0 or wall_thickness <= 0 or wall_height <= 0:
        raise ValueError("Cell size, wall thickness and wall height must be positive.")
    if base_height < 0:
        raise ValueError("Base height must not be negative.")

    print(f"\n--- Building 2D Maze Mesh ({grid.width}x{grid.height}) ---")
    print(f"    Wall H={wall_height:.2f}, Base H={base_height:.2f}, Total H={wall_height + base_height:.2f}")

    wall_rects = extract_wall_rects(grid, cell_size, wall_thickness)
    wall_meshes: List[trimesh.Trimesh] = [
        _box_from_rect(rect, 0.0, wall_height) for rect in wall_rects
    ]
    print(f"  Extruded {len(wall_meshes)} wall boxes.")

    if base_height > 0:
        width, depth = maze_extent(grid, cell_size, wall_thickness)
        print(f"  Creating rectangular base {width:.2f}x{depth:.2f}...")
        wall_meshes.append(_box_from_rect((0.0, 0.0, width, depth), -base_height, base_height))
    else:
        print("  Skipping base creation.")

    final_mesh = trimesh.util.concatenate(wall_meshes)
    final_mesh.merge_vertices()
    print(f"    Combined Walls & Base: {len(final_mesh.vertices)}V, {len(final_mesh.faces)}F")
    if not np.all(np.isfinite(final_mesh.vertices)):
        raise RuntimeError("Maze mesh contains non-finite vertices.")
    return final_mesh


def create_2d_maze_stl(
    grid: Grid,
    output_filename: str,
    cell_size: float = const.MAZE_2D_CELL_SIZE,
    wall_thickness: float = const.MAZE_2D_WALL_THICKNESS,
    wall_height: float = const.MAZE_2D_WALL_HEIGHT,
    base_height: float = const.MAZE_2D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """Builds the 2D maze mesh and exports it as STL to ``output_filename``."""
    mesh = build_2d_maze_mesh(grid, cell_size, wall_thickness, wall_height, base_height)
    print(f"  Exporting final 2D maze to {output_filename}...")
    mesh.export(output_filename, file_type="stl")
    print("  Export complete.")
    return mesh
