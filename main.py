# main.py
import argparse
import os
import sys
import time

# Import project modules
import constants as const
from grid_core import InvalidDimensionsError
from maze_gen import Algo, UnsupportedAlgorithmError
from mazegen import MazeGenerator
from utils import is_perfect_maze
from visualization import visualize_maze_links, visualize_maze_solution


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze on a rectangular grid.")
    parser.add_argument("--width", type=int, default=const.DEFAULT_WIDTH, help="Number of columns")
    parser.add_argument("--height", type=int, default=const.DEFAULT_HEIGHT, help="Number of rows")
    parser.add_argument(
        "--algo",
        default=Algo.RECURSIVE_BACKTRACKING.value,
        help=f"One of: {', '.join(a.value for a in Algo)}",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible maze")
    parser.add_argument("--cell-size", type=int, default=const.DEFAULT_CELL_SIZE)
    parser.add_argument("--wall-thickness", type=int, default=const.DEFAULT_WALL_THICKNESS)
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--output", default="maze", help="Base file name, without suffix")
    parser.add_argument("--stl", action="store_true", help="Also export a printable STL")
    parser.add_argument("--solution", action="store_true", help="Also plot the solution path")
    parser.add_argument("--links", action="store_true", help="Also plot the passage graph")
    parser.add_argument("--console", action="store_true", help="Print the maze as ASCII")
    return parser.parse_args(argv)


def run_generation(args: argparse.Namespace) -> int:
    start_time = time.time()

    print("\n--- Configuration ---")
    print(f"  Size: {args.width}x{args.height}, Algorithm: {args.algo}, Seed: {args.seed}")
    print(f"  Cell Size: {args.cell_size}, Wall Thickness: {args.wall_thickness}")

    try:
        algo = Algo.from_name(args.algo)
        generator = MazeGenerator(
            args.width,
            args.height,
            seed=args.seed,
            cell_size=args.cell_size,
            wall_thickness=args.wall_thickness,
        )
        grid = generator.build_with(algo)
    except (InvalidDimensionsError, UnsupportedAlgorithmError, ValueError) as e:
        print(f"ERROR: {e}")
        return 2

    if not is_perfect_maze(grid):
        print("WARNING: Generated maze is not a spanning tree!")

    if args.console:
        generator.print_to_console()

    os.makedirs(args.output_dir, exist_ok=True)
    base = os.path.join(args.output_dir, args.output)
    generator.save_as_img(base)
    if args.stl:
        generator.save_as_stl(base)
    if args.solution:
        visualize_maze_solution(
            grid,
            filename=f"{base}_solution{const.IMAGE_FILE_SUFFIX}",
            cell_size=generator.cell_size,
            wall_thickness=generator.wall_thickness,
        )
    if args.links:
        visualize_maze_links(grid, filename=f"{base}_links{const.IMAGE_FILE_SUFFIX}")

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 0


def main(argv=None) -> int:
    return run_generation(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
