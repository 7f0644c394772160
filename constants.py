# --- Grid Structure ---
DEFAULT_WIDTH = 20  # Number of columns
DEFAULT_HEIGHT = 20  # Number of rows

# --- Cell Directions ---
DIR_TOP = "TOP"  # row - 1
DIR_BOTTOM = "BOTTOM"  # row + 1
DIR_LEFT = "LEFT"  # col - 1
DIR_RIGHT = "RIGHT"  # col + 1
# Fixed enumeration order for Cell.neighbours()
DIRECTIONS = (DIR_TOP, DIR_BOTTOM, DIR_LEFT, DIR_RIGHT)

# --- Sidewinder ---
SIDEWINDER_CLOSE_PROBABILITY = 0.5  # Chance to close a run when a top exists

# --- Raster Image ---
DEFAULT_CELL_SIZE = 20  # Pixels per cell body
DEFAULT_WALL_THICKNESS = 2  # Pixels per wall
IMAGE_FILE_SUFFIX = ".png"
IMG_BACKGROUND_COLOR = (240, 240, 240)
IMG_WALL_COLOR = (0, 0, 0)

# --- Console ---
ASCII_CORNER = "+"
ASCII_BODY = "    "
ASCII_RIGHT_PASSAGE = " "
ASCII_RIGHT_WALL = "|"
ASCII_BOTTOM_PASSAGE = "    "
ASCII_BOTTOM_WALL = "----"

# --- 2D STL Export ---
MESH_FILE_SUFFIX = ".stl"
MAZE_2D_CELL_SIZE = 10.0
MAZE_2D_WALL_THICKNESS = 1.0
MAZE_2D_WALL_HEIGHT = 5.0
MAZE_2D_BASE_HEIGHT = MAZE_2D_WALL_HEIGHT / 3.0  # Configurable base height

# --- Visualization ---
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_LINK_LINE_STYLE = "g-"
VIS_LINK_LINE_LW = 1.0
VIS_LINK_LINE_ALPHA = 0.7
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_MARKER_SIZE = 8
VIS_DPI = 150
