import os

# ============================
# Board defaults
# ============================
DEFAULT_ROWS = 40
DEFAULT_COLS = 40

# Source sits two cells in from the top-left corner, target two cells in from the bottom-right
DEFAULT_START = (2, 2)
FINISH_OFFSET = 2

# ============================
# Maze generation
# ============================
# Fraction of non start/finish cells that become walls in a scattered maze
DEFAULT_WALL_DENSITY = 0.3
# Number of fresh layouts tried before the last one is repaired
MAX_MAZE_ATTEMPTS = 100
ENUM_MAZE_METHODS = ["scatter", "backtracker"]

# ============================
# Search
# ============================
ENUM_ALGORITHMS = ["bfs", "dfs", "dijkstra", "astar"]
EDGE_WEIGHT = 1

# ============================
# Logging
# ============================
LOG_LEVEL = os.environ.get("PATHFINDER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
