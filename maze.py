import logging
import random
from collections import deque

import constants
from grid import DIRECTIONS, create_grid

logger = logging.getLogger(__name__)


def _flood(grid, source):
    """Positions reachable from source through non-wall cells."""
    seen = {source.position}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor in grid.neighbors(node):
            if neighbor.position not in seen:
                seen.add(neighbor.position)
                queue.append(neighbor)
    return seen


def is_reachable(grid, source=None, target=None):
    """True when a wall-free walk joins source and target (defaults to the grid's endpoints)."""
    source = grid.node(source if source is not None else grid.start)
    target = grid.node(target if target is not None else grid.finish)
    if source.is_wall or target.is_wall:
        return False
    return target.position in _flood(grid, source)


def connect_endpoints(grid):
    """Knock out the fewest walls needed to join the finish to the start's region.

    Searches outward from the finish ignoring walls until it meets a cell the
    start can already reach, then clears every wall on that route.

    Returns:
        list: positions of the walls that were removed
    """
    reachable = _flood(grid, grid.start)
    finish = grid.finish
    if finish.position in reachable:
        return []

    came_from = {}
    queue = deque([finish.position])
    seen = {finish.position}
    meeting = None
    while queue:
        row, col = queue.popleft()
        if (row, col) in reachable:
            meeting = (row, col)
            break
        for d_row, d_col in DIRECTIONS:
            nxt = (row + d_row, col + d_col)
            if grid.in_bounds(*nxt) and nxt not in seen:
                seen.add(nxt)
                came_from[nxt] = (row, col)
                queue.append(nxt)

    removed = []
    current = meeting
    while current is not None:
        node = grid[current[0]][current[1]]
        if node.is_wall:
            node.is_wall = False
            removed.append(current)
        current = came_from.get(current)
    return removed


def _scatter_walls(grid, rng, density):
    for node in grid:
        if node.is_start or node.is_finish:
            continue
        node.is_wall = rng.random() < density


def _carve_backtracker(grid, rng):
    """Recursive-backtracker carving on the lattice of cells sharing the start's parity.

    Every non-endpoint cell starts as a wall. Lattice cells two steps apart are
    joined by opening the cell between them, which gives one-cell-wide corridors
    forming a spanning tree over the lattice.
    """
    for node in grid:
        node.is_wall = not (node.is_start or node.is_finish)

    start = grid.start
    start.is_wall = False
    visited = {start.position}
    stack = [start.position]
    while stack:
        row, col = stack[-1]
        neighbors = []
        for d_row, d_col in DIRECTIONS:
            nxt = (row + 2 * d_row, col + 2 * d_col)
            if grid.in_bounds(*nxt) and nxt not in visited:
                neighbors.append((nxt, (row + d_row, col + d_col)))
        if neighbors:
            (n_row, n_col), (w_row, w_col) = rng.choice(neighbors)
            grid[w_row][w_col].is_wall = False
            grid[n_row][n_col].is_wall = False
            visited.add((n_row, n_col))
            stack.append((n_row, n_col))
        else:
            stack.pop()


def generate_maze(grid, rows, cols, density=constants.DEFAULT_WALL_DENSITY, seed=None, method="scatter"):
    """Generates a new wall layout that always joins the start and finish.

    The input grid is left untouched; a fresh grid with the same endpoints is
    returned, so previous walls and search state are discarded.

    Args:
        grid (Grid): current board, used for its shape and endpoints
        rows (int): number of rows, must match grid
        cols (int): number of columns, must match grid
        density (float): fraction of non start/finish cells made walls ("scatter" only)
        seed: seed for a private random.Random, same seed gives the same maze
        method (str): "scatter" or "backtracker"

    Returns:
        Grid: the new board
    """
    if (rows, cols) != (grid.rows, grid.cols):
        raise ValueError(f"Maze size {rows}x{cols} does not match the {grid.rows}x{grid.cols} grid")
    if not 0 <= density < 1:
        raise ValueError(f"Wall density must be in [0, 1), got {density}")
    if method not in constants.ENUM_MAZE_METHODS:
        raise ValueError(f"Unknown maze method: {method}. Known methods: {', '.join(constants.ENUM_MAZE_METHODS)}")

    rng = random.Random(seed)
    maze = create_grid(rows, cols, grid.start.position, grid.finish.position)

    if method == "backtracker":
        _carve_backtracker(maze, rng)
        if not is_reachable(maze):
            removed = connect_endpoints(maze)
            logger.debug("Backtracker maze joined finish by removing %d walls", len(removed))
        return maze

    for attempt in range(1, constants.MAX_MAZE_ATTEMPTS + 1):
        _scatter_walls(maze, rng, density)
        if is_reachable(maze):
            logger.debug("Maze connected on attempt %d", attempt)
            return maze
        logger.debug("Maze attempt %d left the finish unreachable, retrying", attempt)

    removed = connect_endpoints(maze)
    logger.warning(
        "No connected maze after %d attempts at density %.2f, removed %d walls",
        constants.MAX_MAZE_ATTEMPTS, density, len(removed),
    )
    return maze
