import math

import constants

INF = math.inf

# Neighbour offsets in expansion order: up, down, left, right
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class GridError(Exception):
    """Base class for grid and search precondition failures."""


class InvalidCoordinatesError(GridError, ValueError):
    """Raised when a position is outside the grid or cannot hold the requested role."""


class Cost:
    """A* score triple. g = cost from source, h = heuristic to target, f = g + h."""
    def __init__(self, f=INF, g=INF, h=INF):
        self.f = f
        self.g = g
        self.h = h

    def __repr__(self):
        return f"Cost(f={self.f}, g={self.g}, h={self.h})"

    def __eq__(self, other):
        if not isinstance(other, Cost):
            return NotImplemented
        return (self.f, self.g, self.h) == (other.f, other.g, other.h)


class Node:
    """A single cell of the board.

    row/col never change once the node is built. The durable flags
    (is_start, is_finish, is_wall) describe the board; the rest is transient
    search state owned by whichever search run is in progress.
    """
    def __init__(self, row, col, is_start=False, is_finish=False, is_wall=False):
        self.row = int(row)
        self.col = int(col)
        self.is_start = is_start
        self.is_finish = is_finish
        self.is_wall = is_wall
        self.is_visited = False
        self.previous_node = None   # back-reference into the discovery tree, never owning
        self.distance = INF
        self.cost = Cost()

    @property
    def position(self):
        return (self.row, self.col)

    def reset(self):
        """Drop all transient search state, keeping walls and endpoint flags."""
        self.is_visited = False
        self.previous_node = None
        self.distance = INF
        self.cost = Cost()

    def __repr__(self):
        flags = ""
        if self.is_start:
            flags += " start"
        if self.is_finish:
            flags += " finish"
        if self.is_wall:
            flags += " wall"
        return f"Node ({self.row},{self.col}){flags}"


class Grid:
    """Row-major rectangle of nodes; grid[row][col] addresses a node."""
    def __init__(self, rows, cols):
        self.rows = rows
        self.cols = cols
        self.nodes = [[Node(row, col) for col in range(cols)] for row in range(rows)]

    def __getitem__(self, row):
        return self.nodes[row]

    def __len__(self):
        return self.rows

    def __iter__(self):
        """Iterate over every node in row-major order."""
        for row in self.nodes:
            yield from row

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, pos):
        """Resolve a Node of this grid or a (row, col) pair to the node held by this grid.

        Args:
            pos: Node or (row, col) tuple

        Returns:
            Node: the node stored at that position

        Raises:
            InvalidCoordinatesError: position is out of bounds or the node belongs to another grid
        """
        if isinstance(pos, Node):
            row, col = pos.row, pos.col
        else:
            try:
                row, col = (int(v) for v in pos)
            except (TypeError, ValueError) as e:
                raise InvalidCoordinatesError(f"Not a (row, col) position: {pos!r}") from e
        if not self.in_bounds(row, col):
            raise InvalidCoordinatesError(f"({row},{col}) is outside the {self.rows}x{self.cols} grid")
        found = self.nodes[row][col]
        if isinstance(pos, Node) and pos is not found:
            raise InvalidCoordinatesError(f"{pos!r} does not belong to this grid")
        return found

    @property
    def start(self):
        for node in self:
            if node.is_start:
                return node
        return None

    @property
    def finish(self):
        for node in self:
            if node.is_finish:
                return node
        return None

    def neighbors(self, node):
        """Yield the non-wall neighbours of node in up, down, left, right order."""
        for d_row, d_col in DIRECTIONS:
            row, col = node.row + d_row, node.col + d_col
            if self.in_bounds(row, col):
                neighbor = self.nodes[row][col]
                if not neighbor.is_wall:
                    yield neighbor

    def walls(self):
        """Positions of every wall cell, row-major."""
        return [node.position for node in self if node.is_wall]

    def __repr__(self):
        return f"Grid {self.rows}x{self.cols}"


def _check_endpoints(rows, cols, source, target):
    if rows <= 0 or cols <= 0:
        raise InvalidCoordinatesError(f"Grid dimensions must be positive, got {rows}x{cols}")
    for label, (row, col) in (("source", source), ("target", target)):
        if not (0 <= row < rows and 0 <= col < cols):
            raise InvalidCoordinatesError(f"{label} ({row},{col}) is outside the {rows}x{cols} grid")
    if tuple(source) == tuple(target):
        raise InvalidCoordinatesError(f"source and target must differ, both are {tuple(source)}")


def create_grid(rows=constants.DEFAULT_ROWS, cols=constants.DEFAULT_COLS, source_pos=None, target_pos=None):
    """Build a fresh board with no walls and the endpoints flagged.

    Args:
        rows (int): number of rows
        cols (int): number of columns
        source_pos (tuple): (row, col) of the start node, defaults to constants.DEFAULT_START
        target_pos (tuple): (row, col) of the finish node, defaults to FINISH_OFFSET in from the far corner

    Returns:
        Grid: the new board
    """
    if source_pos is None:
        source_pos = constants.DEFAULT_START
    if target_pos is None:
        target_pos = (rows - constants.FINISH_OFFSET, cols - constants.FINISH_OFFSET)
    source_pos = tuple(int(v) for v in source_pos)
    target_pos = tuple(int(v) for v in target_pos)
    _check_endpoints(rows, cols, source_pos, target_pos)

    grid = Grid(rows, cols)
    grid[source_pos[0]][source_pos[1]].is_start = True
    grid[target_pos[0]][target_pos[1]].is_finish = True
    return grid


def reset_search_state(grid):
    """Reset every node's transient search fields. Idempotent."""
    for node in grid:
        node.reset()


# The board's "Clear Path" action is exactly a search-state reset
clear_path = reset_search_state


def clear_board(grid):
    """Fresh board of the same shape and endpoints, without walls."""
    return create_grid(grid.rows, grid.cols, grid.start.position, grid.finish.position)


def clone_grid(grid):
    """Independent copy of the board's durable state; no node is shared."""
    copy = Grid(grid.rows, grid.cols)
    for node in grid:
        twin = copy[node.row][node.col]
        twin.is_start = node.is_start
        twin.is_finish = node.is_finish
        twin.is_wall = node.is_wall
    return copy


def _move_endpoint(grid, row, col, flag, other_flag):
    target = grid.node((row, col))
    if target.is_wall:
        raise InvalidCoordinatesError(f"Cannot place {flag} on wall ({row},{col})")
    if getattr(target, other_flag):
        raise InvalidCoordinatesError(f"({row},{col}) already holds {other_flag}")
    for node in grid:
        if getattr(node, flag):
            setattr(node, flag, False)
    setattr(target, flag, True)
    return target


def set_start(grid, row, col):
    """Move the start flag to (row, col) and return the new start node."""
    return _move_endpoint(grid, row, col, "is_start", "is_finish")


def set_finish(grid, row, col):
    """Move the finish flag to (row, col) and return the new finish node."""
    return _move_endpoint(grid, row, col, "is_finish", "is_start")


def toggle_wall(grid, row, col):
    """Flip the wall flag at (row, col). Returns the new wall state."""
    node = grid.node((row, col))
    if node.is_start or node.is_finish:
        raise InvalidCoordinatesError(f"Cannot place a wall on endpoint ({row},{col})")
    node.is_wall = not node.is_wall
    return node.is_wall
