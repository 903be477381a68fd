"""
Pytest configuration and shared fixtures.

Every fixture builds a fresh board so tests never share search state.
"""

import pytest

from grid import Grid, create_grid, toggle_wall

ALGORITHMS = ["bfs", "dfs", "dijkstra", "astar"]
OPTIMAL_ALGORITHMS = ["bfs", "dijkstra", "astar"]


def assert_valid_path(grid: Grid, path: list, source, target) -> None:
    """A path starts at source, ends at target, moves one cell at a time and never crosses a wall."""
    assert path[0] is source
    assert path[-1] is target
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1
    assert not any(node.is_wall for node in path)
    assert len({node.position for node in path}) == len(path)


@pytest.fixture
def open_grid() -> Grid:
    """5x5 board, no walls, source (0,0), target (4,4)."""
    return create_grid(5, 5, (0, 0), (4, 4))


@pytest.fixture
def enclosed_grid() -> Grid:
    """3x3 board whose source (0,0) is boxed in by walls at (0,1) and (1,0)."""
    grid = create_grid(3, 3, (0, 0), (2, 2))
    toggle_wall(grid, 0, 1)
    toggle_wall(grid, 1, 0)
    return grid


@pytest.fixture
def row_grid() -> Grid:
    """Single row 1x5 board, source (0,0), target (0,4)."""
    return create_grid(1, 5, (0, 0), (0, 4))


@pytest.fixture
def detour_grid() -> Grid:
    """7x7 board with a wall column forcing paths around its bottom end.

    Column 3 is walled from row 0 to row 5, leaving only row 6 open.
    """
    grid = create_grid(7, 7, (0, 0), (0, 6))
    for row in range(6):
        toggle_wall(grid, row, 3)
    return grid
