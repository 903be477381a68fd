"""
Unit tests for maze generation.
"""

import logging

import pytest

import constants
from grid import create_grid, toggle_wall
from maze import connect_endpoints, generate_maze, is_reachable
from strategies import run_bfs


@pytest.fixture
def board():
    return create_grid(20, 20, (2, 2), (18, 17))


class TestConnectivity:
    """Every generated maze must be solvable."""

    @pytest.mark.parametrize("method", constants.ENUM_MAZE_METHODS)
    def test_solvable_across_seeds(self, board, method):
        """BFS finds a path on 100+ seeded mazes."""
        for seed in range(120):
            maze = generate_maze(board, 20, 20, density=0.4, seed=seed, method=method)
            _, path = run_bfs(maze, maze.start, maze.finish)
            assert path, f"seed {seed} produced an unsolvable {method} maze"

    @pytest.mark.parametrize("method", constants.ENUM_MAZE_METHODS)
    def test_endpoints_never_walls(self, board, method):
        """Start and finish stay open and keep their positions."""
        for seed in range(20):
            maze = generate_maze(board, 20, 20, seed=seed, method=method)
            assert maze.start.position == (2, 2)
            assert maze.finish.position == (18, 17)
            assert not maze.start.is_wall
            assert not maze.finish.is_wall

    def test_dense_layout_is_repaired(self, caplog):
        """When no attempt connects, the last layout is patched instead of returned broken."""
        grid = create_grid(10, 10, (0, 0), (9, 9))
        with caplog.at_level(logging.DEBUG, logger="maze"):
            maze = generate_maze(grid, 10, 10, density=0.97, seed=3)
        assert is_reachable(maze)
        assert any("attempt" in record.getMessage() for record in caplog.records)

    def test_connect_endpoints_removes_blocking_walls(self):
        """Repair clears exactly the walls on the shortest route out."""
        grid = create_grid(3, 3, (0, 0), (2, 2))
        toggle_wall(grid, 1, 2)
        toggle_wall(grid, 2, 1)
        assert not is_reachable(grid)
        removed = connect_endpoints(grid)
        assert len(removed) == 1
        assert is_reachable(grid)

    def test_connect_endpoints_noop_when_connected(self):
        """A connected board is left alone."""
        grid = create_grid(3, 3, (0, 0), (2, 2))
        assert connect_endpoints(grid) == []


class TestLayout:
    """Test determinism, density and what is carried over."""

    @pytest.mark.parametrize("method", constants.ENUM_MAZE_METHODS)
    def test_same_seed_same_maze(self, board, method):
        """A fixed seed reproduces the maze exactly."""
        first = generate_maze(board, 20, 20, seed=42, method=method)
        second = generate_maze(board, 20, 20, seed=42, method=method)
        assert first.walls() == second.walls()

    def test_different_seeds_differ(self, board):
        """Different seeds give different layouts."""
        assert generate_maze(board, 20, 20, seed=1).walls() != generate_maze(board, 20, 20, seed=2).walls()

    def test_density_is_respected(self, board):
        """Wall share stays near the requested density."""
        maze = generate_maze(board, 20, 20, density=0.3, seed=11)
        share = len(maze.walls()) / (20 * 20 - 2)
        assert 0.15 < share < 0.45

    def test_zero_density_is_open(self, board):
        """Density zero leaves no walls."""
        assert generate_maze(board, 20, 20, density=0.0, seed=0).walls() == []

    def test_backtracker_carves_corridors(self, board):
        """Backtracker mazes are mostly wall with one-cell corridors."""
        maze = generate_maze(board, 20, 20, seed=5, method="backtracker")
        walls = len(maze.walls())
        assert 0.3 * 400 < walls < 0.8 * 400
        # Lattice cells sharing the start's parity are all carved
        for node in maze:
            if (node.row - 2) % 2 == 0 and (node.col - 2) % 2 == 0:
                assert not node.is_wall

    def test_previous_state_discarded(self, board):
        """Old walls and search state do not survive, and the input board is untouched."""
        toggle_wall(board, 0, 0)
        run_bfs(board, board.start, board.finish)
        maze = generate_maze(board, 20, 20, density=0.0, seed=0)
        assert maze is not board
        assert maze.walls() == []
        assert not any(n.is_visited for n in maze)
        assert board.walls() == [(0, 0)]

    def test_module_random_untouched(self, board):
        """Seeded generation does not consume the global random stream."""
        import random
        random.seed(99)
        expected = random.random()
        random.seed(99)
        generate_maze(board, 20, 20, seed=1)
        assert random.random() == expected


class TestValidation:
    """Test argument checks."""

    def test_size_mismatch_raises(self, board):
        with pytest.raises(ValueError):
            generate_maze(board, 10, 20)

    @pytest.mark.parametrize("density", [-0.1, 1.0, 1.5])
    def test_bad_density_raises(self, board, density):
        with pytest.raises(ValueError):
            generate_maze(board, 20, 20, density=density)

    def test_unknown_method_raises(self, board):
        with pytest.raises(ValueError, match="Unknown maze method"):
            generate_maze(board, 20, 20, method="prims")
