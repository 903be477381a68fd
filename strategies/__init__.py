"""Package exposing search strategy implementations."""

from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar

STRATEGIES = {
    "bfs": run_bfs,
    "dfs": run_dfs,
    "dijkstra": run_dijkstra,
    "astar": run_astar,
}


def get_strategy(name):
    """Look up a search function by identifier (bfs, dfs, dijkstra, astar), case insensitive."""
    try:
        return STRATEGIES[str(name).lower()]
    except KeyError:
        raise KeyError(f"Unknown method: {name}. Known methods: {', '.join(STRATEGIES)}") from None


__all__ = ["run_dfs", "run_bfs", "run_dijkstra", "run_astar", "STRATEGIES", "get_strategy"]
