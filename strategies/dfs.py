from strategies.common import LifoFrontier, run_search


def run_dfs(grid, source, target):
    """Depth-First Search: returns (visited_order, path).

    The path is whatever branch of the discovery tree reached target first, so
    it is not necessarily the shortest one.
    """
    def relax(node, neighbor):
        # Re-pushing a node already on the stack is fine, the newest entry wins
        return True

    return run_search(grid, source, target, LifoFrontier(), relax, name="dfs")
