from strategies.common import FifoFrontier, run_search


def run_bfs(grid, source, target):
    """Breadth-First Search over the grid.

    Each node is enqueued once, when first discovered, so nodes are finalized in
    non-decreasing distance from source and the path found has the fewest moves.

    Args:
        grid: Grid to search
        source: start Node or (row, col)
        target: finish Node or (row, col)
    Returns:
        (visited_order, shortest_path)
    """
    def relax(node, neighbor):
        # Only the first discovery counts; later ones can never be shorter
        if neighbor.distance != float('inf'):
            return False
        neighbor.distance = node.distance + 1
        return True

    return run_search(grid, source, target, FifoFrontier(), relax, name="bfs")
