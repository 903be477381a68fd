import constants
from strategies.common import PriorityFrontier, run_search


def run_dijkstra(grid, source, target, edge_weight=constants.EDGE_WEIGHT):
    """
    Dijkstra's algorithm - uninformed shortest path search.
    Args:
        grid: Grid to search
        source: start Node or (row, col)
        target: finish Node or (row, col)
        edge_weight: cost of a single move between neighbouring cells
    Returns:
        (visited_order, shortest_path)
    """
    def relax(node, neighbor):
        new_cost = node.distance + edge_weight
        # Only push if we found a better path
        if new_cost < neighbor.distance:
            neighbor.distance = new_cost
            return True
        return False

    frontier = PriorityFrontier(key=lambda n: n.distance)
    return run_search(grid, source, target, frontier, relax, name="dijkstra")
