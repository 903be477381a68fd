import constants
from grid import Cost
from strategies.common import PriorityFrontier, manhattan, run_search


def run_astar(grid, source, target, edge_weight=constants.EDGE_WEIGHT):
    """
    Performs A* search from source to target using Manhattan distance as heuristic.

    Frontier priority is cost.f, ties go to the lower cost.h and then to the
    order in which nodes were relaxed.
    Args:
        grid: Grid to search
        source: start Node or (row, col)
        target: finish Node or (row, col)
        edge_weight: cost of a single move between neighbouring cells
    Returns:
        (visited_order, shortest_path)
    """
    target_node = grid.node(target)

    def init(start, _target):
        h = manhattan(start, target_node) * edge_weight
        start.cost = Cost(f=h, g=0, h=h)

    def relax(node, neighbor):
        tentative_g = node.cost.g + edge_weight
        if tentative_g < neighbor.cost.g:
            h = manhattan(neighbor, target_node) * edge_weight
            neighbor.cost = Cost(f=tentative_g + h, g=tentative_g, h=h)
            neighbor.distance = tentative_g
            return True
        return False

    frontier = PriorityFrontier(key=lambda n: (n.cost.f, n.cost.h))
    return run_search(grid, source, target, frontier, relax, name="astar", init=init)
