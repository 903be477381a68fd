import heapq
import itertools
import logging
from collections import deque

from grid import InvalidCoordinatesError, reset_search_state

logger = logging.getLogger(__name__)


def manhattan(a, b):
    """Manhattan distance between two nodes (admissible on a 4-connected unit-cost grid)."""
    return abs(a.row - b.row) + abs(a.col - b.col)


def reconstruct_path(source, target):
    """Walks previous_node links back from target and returns the nodes source -> target.

    Returns an empty list when target was never reached.
    """
    if target is not source and target.previous_node is None:
        return []
    path = [target]
    current = target
    while current.previous_node is not None:
        current = current.previous_node
        path.append(current)
    path.reverse()
    return path


# ============================
# Frontiers
# ============================
# Every frontier holds (node, parent) entries. The parent is committed as the
# node's previous_node only when the node is popped and finalized.
# reverse_push makes the search push neighbours last-to-first so that a LIFO
# frontier still expands them in up, down, left, right order.

class FifoFrontier:
    """First in, first out (breadth-first)."""
    reverse_push = False

    def __init__(self):
        self._queue = deque()

    def push(self, node, parent):
        self._queue.append((node, parent))

    def pop(self):
        return self._queue.popleft()

    def __len__(self):
        return len(self._queue)


class LifoFrontier:
    """Last in, first out (depth-first)."""
    reverse_push = True

    def __init__(self):
        self._stack = []

    def push(self, node, parent):
        self._stack.append((node, parent))

    def pop(self):
        return self._stack.pop()

    def __len__(self):
        return len(self._stack)


class PriorityFrontier:
    """Min-heap keyed by key(node) at push time; equal keys pop in insertion order."""
    reverse_push = False

    def __init__(self, key):
        self._key = key
        self._heap = []
        self._counter = itertools.count()

    def push(self, node, parent):
        heapq.heappush(self._heap, (self._key(node), next(self._counter), node, parent))

    def pop(self):
        _key, _cnt, node, parent = heapq.heappop(self._heap)
        return node, parent

    def __len__(self):
        return len(self._heap)


# ============================
# Shared expansion loop
# ============================

def resolve_endpoints(grid, source, target):
    """Validate and resolve the endpoints of a search, failing fast on bad input."""
    source = grid.node(source)
    target = grid.node(target)
    if source.is_wall:
        raise InvalidCoordinatesError(f"Source {source!r} is a wall")
    return source, target


def run_search(grid, source, target, frontier, relax, name="search", init=None):
    """Generic best-first style search shared by every strategy.

    Args:
        grid: Grid to search; its transient search state is reset first
        source: start Node or (row, col)
        target: finish Node or (row, col)
        frontier: empty frontier deciding the pop discipline
        relax: relax(node, neighbor) -> bool, updates neighbor's scores and returns
            True when neighbor should be pushed with node as its parent
        name: algorithm name, used for logging only
        init: optional init(source, target) called after the reset to seed source scores

    Returns:
        (visited_order, shortest_path) lists of nodes
    """
    source, target = resolve_endpoints(grid, source, target)
    reset_search_state(grid)
    source.distance = 0
    if init is not None:
        init(source, target)

    visited_order = []
    frontier.push(source, None)
    while frontier:
        node, parent = frontier.pop()
        if node.is_visited:
            continue
        node.is_visited = True
        node.previous_node = parent
        visited_order.append(node)

        if node is target:
            break

        neighbors = list(grid.neighbors(node))
        if frontier.reverse_push:
            neighbors.reverse()
        for neighbor in neighbors:
            if neighbor.is_visited:
                continue
            if relax(node, neighbor):
                frontier.push(neighbor, node)

    shortest_path = reconstruct_path(source, target) if target.is_visited else []
    logger.debug("%s: visited %d nodes, path length %d", name, len(visited_order), len(shortest_path))
    return visited_order, shortest_path
