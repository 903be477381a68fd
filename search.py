import argparse
import logging
import sys
import time
import tracemalloc

import pandas as pd

import constants
from grid import GridError, clone_grid, create_grid, toggle_wall
from maze import generate_maze
from strategies import STRATEGIES, get_strategy
from util import format_bytes, parse_position, parse_positions

try:
    import psutil  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    psutil = None

logger = logging.getLogger(__name__)


def execute_with_metrics(run_fn, grid, source, target):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - result: the strategy's (visited_order, shortest_path)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage); None if psutil missing
    """
    # Start Python allocation tracking unless someone else already is
    started = not tracemalloc.is_tracing()
    if started:
        tracemalloc.start()
    tracemalloc.reset_peak()
    proc = psutil.Process() if psutil else None
    t0 = time.perf_counter()
    try:
        result = run_fn(grid, source, target)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        if started:
            tracemalloc.stop()
    rss_after = proc.memory_info().rss if proc else None
    return result, dt, peak, rss_after


def compare_strategies(grid, names=None):
    """Run several strategies on independent copies of grid and tabulate the results.

    Args:
        grid: board with start and finish set; it is never searched directly
        names: algorithm identifiers to run, defaults to every known strategy

    Returns:
        pandas DataFrame indexed by algorithm with columns
        visited, path_length, found, runtime_ms, peak_py_mem, rss_after
        (rss_after is None when psutil is not installed)
    """
    if names is None:
        names = list(STRATEGIES)
    rows = []
    for name in names:
        run_fn = get_strategy(name)
        snapshot = clone_grid(grid)
        (visited, path), runtime_s, peak_bytes, rss_after = execute_with_metrics(
            run_fn, snapshot, snapshot.start, snapshot.finish
        )
        rows.append({
            "algorithm": name.lower(),
            "visited": len(visited),
            "path_length": len(path),
            "found": bool(path),
            "runtime_ms": runtime_s * 1000,
            "peak_py_mem": peak_bytes,
            "rss_after": rss_after,
        })
    results_df = pd.DataFrame(rows, columns=["algorithm", "visited", "path_length", "found", "runtime_ms", "peak_py_mem", "rss_after"])
    return results_df.set_index("algorithm")


def build_grid(args):
    """Board described by the parsed command line arguments."""
    start = parse_position(args.start) if args.start else None
    finish = parse_position(args.finish) if args.finish else None
    grid = create_grid(args.rows, args.cols, start, finish)

    if args.maze:
        grid = generate_maze(grid, args.rows, args.cols, density=args.density, seed=args.seed, method=args.maze)
    for row, col in parse_positions(args.walls):
        if not grid.node((row, col)).is_wall:
            toggle_wall(grid, row, col)
    return grid


def make_parser():
    parser = argparse.ArgumentParser(description="Compare grid path finding strategies")
    parser.add_argument('--rows', type=int, default=constants.DEFAULT_ROWS, help='Number of grid rows')
    parser.add_argument('--cols', type=int, default=constants.DEFAULT_COLS, help='Number of grid columns')
    parser.add_argument('--start', help="Source cell as row,col (default 2,2)", default=None)
    parser.add_argument('--finish', help="Target cell as row,col (default two cells in from the far corner)", default=None)
    parser.add_argument('--walls', help="Wall cells, e.g. '0,1; 1,0'", default="")
    parser.add_argument('--maze', choices=constants.ENUM_MAZE_METHODS, default=None, help='Generate a maze first')
    parser.add_argument('--density', type=float, default=constants.DEFAULT_WALL_DENSITY, help='Wall density for scatter mazes')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for maze generation')
    parser.add_argument('--method', choices=constants.ENUM_ALGORITHMS + ["all"], default="all",
                        type=str.lower, help='Search strategy to run')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv=None):
    """Entry point: build the board, run the chosen strategies and print the comparison table."""
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else constants.LOG_LEVEL,
        format=constants.LOG_FORMAT,
    )

    try:
        grid = build_grid(args)
    except (GridError, ValueError) as e:
        parser.error(str(e))

    names = list(STRATEGIES) if args.method == "all" else [args.method]
    logger.info("Running %s on %r from %s to %s", ", ".join(names), grid, grid.start.position, grid.finish.position)
    results_df = compare_strategies(grid, names)

    printable = results_df.assign(
        runtime_ms=results_df["runtime_ms"].map(lambda v: f"{v:.3f}"),
        peak_py_mem=results_df["peak_py_mem"].map(format_bytes),
        rss_after=results_df["rss_after"].map(lambda v: format_bytes(int(v)) if pd.notna(v) else "N/A"),
    )
    print(f"Grid: {grid.rows}x{grid.cols}, Start: {grid.start.position}, Finish: {grid.finish.position}, Walls: {len(grid.walls())}")
    print(printable.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
