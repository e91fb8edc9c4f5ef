#!/usr/bin/env python3
"""
Pathfinding Race CLI - Race two search strategies on a generated graph.

Usage:
    python scripts/race.py
    python scripts/race.py --left astar --right dijkstra --nodes 25 --seed 7
    python scripts/race.py --grid 6x8 --start node-0-0 --end node-5-7
    python scripts/race.py --left dfs --right bfs --replay --speed 200

Strategies:
    dijkstra - Shortest weighted path, uniform-cost order
    astar    - Shortest weighted path, euclidean heuristic
    bfs      - Fewest edges, ignores weights
    dfs      - Depth-first, ignores weights

Start and end default to the first and last node of the graph.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathrace.config import (  # noqa: E402
    DEFAULT_EDGE_DENSITY,
    DEFAULT_LEFT_STRATEGY,
    DEFAULT_NODE_COUNT,
    DEFAULT_REPLAY_SPEED_MS,
    DEFAULT_RIGHT_STRATEGY,
    LOG_LEVEL,
    RANDOM_SEED,
)
from pathrace.graph import Graph, generate_grid_graph, generate_random_graph  # noqa: E402
from pathrace.race import Verdict, describe_matchup, run_race  # noqa: E402
from pathrace.search import Strategy  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Race two pathfinding strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    strategies = [s.value for s in Strategy]
    parser.add_argument(
        "--left",
        type=str,
        default=DEFAULT_LEFT_STRATEGY,
        choices=strategies,
        help=f"Left strategy (default: {DEFAULT_LEFT_STRATEGY})",
    )
    parser.add_argument(
        "--right",
        type=str,
        default=DEFAULT_RIGHT_STRATEGY,
        choices=strategies,
        help=f"Right strategy (default: {DEFAULT_RIGHT_STRATEGY})",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_NODE_COUNT,
        help=f"Node count for a random graph (default: {DEFAULT_NODE_COUNT})",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_EDGE_DENSITY,
        help=f"Edge density for a random graph (default: {DEFAULT_EDGE_DENSITY})",
    )
    parser.add_argument(
        "--grid",
        type=str,
        default=None,
        help="Use a ROWSxCOLS grid graph instead of a random graph",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed for the graph (default: $PATHRACE_SEED or random)",
    )
    parser.add_argument("--start", type=str, default=None, help="Start node id")
    parser.add_argument("--end", type=str, default=None, help="Target node id")
    parser.add_argument(
        "--replay",
        action="store_true",
        help="Print every frame of the race, not just the outcome",
    )
    parser.add_argument(
        "--speed",
        type=int,
        default=DEFAULT_REPLAY_SPEED_MS,
        help=f"Milliseconds between replayed frames (default: {DEFAULT_REPLAY_SPEED_MS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_graph(args: argparse.Namespace) -> Graph:
    """Generate the graph described by the arguments."""
    if args.grid:
        try:
            rows, cols = (int(part) for part in args.grid.lower().split("x"))
        except ValueError:
            raise ValueError(f"Invalid grid size '{args.grid}', expected ROWSxCOLS") from None
        return generate_grid_graph(rows, cols, seed=args.seed)
    return generate_random_graph(args.nodes, args.density, seed=args.seed)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = build_graph(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    start = args.start or graph.nodes[0].id
    end = args.end or graph.nodes[-1].id

    left, right = Strategy(args.left), Strategy(args.right)
    matchup = describe_matchup(left, right)

    print("\n" + "=" * 60)
    print("Pathfinding Race")
    print("=" * 60)
    print(f"  Graph: {len(graph)} nodes, {len(graph.edges)} edges")
    print(f"  Start: {start}")
    print(f"  End:   {end}")
    print(f"  Left:  {left.display_name}")
    print(f"  Right: {right.display_name}")
    print(f"\n  {matchup.title}")
    print(f"  {matchup.message}")
    print("=" * 60 + "\n")

    replay = run_race(graph, start, end, left, right)

    if args.replay:
        while True:
            left_step, right_step = replay.frame()
            left_node = left_step.current_node if left_step else "-"
            right_node = right_step.current_node if right_step else "-"
            print(f"  [{replay.cursor + 1:3}/{replay.frame_count}] {left_node:>12} | {right_node:<12}")
            if replay.is_finished:
                break
            replay.next()
            time.sleep(args.speed / 1000)
    else:
        replay.seek(replay.frame_count - 1)

    print("\n" + "=" * 60)
    for label, result in (("Left", replay.left), ("Right", replay.right)):
        if result.found_path:
            print(
                f"  {label:5} {result.strategy:8}: weight {result.distance}, "
                f"{result.step_count} steps, {len(result.visited)} visited"
            )
            print(f"        {' -> '.join(result.path)}")
        else:
            print(f"  {label:5} {result.strategy:8}: no path after {result.step_count} steps")

    verdict = replay.verdict
    if verdict is Verdict.TIE:
        print("\nResult: TIE!")
    else:
        winner = replay.left if verdict is Verdict.LEFT else replay.right
        print(f"\nResult: {verdict.value} ({winner.strategy}) finished first!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
