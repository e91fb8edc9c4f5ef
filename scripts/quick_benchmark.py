#!/usr/bin/env python3
"""
Quick benchmark: race every pair of strategies on a batch of random graphs.

Usage:
    python scripts/quick_benchmark.py
    python scripts/quick_benchmark.py --graphs 50 --nodes 30 --chart wins.html
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathrace.graph import generate_random_graph  # noqa: E402
from pathrace.race import Verdict, run_race  # noqa: E402
from pathrace.search import Strategy  # noqa: E402

STRATEGIES = [s.value for s in Strategy]


def run_benchmark(graph_count: int, node_count: int, seed: int) -> dict[str, int]:
    print("=" * 70)
    print("Pathfinding Race - Strategy Comparison")
    print("=" * 70)
    print(f"\nRacing {len(STRATEGIES)} strategies pairwise on {graph_count} graphs...\n")

    wins = {name: 0 for name in STRATEGIES}
    ties = 0
    steps: dict[str, list[int]] = {name: [] for name in STRATEGIES}
    start_time = time.time()

    for i in range(graph_count):
        graph = generate_random_graph(node_count, seed=seed + i)
        start, end = graph.nodes[0].id, graph.nodes[-1].id

        for left, right in itertools.combinations(STRATEGIES, 2):
            replay = run_race(graph, start, end, left, right)
            replay.seek(replay.frame_count - 1)

            for result in (replay.left, replay.right):
                if result.completed_at is not None:
                    steps[result.strategy].append(result.completed_at + 1)

            verdict = replay.verdict
            if verdict is Verdict.LEFT:
                wins[left] += 1
            elif verdict is Verdict.RIGHT:
                wins[right] += 1
            else:
                ties += 1

    print(f"Done in {time.time() - start_time:.1f}s\n")

    # Summary
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    for name in STRATEGIES:
        finished = steps[name]
        avg_steps = sum(finished) / len(finished) if finished else 0
        print(f"  {name:10} : {wins[name]:4} wins, avg {avg_steps:.1f} steps to target")
    print(f"  {'ties':10} : {ties:4}")

    return wins


def main() -> int:
    parser = argparse.ArgumentParser(description="Race all strategy pairs on random graphs")
    parser.add_argument("--graphs", type=int, default=20, help="Number of graphs (default: 20)")
    parser.add_argument("--nodes", type=int, default=20, help="Nodes per graph (default: 20)")
    parser.add_argument("--seed", type=int, default=0, help="First graph seed (default: 0)")
    parser.add_argument("--chart", type=str, default=None, help="Write a win chart to this HTML file")
    args = parser.parse_args()

    wins = run_benchmark(args.graphs, args.nodes, args.seed)

    if args.chart:
        from pathrace.viz import create_win_count_chart

        create_win_count_chart(wins).write_html(args.chart)
        print(f"\nChart saved to {args.chart}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
