"""
Search module.

Provides four resumable traversal strategies over a Graph:
- Dijkstra: Shortest weighted path, uniform-cost order
- AStar: Shortest weighted path, euclidean heuristic guided
- BreadthFirst: Fewest edges, ignores weights
- DepthFirst: Deep-first exploration, ignores weights
"""

from __future__ import annotations

from enum import Enum

from pathrace.search.base import Traversal
from pathrace.search.frontier import PriorityFrontier
from pathrace.search.paths import reconstruct_path
from pathrace.search.state import AlgorithmResult, PathStep, TraversalState
from pathrace.search.unweighted import BreadthFirst, DepthFirst
from pathrace.search.weighted import AStar, Dijkstra, compute_heuristics

__all__ = [
    "Strategy",
    "Traversal",
    "Dijkstra",
    "AStar",
    "BreadthFirst",
    "DepthFirst",
    "PriorityFrontier",
    "TraversalState",
    "PathStep",
    "AlgorithmResult",
    "reconstruct_path",
    "compute_heuristics",
    "get_traversal",
]


class Strategy(str, Enum):
    """Traversal strategies available for a race."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def display_name(self) -> str:
        return {
            Strategy.DIJKSTRA: "Dijkstra's Algorithm",
            Strategy.ASTAR: "A* Algorithm",
            Strategy.BFS: "Breadth-First Search",
            Strategy.DFS: "Depth-First Search",
        }[self]

    @property
    def is_optimal(self) -> bool:
        """Whether the strategy guarantees a shortest weighted path."""
        return self in (Strategy.DIJKSTRA, Strategy.ASTAR)


_TRAVERSALS: dict[Strategy, type[Traversal]] = {
    Strategy.DIJKSTRA: Dijkstra,
    Strategy.ASTAR: AStar,
    Strategy.BFS: BreadthFirst,
    Strategy.DFS: DepthFirst,
}


def get_traversal(strategy: Strategy | str) -> Traversal:
    """
    Get a fresh traversal engine for a strategy.

    Args:
        strategy: Strategy member or its name (dijkstra, astar, bfs, dfs)

    Returns:
        New, uninitialized Traversal

    Raises:
        ValueError: If the strategy name is unknown
    """
    try:
        key = Strategy(strategy)
    except ValueError:
        available = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown strategy '{strategy}'. Available: {available}") from None

    return _TRAVERSALS[key]()
