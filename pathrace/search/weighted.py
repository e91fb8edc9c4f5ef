"""
Weighted strategies: Dijkstra and A*.

Both pop the lowest-scored node from a PriorityFrontier and relax its
neighbors. A node may sit in the frontier several times; an entry is stale
when its score no longer matches the node's recorded score, and is skipped.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pathrace.config import HEURISTIC_SCALE
from pathrace.graph.model import Graph
from pathrace.search.base import Traversal
from pathrace.search.frontier import PriorityFrontier
from pathrace.search.state import PathStep, TraversalState

logger = logging.getLogger(__name__)


class Dijkstra(Traversal):
    """
    Dijkstra's algorithm with lazy deletion.

    Finalizes nodes in order of cumulative distance from the start.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra's algorithm (uniform-cost, shortest weighted path)"

    @property
    def guarantees_shortest_path(self) -> bool:
        return True

    def _new_frontier(self) -> PriorityFrontier:
        return PriorityFrontier()

    def _estimate(self, state: TraversalState, node: str) -> float:
        """Estimated remaining cost from node to the target."""
        return 0

    def _prepare(self, state: TraversalState, graph: Graph) -> None:
        """Hook for per-run precomputation."""
        pass

    def _seed(self, state: TraversalState, graph: Graph) -> None:
        self._prepare(state, graph)
        for node_id in state.adjacency:
            state.distances[node_id] = math.inf
            state.scores[node_id] = math.inf

        state.distances[state.start] = 0
        state.scores[state.start] = self._estimate(state, state.start)
        state.frontier.push(state.scores[state.start], state.start)

    def _advance(self, state: TraversalState) -> PathStep | None:
        while True:
            entry = state.frontier.pop()
            if entry is None:
                return None

            score, node = entry
            if node in state.visited:
                logger.debug(f"{self.name}: skipping visited '{node}'")
                continue
            if score != state.scores.get(node, math.inf):
                logger.debug(f"{self.name}: skipping stale entry '{node}' ({score})")
                continue
            break

        state.visited.add(node)
        step = state.snapshot(node)
        if step.is_complete:
            return step

        for neighbor, weight in state.adjacency[node]:
            if neighbor in state.visited:
                continue
            candidate = state.distances[node] + weight
            if candidate < state.distances[neighbor]:
                state.distances[neighbor] = candidate
                state.parents[neighbor] = node
                state.scores[neighbor] = candidate + self._estimate(state, neighbor)
                state.frontier.push(state.scores[neighbor], neighbor)

        return step


class AStar(Dijkstra):
    """
    A* search.

    Scores nodes by distance plus straight-line distance to the target
    divided by HEURISTIC_SCALE. The heuristic is 0 everywhere when the
    target is not in the graph.
    """

    def __init__(self, scale: float = HEURISTIC_SCALE) -> None:
        super().__init__()
        self._scale = scale

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* search (euclidean heuristic, shortest weighted path)"

    def _prepare(self, state: TraversalState, graph: Graph) -> None:
        state.heuristics = compute_heuristics(graph, state.end, self._scale)

    def _estimate(self, state: TraversalState, node: str) -> float:
        return state.heuristics.get(node, 0.0)


def compute_heuristics(
    graph: Graph, target: str, scale: float = HEURISTIC_SCALE
) -> dict[str, float]:
    """
    Straight-line distance from every node to target, divided by scale.

    Returns:
        Dict mapping node id to estimate (all 0.0 if target is missing)
    """
    ids = graph.node_ids
    target_node = graph.node(target)
    if target_node is None or not ids:
        return {node_id: 0.0 for node_id in ids}

    coords = np.array([[node.x, node.y] for node in graph.nodes], dtype=float)
    offsets = coords - np.array([target_node.x, target_node.y], dtype=float)
    estimates = np.linalg.norm(offsets, axis=1) / scale
    return dict(zip(ids, estimates.tolist()))
