"""
Unweighted strategies: breadth-first and depth-first search.

Edge weights are ignored; only adjacency order matters.
"""

from __future__ import annotations

import logging
from collections import deque

from pathrace.graph.model import Graph
from pathrace.search.base import Traversal
from pathrace.search.state import PathStep, TraversalState

logger = logging.getLogger(__name__)


class BreadthFirst(Traversal):
    """
    Breadth-first search.

    Nodes are marked visited and given a parent when enqueued, so no node is
    enqueued twice. The start node counts as visited from the beginning.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest edges, ignores weights)"

    def _new_frontier(self) -> deque[str]:
        return deque()

    def _seed(self, state: TraversalState, graph: Graph) -> None:
        state.visited.add(state.start)
        state.frontier.append(state.start)

    def _advance(self, state: TraversalState) -> PathStep | None:
        if not state.frontier:
            return None

        node = state.frontier.popleft()
        step = state.snapshot(node)
        if step.is_complete:
            return step

        for neighbor, _ in state.adjacency[node]:
            if neighbor not in state.visited:
                state.visited.add(neighbor)
                state.parents[neighbor] = node
                state.frontier.append(neighbor)

        return step


class DepthFirst(Traversal):
    """
    Depth-first search.

    Every unvisited neighbor is pushed, in reverse adjacency order so the
    first neighbor is explored first. A neighbor's parent is the node that
    discovered it first; a later push does not change it, even if the node
    ends up visited through that later push. The parent chain can therefore
    differ from the order nodes were actually visited in.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (first-discovery parents, ignores weights)"

    def _new_frontier(self) -> list[str]:
        return []

    def _seed(self, state: TraversalState, graph: Graph) -> None:
        state.frontier.append(state.start)

    def _advance(self, state: TraversalState) -> PathStep | None:
        while state.frontier:
            node = state.frontier.pop()
            if node in state.visited:
                logger.debug(f"{self.name}: skipping visited '{node}'")
                continue

            state.visited.add(node)
            step = state.snapshot(node)
            if step.is_complete:
                return step

            for neighbor, _ in reversed(state.adjacency[node]):
                if neighbor in state.visited:
                    continue
                if state.parents[neighbor] is None:
                    state.parents[neighbor] = node
                state.frontier.append(neighbor)

            return step

        return None
