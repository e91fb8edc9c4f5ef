"""
Traversal base class shared by all search strategies.

Each strategy implements _seed() to prepare its frontier and _advance() to
finalize one node. Batch runs are nothing more than repeated step() calls,
so a batch run and a manual stepping session emit the same snapshots.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from pathrace.graph.adjacency import build_adjacency
from pathrace.graph.model import Graph
from pathrace.search.paths import reconstruct_path
from pathrace.search.state import AlgorithmResult, PathStep, TraversalState

logger = logging.getLogger(__name__)


class Traversal(ABC):
    """
    Abstract base class for resumable graph traversals.

    Lifecycle: init() -> step() ... -> reset(). run_to_completion() drives
    step() until it returns None.
    """

    def __init__(self) -> None:
        self._graph: Graph | None = None
        self._state: TraversalState | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'dijkstra', 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @property
    def guarantees_shortest_path(self) -> bool:
        """Whether the reported path always has minimum total weight."""
        return False

    @abstractmethod
    def _new_frontier(self):
        """Return an empty frontier container for this strategy."""
        ...

    @abstractmethod
    def _seed(self, state: TraversalState, graph: Graph) -> None:
        """Initialize scores and push the start node."""
        ...

    @abstractmethod
    def _advance(self, state: TraversalState) -> PathStep | None:
        """Finalize one node and return its snapshot, or None if the frontier is empty."""
        ...

    def init(self, graph: Graph, start: str, end: str) -> None:
        """
        Prepare a new run, discarding any previous state.

        A start id missing from the graph leaves the frontier empty, so the
        run finalizes nothing. A missing end id means the run explores the
        whole reachable component and reports no path.
        """
        adjacency = build_adjacency(graph)
        state = TraversalState(
            start=start,
            end=end,
            adjacency=adjacency,
            frontier=self._new_frontier(),
            parents={node_id: None for node_id in adjacency},
        )

        if graph.has_node(start):
            self._seed(state, graph)
        else:
            logger.warning(f"{self.name}: start '{start}' not in graph, nothing to explore")
        if not graph.has_node(end):
            logger.warning(f"{self.name}: target '{end}' not in graph, no path can be found")

        self._graph = graph
        self._state = state
        logger.info(f"Initialized {self.name}: '{start}' -> '{end}' ({len(graph)} nodes)")

    def step(self) -> PathStep | None:
        """
        Finalize exactly one node.

        Returns:
            The snapshot for that node, or None once the target has been
            finalized, the frontier is exhausted, or init() was never called.
            Calling again after that keeps returning None.
        """
        state = self._state
        if state is None or state.complete:
            return None

        step = self._advance(state)
        if step is None:
            state.complete = True
            logger.debug(f"{self.name}: frontier exhausted after {len(state.steps)} steps")
        return step

    def run_to_completion(self) -> AlgorithmResult:
        """
        Step until the run terminates and collect the result.

        Steps already taken through step() are included, so the result is the
        same however the run was driven.

        Raises:
            RuntimeError: If init() has not been called
        """
        if self._state is None or self._graph is None:
            raise RuntimeError(f"{self.name}: init() must be called before run_to_completion()")

        while self.step() is not None:
            pass

        result = self._build_result()
        if result.found_path:
            logger.info(
                f"{self.name} found path ({len(result.path) - 1} edges, weight "
                f"{result.distance}) in {result.step_count} steps: {' -> '.join(result.path)}"
            )
        else:
            logger.info(f"{self.name} found no path after {result.step_count} steps")
        return result

    def run(self, graph: Graph, start: str, end: str) -> AlgorithmResult:
        """Initialize and run to completion in one call."""
        self.init(graph, start, end)
        return self.run_to_completion()

    def reset(self) -> None:
        """Discard all traversal state."""
        self._graph = None
        self._state = None

    def _build_result(self) -> AlgorithmResult:
        state = self._state
        path = reconstruct_path(state.parents, state.start, state.end)
        return AlgorithmResult(
            strategy=self.name,
            start=state.start,
            end=state.end,
            path=path,
            steps=tuple(state.steps),
            visited=frozenset(state.visited),
            distance=self._graph.path_weight(path) if path else math.inf,
        )

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def is_complete(self) -> bool:
        """Whether the run has terminated (False before init)."""
        return self._state is not None and self._state.complete

    @property
    def steps(self) -> tuple[PathStep, ...]:
        """Snapshots emitted since init()."""
        if self._state is None:
            return ()
        return tuple(self._state.steps)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
