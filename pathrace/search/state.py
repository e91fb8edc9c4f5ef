"""
Traversal state and the snapshot dataclasses a run produces.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pathrace.graph.adjacency import Adjacency
from pathrace.search.frontier import PriorityFrontier
from pathrace.search.paths import reconstruct_path


@dataclass(frozen=True)
class PathStep:
    """
    Snapshot taken when a node is finalized.

    Holds copies, never references into live traversal state, so a list of
    past steps can be replayed while the traversal keeps running.

    Attributes:
        index: 0-based position of this step in the run
        current_node: Node finalized by this step
        visited: Visited node ids at this moment
        parents: Parent map at this moment (read-only)
        path: Path from start to current_node, () if no chain exists
        is_complete: Whether current_node is the target
    """

    index: int
    current_node: str
    visited: frozenset[str]
    parents: Mapping[str, str | None]
    path: tuple[str, ...]
    is_complete: bool


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Complete record of a finished traversal.

    Attributes:
        strategy: Name of the strategy that produced it
        start: Start node id
        end: Target node id
        path: Final start-to-target path, () if unreachable
        steps: Every snapshot in emission order
        visited: Visited node ids when the run stopped
        distance: Total weight of path, inf when path is empty
    """

    strategy: str
    start: str
    end: str
    path: tuple[str, ...]
    steps: tuple[PathStep, ...]
    visited: frozenset[str]
    distance: float = math.inf

    @property
    def found_path(self) -> bool:
        """Whether path runs from start to end."""
        return bool(self.path) and self.path[0] == self.start and self.path[-1] == self.end

    @property
    def completed_at(self) -> int | None:
        """Index of the first step that finalized the target, or None."""
        for step in self.steps:
            if step.is_complete:
                return step.index
        return None

    @property
    def step_count(self) -> int:
        return len(self.steps)


@dataclass
class TraversalState:
    """
    Mutable state of one traversal run.

    Owned by a single Traversal instance and replaced on every init().

    Attributes:
        start: Start node id
        end: Target node id
        adjacency: Neighbor lists for this run
        frontier: PriorityFrontier, deque (BFS) or list used as a stack (DFS)
        distances: Best-known path cost per node
        scores: Frontier score per node (distance, plus heuristic for A*)
        heuristics: Estimated remaining cost per node (A* only)
        parents: Parent per node, None until assigned
        visited: Finalized (or, for BFS, discovered) node ids
        steps: Snapshots emitted so far
        complete: Set once the target is finalized or the frontier runs dry
    """

    start: str
    end: str
    adjacency: Adjacency
    frontier: PriorityFrontier | deque[str] | list[str]
    distances: dict[str, float] = field(default_factory=dict)
    scores: dict[str, float] = field(default_factory=dict)
    heuristics: dict[str, float] = field(default_factory=dict)
    parents: dict[str, str | None] = field(default_factory=dict)
    visited: set[str] = field(default_factory=set)
    steps: list[PathStep] = field(default_factory=list)
    complete: bool = False

    def snapshot(self, node: str) -> PathStep:
        """Record a copy-on-emit snapshot for a newly finalized node."""
        step = PathStep(
            index=len(self.steps),
            current_node=node,
            visited=frozenset(self.visited),
            parents=MappingProxyType(dict(self.parents)),
            path=reconstruct_path(self.parents, self.start, node),
            is_complete=node == self.end,
        )
        self.steps.append(step)
        if step.is_complete:
            self.complete = True
        return step
