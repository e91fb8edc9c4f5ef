"""
Min-priority frontier with lazy invalidation, used by Dijkstra and A*.
"""

from __future__ import annotations

import heapq
import itertools


class PriorityFrontier:
    """
    Binary min-heap of (score, item) entries.

    The same item may be pushed several times as better scores are found.
    Callers discard stale entries when they pop them instead of decreasing
    keys in place.

    Equal scores pop in insertion order (FIFO). Other implementations may
    break ties differently, which changes which of several equal-cost paths
    is reported but never its cost.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, str]] = []
        self._counter = itertools.count()

    def push(self, score: float, item: str) -> None:
        heapq.heappush(self._heap, (score, next(self._counter), item))

    def pop(self) -> tuple[float, str] | None:
        """Remove and return the lowest (score, item), or None when empty."""
        if not self._heap:
            return None
        score, _, item = heapq.heappop(self._heap)
        return score, item

    def peek(self) -> tuple[float, str] | None:
        if not self._heap:
            return None
        score, _, item = self._heap[0]
        return score, item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self._heap)})"
