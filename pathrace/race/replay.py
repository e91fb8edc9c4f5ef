"""
Side-by-side replay of two traversals with one shared cursor.
"""

from __future__ import annotations

import logging

from pathrace.graph.model import Graph
from pathrace.race.judge import Verdict, judge_race
from pathrace.search import Strategy, get_traversal
from pathrace.search.state import AlgorithmResult, PathStep

logger = logging.getLogger(__name__)


class RaceReplay:
    """
    Steps through two finished traversals frame by frame.

    Frame i shows step i of each side; a side with fewer steps keeps showing
    its last step. The verdict stays UNDECIDED until the cursor reaches the
    last frame of the longer side.
    """

    def __init__(self, left: AlgorithmResult, right: AlgorithmResult) -> None:
        self.left = left
        self.right = right
        self._cursor = 0
        self._verdict: Verdict | None = None

    @property
    def frame_count(self) -> int:
        """Number of frames (length of the longer step sequence)."""
        return max(len(self.left.steps), len(self.right.steps))

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_finished(self) -> bool:
        return self._cursor >= self.frame_count - 1

    def next(self) -> int:
        """Advance one frame (stops at the last frame)."""
        self._cursor = min(self._cursor + 1, max(self.frame_count - 1, 0))
        return self._cursor

    def previous(self) -> int:
        """Go back one frame (stops at the first frame)."""
        self._cursor = max(self._cursor - 1, 0)
        return self._cursor

    def seek(self, index: int) -> int:
        """Jump to a frame, clamped to the valid range."""
        self._cursor = min(max(index, 0), max(self.frame_count - 1, 0))
        return self._cursor

    def reset(self) -> None:
        self._cursor = 0

    def frame(self) -> tuple[PathStep | None, PathStep | None]:
        """Snapshots shown at the cursor for (left, right)."""
        return _step_at(self.left, self._cursor), _step_at(self.right, self._cursor)

    @property
    def verdict(self) -> Verdict:
        """Race outcome, UNDECIDED until the last frame is reached."""
        if not self.is_finished:
            return Verdict.UNDECIDED
        if self._verdict is None:
            self._verdict = judge_race(self.left, self.right)
        return self._verdict

    def __repr__(self) -> str:
        return (
            f"RaceReplay({self.left.strategy} vs {self.right.strategy}, "
            f"frame {self._cursor + 1}/{self.frame_count})"
        )


def _step_at(result: AlgorithmResult, index: int) -> PathStep | None:
    if not result.steps:
        return None
    return result.steps[min(index, len(result.steps) - 1)]


def run_race(
    graph: Graph,
    start: str,
    end: str,
    left: Strategy | str,
    right: Strategy | str,
) -> RaceReplay:
    """
    Run two strategies independently on the same problem.

    Each side gets its own engine, so no state is shared between them.

    Raises:
        ValueError: If a strategy name is unknown
    """
    left_engine = get_traversal(left)
    right_engine = get_traversal(right)
    logger.info(f"Racing {left_engine.name} vs {right_engine.name}: '{start}' -> '{end}'")

    return RaceReplay(
        left=left_engine.run(graph, start, end),
        right=right_engine.run(graph, start, end),
    )
