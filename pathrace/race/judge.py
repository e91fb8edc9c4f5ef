"""
Race judge: decides which of two traversals won.
"""

from __future__ import annotations

import logging
from enum import Enum

from pathrace.search.state import AlgorithmResult

logger = logging.getLogger(__name__)


class Verdict(str, Enum):
    """Outcome of a race."""

    LEFT = "left"
    RIGHT = "right"
    TIE = "tie"
    UNDECIDED = "undecided"


def judge_race(left: AlgorithmResult, right: AlgorithmResult) -> Verdict:
    """
    Decide a race between two finished traversals of the same problem.

    Rules, first match wins:
    1. Only one side found a start-to-target path: it wins.
    2. Neither found one: tie.
    3. Fewer steps until the target was finalized wins.
    4. Smaller visited set wins.
    5. Otherwise tie.

    Raises:
        ValueError: If the results are for different start/target pairs
    """
    if (left.start, left.end) != (right.start, right.end):
        raise ValueError(
            f"Cannot judge different problems: '{left.start}'->'{left.end}' "
            f"vs '{right.start}'->'{right.end}'"
        )

    verdict = _decide(left, right)
    logger.info(f"Race {left.strategy} vs {right.strategy}: {verdict.value}")
    return verdict


def _decide(left: AlgorithmResult, right: AlgorithmResult) -> Verdict:
    if left.found_path != right.found_path:
        return Verdict.LEFT if left.found_path else Verdict.RIGHT

    if not left.found_path:
        return Verdict.TIE

    left_finish = left.completed_at
    right_finish = right.completed_at
    if left_finish is not None and right_finish is not None:
        if left_finish < right_finish:
            return Verdict.LEFT
        if right_finish < left_finish:
            return Verdict.RIGHT

    if len(left.visited) < len(right.visited):
        return Verdict.LEFT
    if len(right.visited) < len(left.visited):
        return Verdict.RIGHT
    return Verdict.TIE
