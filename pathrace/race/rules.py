"""
Matchup descriptions: what a race between two strategies can tell you.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathrace.search import Strategy


@dataclass(frozen=True)
class Matchup:
    """
    Explanation of a pairing.

    Attributes:
        kind: 'fair' (both optimal), 'mixed' (one optimal) or 'unweighted'
        title: One-line headline
        message: What the race does and does not guarantee
    """

    kind: str
    title: str
    message: str


def describe_matchup(left: Strategy | str, right: Strategy | str) -> Matchup:
    """
    Describe the guarantees behind a race between two strategies.

    Raises:
        ValueError: If a strategy name is unknown
    """
    left, right = Strategy(left), Strategy(right)

    if left.is_optimal and right.is_optimal:
        if {left, right} == {Strategy.DIJKSTRA, Strategy.ASTAR}:
            detail = (
                "A* uses a heuristic to guide search, potentially finishing faster. "
                "Dijkstra explores uniformly in all directions."
            )
        else:
            detail = "Both use the same strategy to guarantee the shortest path."
        return Matchup(
            kind="fair",
            title="Fair Race: Both Guarantee Shortest Path",
            message=(
                "Both algorithms will find the optimal weighted path. The winner is "
                f"whoever finishes first. {detail}"
            ),
        )

    if left.is_optimal or right.is_optimal:
        optimal, other = (left, right) if left.is_optimal else (right, left)
        return Matchup(
            kind="mixed",
            title="Educational Comparison: Different Guarantees",
            message=(
                f"{optimal.display_name} guarantees the shortest weighted path. "
                f"{other.display_name} does not; it may finish first with a longer path."
            ),
        )

    return Matchup(
        kind="unweighted",
        title="Educational Race: Neither Guarantees Optimality",
        message=(
            "BFS and DFS use different exploration strategies but neither considers "
            "edge weights. The path found may not be the shortest by total weight."
        ),
    )
