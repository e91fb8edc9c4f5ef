"""
Unit tests for the race judge, replay cursor and matchup rules.
"""

import math

import pytest

from pathrace.race import RaceReplay, Verdict, describe_matchup, judge_race, run_race
from pathrace.search import AlgorithmResult, PathStep, get_traversal


def make_result(
    strategy: str,
    path: tuple[str, ...],
    step_count: int,
    complete_at: int | None,
    visited: int,
    start: str = "s",
    end: str = "t",
) -> AlgorithmResult:
    """Build a synthetic result with the given shape."""
    steps = tuple(
        PathStep(
            index=i,
            current_node=f"n{i}",
            visited=frozenset(),
            parents={},
            path=(),
            is_complete=i == complete_at,
        )
        for i in range(step_count)
    )
    return AlgorithmResult(
        strategy=strategy,
        start=start,
        end=end,
        path=path,
        steps=steps,
        visited=frozenset(f"v{i}" for i in range(visited)),
        distance=len(path) if path else math.inf,
    )


class TestJudgeRace:
    """Test the winner precedence rules."""

    def test_only_left_found_path(self):
        """A valid path beats any step count."""
        left = make_result("dfs", ("s", "x", "t"), step_count=30, complete_at=29, visited=30)
        right = make_result("bfs", (), step_count=2, complete_at=None, visited=2)
        assert judge_race(left, right) is Verdict.LEFT

    def test_only_right_found_path(self):
        left = make_result("dfs", (), step_count=1, complete_at=None, visited=1)
        right = make_result("bfs", ("s", "t"), step_count=9, complete_at=8, visited=9)
        assert judge_race(left, right) is Verdict.RIGHT

    def test_path_must_reach_target(self):
        """A path that stops short is not a valid path."""
        left = make_result("dfs", ("s", "x"), step_count=3, complete_at=None, visited=3)
        right = make_result("bfs", ("s", "t"), step_count=9, complete_at=8, visited=9)
        assert judge_race(left, right) is Verdict.RIGHT

    def test_neither_found_path_is_tie(self):
        left = make_result("dfs", (), step_count=4, complete_at=None, visited=4)
        right = make_result("bfs", (), step_count=7, complete_at=None, visited=7)
        assert judge_race(left, right) is Verdict.TIE

    def test_fewer_steps_wins(self):
        left = make_result("dijkstra", ("s", "t"), step_count=6, complete_at=5, visited=3)
        right = make_result("astar", ("s", "t"), step_count=4, complete_at=3, visited=8)
        assert judge_race(left, right) is Verdict.RIGHT

    def test_same_step_smaller_visited_wins(self):
        left = make_result("bfs", ("s", "t"), step_count=4, complete_at=3, visited=4)
        right = make_result("dfs", ("s", "t"), step_count=4, complete_at=3, visited=6)
        assert judge_race(left, right) is Verdict.LEFT

    def test_same_step_same_visited_is_tie(self):
        left = make_result("bfs", ("s", "t"), step_count=4, complete_at=3, visited=5)
        right = make_result("dfs", ("s", "t"), step_count=4, complete_at=3, visited=5)
        assert judge_race(left, right) is Verdict.TIE

    def test_different_problems_rejected(self):
        left = make_result("bfs", (), step_count=1, complete_at=None, visited=1)
        right = make_result("dfs", (), step_count=1, complete_at=None, visited=1, end="u")
        with pytest.raises(ValueError):
            judge_race(left, right)

    def test_optimal_strategies_tie(self, line_graph):
        """Dijkstra and A* finish together with equal visits."""
        dijkstra = get_traversal("dijkstra").run(line_graph, "a", "c")
        astar = get_traversal("astar").run(line_graph, "a", "c")

        assert dijkstra.completed_at == astar.completed_at
        assert len(dijkstra.visited) == len(astar.visited)
        assert judge_race(dijkstra, astar) is Verdict.TIE

    def test_bfs_beats_dijkstra_on_shortcut(self, shortcut_graph):
        """BFS gets there in fewer steps, with a heavier path."""
        dijkstra = get_traversal("dijkstra").run(shortcut_graph, "a", "c")
        bfs = get_traversal("bfs").run(shortcut_graph, "a", "c")

        assert dijkstra.distance < bfs.distance
        assert judge_race(dijkstra, bfs) is Verdict.RIGHT
        assert judge_race(bfs, dijkstra) is Verdict.LEFT


class TestRaceReplay:
    """Test the shared replay cursor."""

    def test_verdict_undecided_until_last_frame(self, shortcut_graph):
        replay = run_race(shortcut_graph, "a", "c", "dijkstra", "bfs")

        assert replay.frame_count == 4
        assert replay.verdict is Verdict.UNDECIDED
        replay.next()
        replay.next()
        assert replay.verdict is Verdict.UNDECIDED
        replay.next()
        assert replay.is_finished
        assert replay.verdict is Verdict.RIGHT

    def test_shorter_side_holds_last_frame(self, shortcut_graph):
        replay = run_race(shortcut_graph, "a", "c", "dijkstra", "bfs")
        replay.seek(3)

        left_step, right_step = replay.frame()
        assert left_step.current_node == "c"
        assert right_step is replay.right.steps[-1]
        assert right_step.is_complete

    def test_cursor_is_clamped(self, triangle_graph):
        replay = run_race(triangle_graph, "a", "c", "bfs", "dfs")

        assert replay.previous() == 0
        assert replay.seek(100) == replay.frame_count - 1
        assert replay.next() == replay.frame_count - 1
        assert replay.seek(-5) == 0

    def test_reset_rewinds(self, triangle_graph):
        replay = run_race(triangle_graph, "a", "c", "astar", "dfs")
        replay.seek(2)
        replay.reset()
        assert replay.cursor == 0
        assert replay.frame()[0] is replay.left.steps[0]

    def test_sides_are_independent(self, triangle_graph):
        """Racing a strategy against itself uses two engines with equal results."""
        replay = run_race(triangle_graph, "a", "c", "dijkstra", "dijkstra")
        assert replay.left == replay.right
        assert replay.left is not replay.right

    def test_empty_results(self, triangle_graph):
        """No steps on either side: the race is decided at once."""
        replay = run_race(triangle_graph, "nowhere", "c", "bfs", "dfs")

        assert replay.frame_count == 0
        assert replay.frame() == (None, None)
        assert replay.verdict is Verdict.TIE

    def test_built_from_results(self, line_graph):
        left = get_traversal("bfs").run(line_graph, "a", "c")
        right = get_traversal("dfs").run(line_graph, "a", "c")
        replay = RaceReplay(left, right)
        replay.seek(replay.frame_count - 1)
        assert replay.verdict is Verdict.TIE

    def test_unknown_strategy(self, line_graph):
        with pytest.raises(ValueError):
            run_race(line_graph, "a", "c", "bfs", "teleport")


class TestDescribeMatchup:
    """Test matchup explanations."""

    def test_both_optimal_is_fair(self):
        matchup = describe_matchup("dijkstra", "astar")
        assert matchup.kind == "fair"
        assert "heuristic" in matchup.message

    def test_one_optimal_is_mixed(self):
        matchup = describe_matchup("dfs", "astar")
        assert matchup.kind == "mixed"
        assert matchup.message.startswith("A* Algorithm guarantees")

    def test_neither_optimal(self):
        assert describe_matchup("bfs", "dfs").kind == "unweighted"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            describe_matchup("bfs", "nope")
