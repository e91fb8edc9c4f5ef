"""
Unit tests for PriorityFrontier and reconstruct_path.
"""

from pathrace.search import PriorityFrontier, reconstruct_path


class TestPriorityFrontier:
    """Test min-heap behavior."""

    def test_pops_lowest_score_first(self):
        frontier = PriorityFrontier()
        frontier.push(5, "c")
        frontier.push(1, "a")
        frontier.push(3, "b")
        assert [frontier.pop() for _ in range(3)] == [(1, "a"), (3, "b"), (5, "c")]

    def test_empty_pop_returns_none(self):
        """Empty frontier signals with None instead of raising."""
        frontier = PriorityFrontier()
        assert frontier.pop() is None
        assert frontier.peek() is None
        assert not frontier

    def test_equal_scores_pop_in_insertion_order(self):
        """Ties are broken FIFO."""
        frontier = PriorityFrontier()
        for item in ["x", "y", "z"]:
            frontier.push(2, item)
        assert [frontier.pop()[1] for _ in range(3)] == ["x", "y", "z"]

    def test_duplicate_items_allowed(self):
        """The same item can be pushed with several scores."""
        frontier = PriorityFrontier()
        frontier.push(9, "n")
        frontier.push(4, "n")
        assert len(frontier) == 2
        assert frontier.pop() == (4, "n")
        assert frontier.pop() == (9, "n")

    def test_peek_does_not_remove(self):
        frontier = PriorityFrontier()
        frontier.push(1, "a")
        assert frontier.peek() == (1, "a")
        assert len(frontier) == 1


class TestReconstructPath:
    """Test parent-map path reconstruction."""

    def test_valid_chain(self):
        """Path runs from start to the queried node."""
        parents = {"a": None, "b": "a", "c": "b"}
        path = reconstruct_path(parents, "a", "c")
        assert path == ("a", "b", "c")
        assert path[0] == "a"
        assert path[-1] == "c"

    def test_start_itself(self):
        """The start node's path is just the start."""
        assert reconstruct_path({"a": None}, "a", "a") == ("a",)

    def test_no_chain_to_start(self):
        """Chains that never reach start give an empty path."""
        parents = {"a": None, "b": None, "c": "b"}
        assert reconstruct_path(parents, "a", "c") == ()

    def test_unknown_node(self):
        """Nodes missing from the parent map have no path."""
        assert reconstruct_path({"a": None}, "a", "zzz") == ()

    def test_cyclic_parent_map(self):
        """A malformed cycle terminates with an empty path."""
        parents = {"a": None, "b": "c", "c": "b"}
        assert reconstruct_path(parents, "a", "b") == ()
