"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathrace.graph import Edge, Graph, Node


@pytest.fixture
def triangle_graph() -> Graph:
    """a-b (1), b-c (1), a-c (5): the direct edge is the expensive one."""
    return Graph(
        nodes=(
            Node("a", 0, 0),
            Node("b", 20, 0),
            Node("c", 40, 0),
        ),
        edges=(
            Edge("a", "b", 1),
            Edge("b", "c", 1),
            Edge("a", "c", 5),
        ),
    )


@pytest.fixture
def line_graph() -> Graph:
    """a - b - c with unit weights, 20 units apart."""
    return Graph(
        nodes=(Node("a", 0, 0), Node("b", 20, 0), Node("c", 40, 0)),
        edges=(Edge("a", "b", 1), Edge("b", "c", 1)),
    )


@pytest.fixture
def shortcut_graph() -> Graph:
    """
    BFS reaches c in one hop over a heavy edge; Dijkstra takes the light detour.

    Edges: a-c (5), a-b (1), b-c (1), a-d (1)
    """
    return Graph(
        nodes=(
            Node("a", 0, 0),
            Node("b", 20, 0),
            Node("c", 40, 0),
            Node("d", 0, 40),
        ),
        edges=(
            Edge("a", "c", 5),
            Edge("a", "b", 1),
            Edge("b", "c", 1),
            Edge("a", "d", 1),
        ),
    )


@pytest.fixture
def split_graph() -> Graph:
    """Two components: start-x and y-end."""
    return Graph(
        nodes=(
            Node("start", 0, 0),
            Node("x", 20, 0),
            Node("y", 100, 0),
            Node("end", 120, 0),
        ),
        edges=(
            Edge("start", "x", 1),
            Edge("y", "end", 1),
        ),
    )
