"""
Immutable graph dataclasses: nodes with 2D positions and undirected weighted edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """
    A graph node.

    Attributes:
        id: Unique identifier
        x: Horizontal position
        y: Vertical position
        label: Optional display label
    """

    id: str
    x: float
    y: float
    label: str | None = None

    @property
    def display_label(self) -> str:
        """Label for drawing, falling back to the id."""
        return self.label if self.label is not None else self.id


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted edge.

    Attributes:
        source: One endpoint id
        target: The other endpoint id
        weight: Positive integer cost, same in both directions
    """

    source: str
    target: str
    weight: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.weight, int) or isinstance(self.weight, bool):
            raise ValueError(
                f"Edge {self.source!r}-{self.target!r} has weight {self.weight!r}; "
                "weights must be integers"
            )
        if self.weight < 1:
            raise ValueError(
                f"Edge {self.source!r}-{self.target!r} has weight {self.weight}; "
                "weights must be positive"
            )

    def joins(self, a: str, b: str) -> bool:
        """Whether this edge connects a and b (in either direction)."""
        return (self.source == a and self.target == b) or (
            self.source == b and self.target == a
        )


@dataclass(frozen=True)
class Graph:
    """
    Nodes plus undirected edges.

    Node ids must be unique. Edges may name ids that are not in the graph;
    traversals skip those edges.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _by_id: dict[str, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))

        by_id: dict[str, Node] = {}
        for node in self.nodes:
            if node.id in by_id:
                raise ValueError(f"Duplicate node id: {node.id!r}")
            by_id[node.id] = node
        object.__setattr__(self, "_by_id", by_id)

    @property
    def node_ids(self) -> list[str]:
        """Node ids in graph order."""
        return [node.id for node in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._by_id

    def node(self, node_id: str) -> Node | None:
        """Return the node with this id, or None."""
        return self._by_id.get(node_id)

    def edge_weight(self, a: str, b: str) -> int | None:
        """Weight of the lightest edge joining a and b, or None if not adjacent."""
        weights = [edge.weight for edge in self.edges if edge.joins(a, b)]
        return min(weights) if weights else None

    def path_weight(self, path: list[str] | tuple[str, ...]) -> int:
        """
        Total weight along a path.

        Consecutive pairs with no joining edge contribute nothing.
        """
        total = 0
        for a, b in zip(path, path[1:]):
            weight = self.edge_weight(a, b)
            if weight is not None:
                total += weight
        return total

    def __len__(self) -> int:
        return len(self.nodes)
