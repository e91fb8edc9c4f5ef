"""
Graph module.

Provides the immutable graph model and helpers around it:
- Node, Edge, Graph: Input dataclasses
- build_adjacency: Symmetric neighbor lists for one run
- generate_random_graph, generate_grid_graph: Seeded generators
"""

from pathrace.graph.adjacency import Adjacency, build_adjacency
from pathrace.graph.generator import generate_grid_graph, generate_random_graph
from pathrace.graph.model import Edge, Graph, Node

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Adjacency",
    "build_adjacency",
    "generate_random_graph",
    "generate_grid_graph",
]
