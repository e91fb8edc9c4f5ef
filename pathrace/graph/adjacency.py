"""
Adjacency index built once per traversal run.
"""

from __future__ import annotations

import logging

from pathrace.graph.model import Graph

logger = logging.getLogger(__name__)

# node id -> [(neighbor id, weight), ...]
Adjacency = dict[str, list[tuple[str, int]]]


def build_adjacency(graph: Graph) -> Adjacency:
    """
    Build a symmetric neighbor list for every node.

    Keys follow graph node order and neighbor lists follow edge order.
    Edges naming a node that is not in the graph are dropped.

    Returns:
        Dict mapping node id to (neighbor id, weight) pairs
    """
    adjacency: Adjacency = {node_id: [] for node_id in graph.node_ids}
    dropped = 0

    for edge in graph.edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            dropped += 1
            continue
        adjacency[edge.source].append((edge.target, edge.weight))
        adjacency[edge.target].append((edge.source, edge.weight))

    if dropped:
        logger.debug(f"Dropped {dropped} edge(s) with missing endpoints")

    return adjacency
