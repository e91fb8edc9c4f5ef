"""
Random graph generators for races and tests.

Edge weights never fall below the straight-line length of the edge divided
by HEURISTIC_SCALE, so the A* heuristic stays admissible on every generated
graph.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pathrace.config import (
    CANVAS_HEIGHT,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    DEFAULT_EDGE_DENSITY,
    HEURISTIC_SCALE,
    MAX_EDGE_WEIGHT,
    MAX_GRID_WEIGHT,
    MAX_PLACEMENT_ATTEMPTS,
    MIN_NODE_DISTANCE,
    WEIGHT_UNIT,
)
from pathrace.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


def _distance_weight(distance: float) -> int:
    """Weight for an edge of the given length (heavier when longer)."""
    return min(int(distance // WEIGHT_UNIT) + 1, MAX_EDGE_WEIGHT)


def _place_nodes(count: int, rng: np.random.Generator) -> np.ndarray:
    """
    Place nodes in a cloud around the canvas center.

    Positions are drawn from a gaussian and clamped to the padded canvas.
    A position closer than MIN_NODE_DISTANCE to an earlier node is redrawn;
    after MAX_PLACEMENT_ATTEMPTS we fall back to a uniform position.
    """
    low = np.array([CANVAS_PADDING, CANVAS_PADDING], dtype=float)
    high = np.array(
        [CANVAS_WIDTH - CANVAS_PADDING, CANVAS_HEIGHT - CANVAS_PADDING], dtype=float
    )
    center = np.array([CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2])
    spread = np.array([CANVAS_WIDTH / 4, CANVAS_HEIGHT / 4])

    positions = np.empty((count, 2), dtype=float)
    for i in range(count):
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            candidate = np.clip(rng.normal(center, spread), low, high)
            if i == 0:
                break
            gaps = np.linalg.norm(positions[:i] - candidate, axis=1)
            if gaps.min() >= MIN_NODE_DISTANCE:
                break
        else:
            candidate = rng.uniform(low, high)
        positions[i] = candidate

    return positions


def _connect_components(
    node_ids: list[str], positions: np.ndarray, edges: list[Edge]
) -> None:
    """Link every node unreachable from the first node to its nearest reached node."""
    if not node_ids:
        return

    index = {node_id: i for i, node_id in enumerate(node_ids)}
    neighbors: dict[int, list[int]] = {i: [] for i in range(len(node_ids))}
    for edge in edges:
        a, b = index[edge.source], index[edge.target]
        neighbors[a].append(b)
        neighbors[b].append(a)

    reached = np.zeros(len(node_ids), dtype=bool)
    reached[0] = True
    queue = [0]
    while queue:
        current = queue.pop()
        for neighbor in neighbors[current]:
            if not reached[neighbor]:
                reached[neighbor] = True
                queue.append(neighbor)

    stray = np.flatnonzero(~reached)
    for i in stray:
        candidates = np.flatnonzero(reached)
        gaps = np.linalg.norm(positions[candidates] - positions[i], axis=1)
        nearest = candidates[int(gaps.argmin())]
        edges.append(
            Edge(
                source=node_ids[i],
                target=node_ids[nearest],
                weight=_distance_weight(float(gaps.min())),
            )
        )
        reached[i] = True

    if len(stray):
        logger.debug(f"Connected {len(stray)} stray node(s)")


def generate_random_graph(
    node_count: int,
    edge_density: float = DEFAULT_EDGE_DENSITY,
    seed: int | None = None,
) -> Graph:
    """
    Generate a connected graph with spatially-aware random edges.

    Closer node pairs are more likely to be joined. Edge weights grow with
    edge length.

    Args:
        node_count: Number of nodes (ids "node-0" .. "node-{n-1}")
        edge_density: Base probability of joining two nodes
        seed: Seed for reproducible graphs

    Returns:
        A connected Graph

    Raises:
        ValueError: If node_count is not positive
    """
    if node_count < 1:
        raise ValueError(f"node_count must be positive, got {node_count}")

    rng = np.random.default_rng(seed)
    positions = _place_nodes(node_count, rng)
    node_ids = [f"node-{i}" for i in range(node_count)]
    nodes = [
        Node(id=node_ids[i], x=float(x), y=float(y), label=str(i))
        for i, (x, y) in enumerate(positions)
    ]

    diagonal = math.hypot(CANVAS_WIDTH, CANVAS_HEIGHT)
    edges: list[Edge] = []
    for i in range(node_count):
        for j in range(i + 1, node_count):
            distance = float(np.linalg.norm(positions[i] - positions[j]))
            probability = edge_density * (1 - (distance / diagonal) * 0.7)
            if rng.random() < probability:
                edges.append(
                    Edge(
                        source=node_ids[i],
                        target=node_ids[j],
                        weight=_distance_weight(distance),
                    )
                )

    _connect_components(node_ids, positions, edges)

    logger.info(f"Generated random graph: {node_count} nodes, {len(edges)} edges")
    return Graph(nodes=tuple(nodes), edges=tuple(edges))


def generate_grid_graph(rows: int, cols: int, seed: int | None = None) -> Graph:
    """
    Generate a rows x cols grid with random weights on adjacent cells.

    Each weight is the heuristic floor for the edge's length plus a random
    1..MAX_GRID_WEIGHT.

    Raises:
        ValueError: If rows or cols is not positive
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid needs positive size, got {rows}x{cols}")

    rng = np.random.default_rng(seed)
    cell_width = CANVAS_WIDTH / cols
    cell_height = CANVAS_HEIGHT / rows

    nodes = [
        Node(
            id=f"node-{i}-{j}",
            x=j * cell_width + cell_width / 2 + CANVAS_PADDING,
            y=i * cell_height + cell_height / 2 + CANVAS_PADDING,
            label=f"{i},{j}",
        )
        for i in range(rows)
        for j in range(cols)
    ]

    floor_right = math.ceil(cell_width / HEURISTIC_SCALE)
    floor_down = math.ceil(cell_height / HEURISTIC_SCALE)

    edges: list[Edge] = []
    for i in range(rows):
        for j in range(cols):
            current = f"node-{i}-{j}"
            if j < cols - 1:
                edges.append(
                    Edge(
                        source=current,
                        target=f"node-{i}-{j + 1}",
                        weight=floor_right + int(rng.integers(1, MAX_GRID_WEIGHT + 1)),
                    )
                )
            if i < rows - 1:
                edges.append(
                    Edge(
                        source=current,
                        target=f"node-{i + 1}-{j}",
                        weight=floor_down + int(rng.integers(1, MAX_GRID_WEIGHT + 1)),
                    )
                )

    logger.info(f"Generated {rows}x{cols} grid graph")
    return Graph(nodes=tuple(nodes), edges=tuple(edges))
